"""Error kinds raised by the spellchecker.

Every error is fatal to the operation that raised it. The CLI turns them into
exit codes and the HTTP app into status codes.
"""


class SpellcheckError(Exception):
    """Base class for spellcheck failures."""

    exit_code = 1


class DictionarySourceUnavailable(SpellcheckError):
    """The word list could not be opened or read."""

    exit_code = 3

    def __init__(self, source, reason=None):
        self.source = source
        self.reason = reason
        message = f"dictionary source unavailable: {source}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class SubjectUnavailable(SpellcheckError):
    """The subject file exists but could not be read."""

    exit_code = 4

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"could not read subject file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidArguments(SpellcheckError):
    """No subject was supplied."""

    exit_code = 2
