# Defaults for the spellchecker, overridable from the environment
import os

# System word list, one word per line
DEFAULT_WORDS_PATH = "/usr/share/dict/words"

WORDS_PATH_ENV = "SPELLCHECK_WORDS"
LANGUAGE_ENV = "SPELLCHECK_LANGUAGE"

# Markers wrapped around unknown tokens in the rendering
UNKNOWN_OPEN = "{"
UNKNOWN_CLOSE = "}"

# Longest token the HTTP /distance endpoint accepts
MAX_DISTANCE_LENGTH = 256

BRIEF_DESCRIPTION = "checks spelling of word or content"


def get_words_path(override=None):
    """Resolve the dictionary path: explicit override, then env, then default."""
    if override:
        return override
    return os.environ.get(WORDS_PATH_ENV) or DEFAULT_WORDS_PATH


def get_language():
    """Language of the bundled word list to use instead of a file, if any."""
    return os.environ.get(LANGUAGE_ENV) or None
