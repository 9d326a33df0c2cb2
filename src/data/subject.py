"""Resolve the CLI subject argument into the text to check."""
import os
from typing import Optional

from src.spelling.errors import InvalidArguments, SubjectUnavailable


def resolve_subject_text(raw: Optional[str], encoding: str = "utf-8") -> str:
    """Return the text to spellcheck for a raw subject argument.

    An existing regular file is read; anything else is taken as literal text.
    """
    if raw is None:
        raise InvalidArguments("no subject supplied")

    if raw and os.path.isfile(raw):
        try:
            with open(raw, "r", encoding=encoding) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SubjectUnavailable(raw, str(e)) from e
    return raw
