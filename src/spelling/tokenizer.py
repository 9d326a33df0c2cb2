import re
from typing import Iterator

# ASCII whitespace only; other characters belong to the token
_TOKEN_RE = re.compile(r"[^ \t\n\r\f\v]+")


def tokenize(text: str) -> Iterator[str]:
    """Yield whitespace-delimited tokens of `text` in order.

    Runs of whitespace collapse into one boundary, so no empty tokens are
    produced and empty input yields nothing.
    """
    for match in _TOKEN_RE.finditer(text):
        yield match.group(0)
