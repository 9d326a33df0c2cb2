"""Spell checking of whitespace-delimited text.

Each token of the subject is looked up in a `Dictionary` as-is: casing and any
punctuation glued to the token are kept, so ``fox.`` is only known if the
dictionary holds ``fox.``. Repeated tokens are classified independently and
the output keeps the input order.
"""
from typing import Iterable, Iterator, List, NamedTuple

from .config import UNKNOWN_CLOSE, UNKNOWN_OPEN
from .dictionary import Dictionary
from .tokenizer import tokenize


class ClassifiedToken(NamedTuple):
    token: str
    known: bool


def check(text: str, dictionary: Dictionary) -> Iterator[ClassifiedToken]:
    """Classify every token of `text` against `dictionary`, in order."""
    for token in tokenize(text):
        yield ClassifiedToken(token, dictionary.contains(token))


def render(classified: Iterable[ClassifiedToken], open_marker: str = UNKNOWN_OPEN,
           close_marker: str = UNKNOWN_CLOSE) -> str:
    """Render classified tokens as ``known {unknown} known`` plus a newline."""
    parts = []
    for item in classified:
        if item.known:
            parts.append(item.token)
        else:
            parts.append(f"{open_marker}{item.token}{close_marker}")
    return " ".join(parts) + "\n"


class SpellChecker:
    def __init__(self, dictionary: Dictionary, open_marker: str = UNKNOWN_OPEN,
                 close_marker: str = UNKNOWN_CLOSE):
        """Initialize the SpellChecker.

        Args:
            dictionary: Already built dictionary; it is only read.
            open_marker: Text placed before unknown tokens when rendering.
            close_marker: Text placed after unknown tokens when rendering.
        """
        self.dictionary = dictionary
        self.open_marker = open_marker
        self.close_marker = close_marker

    def is_known(self, word: str) -> bool:
        if not word:
            return False
        return self.dictionary.contains(word)

    def check(self, text: str) -> Iterator[ClassifiedToken]:
        return check(text, self.dictionary)

    def unknown_words(self, text: str) -> List[str]:
        """Unknown tokens of `text` in order, repeats included."""
        return [item.token for item in self.check(text) if not item.known]

    def render(self, text: str) -> str:
        return render(self.check(text), self.open_marker, self.close_marker)
