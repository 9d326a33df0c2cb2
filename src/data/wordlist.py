"""
Word list sources for building a Dictionary.

A word list file holds one word per line. Line terminators are stripped and
empty lines are skipped; any other whitespace on a line is kept as part of the
word. The whole file is read before anything is returned, so a read failure
never leaves a half-built dictionary behind.
"""
from typing import List, Optional

import spellchecker

from src.spelling.config import get_words_path
from src.spelling.dictionary import Comparator, Dictionary, compare_words
from src.spelling.errors import DictionarySourceUnavailable


def read_word_list(path: str, encoding: str = "utf-8") -> List[str]:
    """Read a line-oriented word list.

    Raises:
        DictionarySourceUnavailable: the file cannot be opened or decoded.
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise DictionarySourceUnavailable(path, str(e)) from e

    words = []
    for line in lines:
        word = line.rstrip("\r\n")
        if word:
            words.append(word)
    return words


def load_builtin_words(language: str = "en") -> List[str]:
    """Word list bundled with pyspellchecker for `language`.

    These lists are lower-case only, so capitalised tokens will not match.
    """
    try:
        backend = spellchecker.SpellChecker(language=language)
    except ValueError as e:
        raise DictionarySourceUnavailable(f"pyspellchecker:{language}", str(e)) from e
    return [w for w in backend.word_frequency.keys() if w and "\n" not in w and "\r" not in w]


def load_dictionary(path: Optional[str] = None, language: Optional[str] = None,
                    compare: Comparator = compare_words) -> Dictionary:
    """Build a Dictionary from a word list file, or the bundled list for `language`.

    Without a path or language the configured default path is used.
    """
    if language:
        words = load_builtin_words(language)
    else:
        words = read_word_list(get_words_path(path))
    return Dictionary.build(words, compare=compare)
