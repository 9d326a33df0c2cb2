# Package initializer for the spellchecking engine
from .dictionary import Dictionary, compare_words
from .edit_distance import distance
from .errors import (DictionarySourceUnavailable, InvalidArguments,
                     SpellcheckError, SubjectUnavailable)
from .spellcheck import ClassifiedToken, SpellChecker, check, render
from .tokenizer import tokenize

__all__ = [
    "ClassifiedToken",
    "Dictionary",
    "DictionarySourceUnavailable",
    "InvalidArguments",
    "SpellChecker",
    "SpellcheckError",
    "SubjectUnavailable",
    "check",
    "compare_words",
    "distance",
    "render",
    "tokenize",
]
