"""
Ordered set of known words backed by a binary search tree.

The tree is not self-balancing. `Dictionary.build` sorts the word list and
inserts it in median order so the depth stays logarithmic; inserting an
already sorted list one word at a time (``presort=False``) degrades every
lookup to a linear walk.
"""
import functools
import warnings
from typing import Callable, Iterable, Iterator, List, Optional

Comparator = Callable[[str, str], int]


def compare_words(a: str, b: str) -> int:
    """Lexicographic, case-sensitive three-way comparison."""
    return (a > b) - (a < b)


class _Node:
    __slots__ = ("word", "left", "right")

    def __init__(self, word: str):
        self.word = word
        self.left: Optional["_Node"] = None
        self.right: Optional["_Node"] = None


class Dictionary:
    """Deduplicated, ordered collection of correctly spelled words.

    Filled through `insert` during the build phase, then `freeze` ends that
    phase. Lookups are only answered once frozen and use the same comparator
    the tree was built with. `build` does both steps.
    """

    def __init__(self, compare: Comparator = compare_words):
        self._compare = compare
        self._root: Optional[_Node] = None
        self._size = 0
        self._frozen = False

    @classmethod
    def build(cls, words: Iterable[str], compare: Comparator = compare_words,
              presort: bool = True) -> "Dictionary":
        """Build a read-only dictionary from a word list.

        Args:
            words: Words to insert. Duplicates are ignored.
            compare: Three-way comparator used for both insertion and lookup.
            presort: Sort and deduplicate first, then insert medians so the
                tree is balanced. When False words go in as given.
        """
        dictionary = cls(compare=compare)
        if presort:
            ordered = _sorted_unique(words, compare)
            for word in _median_order(ordered):
                dictionary.insert(word)
        else:
            for word in words:
                dictionary.insert(word)
        dictionary.freeze()

        if dictionary._size == 0:
            warnings.warn("Dictionary built from an empty word list, every token will be unknown.",
                          UserWarning)
        return dictionary

    def freeze(self) -> None:
        """End the build phase; later inserts raise and lookups are allowed."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def compare(self) -> Comparator:
        return self._compare

    def insert(self, word: str) -> bool:
        """Add `word`; returns False if it was already present."""
        if self._frozen:
            raise RuntimeError("Dictionary is read-only once built")
        if not word:
            raise ValueError("Cannot insert an empty word")
        if "\n" in word or "\r" in word:
            raise ValueError(f"Word contains a line terminator: {word!r}")

        if self._root is None:
            self._root = _Node(word)
            self._size = 1
            return True

        node = self._root
        while True:
            cmp = self._compare(word, node.word)
            if cmp == 0:
                return False
            if cmp < 0:
                if node.left is None:
                    node.left = _Node(word)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(word)
                    break
                node = node.right
        self._size += 1
        return True

    def contains(self, word: str) -> bool:
        if not self._frozen:
            raise RuntimeError("Dictionary is still being built, call freeze() first")
        node = self._root
        while node is not None:
            cmp = self._compare(word, node.word)
            if cmp == 0:
                return True
            node = node.left if cmp < 0 else node.right
        return False

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        # In-order walk with an explicit stack; degenerate trees can be deep
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.word
            node = node.right

    def __repr__(self) -> str:
        return f"Dictionary(size={self._size})"


def _sorted_unique(words: Iterable[str], compare: Comparator) -> List[str]:
    ordered = sorted(words, key=functools.cmp_to_key(compare))
    unique: List[str] = []
    for word in ordered:
        if not unique or compare(unique[-1], word) != 0:
            unique.append(word)
    return unique


def _median_order(ordered: List[str]) -> Iterator[str]:
    """Yield a sorted list so that inserting in this order gives a balanced tree."""
    stack = [(0, len(ordered))]
    while stack:
        lo, hi = stack.pop()
        if lo >= hi:
            continue
        mid = (lo + hi) // 2
        yield ordered[mid]
        stack.append((mid + 1, hi))
        stack.append((lo, mid))
