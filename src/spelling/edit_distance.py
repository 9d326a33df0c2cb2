"""
Levenshtein edit distance between two tokens.
"""
from typing import Sequence

import numpy as np


def distance_matrix(a: Sequence, b: Sequence) -> np.ndarray:
    """Build the full (len(a)+1) x (len(b)+1) dynamic-programming table.

    Cell (i, j) holds the number of single-character insertions, deletions or
    substitutions needed to turn a[:i] into b[:j].
    """
    m, n = len(a), len(b)
    dp = np.zeros((m + 1, n + 1), dtype=np.int64)

    # Cost of transforming to/from the empty string
    dp[:, 0] = np.arange(m + 1)
    dp[0, :] = np.arange(n + 1)

    for i in range(1, m + 1):
        ai = a[i - 1]
        for j in range(1, n + 1):
            if ai == b[j - 1]:
                dp[i, j] = dp[i - 1, j - 1]
            else:
                dp[i, j] = 1 + min(dp[i - 1, j], dp[i, j - 1], dp[i - 1, j - 1])
    return dp


def distance(a: Sequence, b: Sequence) -> int:
    """Minimum number of single-character edits turning `a` into `b`."""
    return int(distance_matrix(a, b)[len(a), len(b)])
