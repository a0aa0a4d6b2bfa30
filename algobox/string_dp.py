"""Dynamic-programming problems on strings: distances, subsequences, matching, wrapping."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def edit_distance(s1: str, s2: str) -> int:
    """Fewest insertions, deletions and substitutions turning ``s1`` into ``s2``."""
    previous = list(range(len(s2) + 1))
    for i, a in enumerate(s1, 1):
        current = [i]
        for j, b in enumerate(s2, 1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], previous[j - 1], current[j - 1]))
        previous = current
    return previous[-1]


def longest_common_subsequence(s1: str, s2: str) -> int:
    """Length of the longest subsequence shared by ``s1`` and ``s2``."""
    previous = [0] * (len(s2) + 1)
    for a in s1:
        current = [0]
        for j, b in enumerate(s2, 1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_repeating_subsequence(s: str) -> int:
    """Length of the longest subsequence occurring twice at different positions."""
    previous = [0] * (len(s) + 1)
    for i, a in enumerate(s, 1):
        current = [0]
        for j, b in enumerate(s, 1):
            if i != j and a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def count_palindromic_subsequences(s: str) -> int:
    """Number of non-empty palindromic subsequences, counted by position."""
    n = len(s)
    if n == 0:
        return 0
    counts = [[0] * n for _ in range(n)]
    for i in range(n):
        counts[i][i] = 1
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            if s[i] == s[j]:
                counts[i][j] = 1 + counts[i + 1][j] + counts[i][j - 1]
            else:
                counts[i][j] = counts[i + 1][j] + counts[i][j - 1] - counts[i + 1][j - 1]
    return counts[0][n - 1]


def is_interleave(a: str, b: str, c: str) -> bool:
    """Whether ``c`` is formed by interleaving ``a`` and ``b`` keeping their orders."""
    if len(a) + len(b) != len(c):
        return False
    reachable = [[False] * (len(b) + 1) for _ in range(len(a) + 1)]
    reachable[0][0] = True
    for i in range(len(a) + 1):
        for j in range(len(b) + 1):
            if i == j == 0:
                continue
            ch = c[i + j - 1]
            from_a = i > 0 and a[i - 1] == ch and reachable[i - 1][j]
            from_b = j > 0 and b[j - 1] == ch and reachable[i][j - 1]
            reachable[i][j] = from_a or from_b
    return reachable[len(a)][len(b)]


def wildcard_match(wild: str, pattern: str) -> bool:
    """Whether ``pattern`` matches ``wild``, where ``?`` is any one character and ``*`` any run."""
    previous = [True] + [False] * len(pattern)
    for w in wild:
        current = [previous[0] and w == "*"]
        for j, p in enumerate(pattern, 1):
            if w == p or w == "?":
                current.append(previous[j - 1])
            elif w == "*":
                current.append(previous[j - 1] or previous[j] or current[j - 1])
            else:
                current.append(False)
        previous = current
    return previous[-1]


def word_break(s: str, words: Iterable[str]) -> bool:
    """Whether ``s`` splits into a sequence of dictionary words."""
    dictionary = list(words)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            len(word) <= end
            and reachable[end - len(word)]
            and s.startswith(word, end - len(word))
            for word in dictionary
        )
    return reachable[-1]


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the leftmost one on ties."""
    best_start, best_len = 0, 0
    for centre in range(len(s)):
        for offset in (0, 1):
            low, high = centre, centre + offset
            while low >= 0 and high < len(s) and s[low] == s[high]:
                if high - low + 1 > best_len:
                    best_start, best_len = low, high - low + 1
                low -= 1
                high += 1
    return s[best_start:best_start + best_len]


def word_wrap(arr: Sequence[int], k: int) -> int:
    """Least total squared slack wrapping words of the given lengths into lines of width ``k``.

    The last line carries no cost.
    """
    if any(length > k for length in arr):
        raise ValueError(f"a word is longer than the line width {k}")
    n = len(arr)
    cost = [0] * (n + 1)
    for start in range(n - 1, -1, -1):
        best = math.inf
        width = 0
        for end in range(start, n):
            width += arr[end]
            used = width + (end - start)
            if used > k:
                break
            if end == n - 1:
                best = 0
            else:
                best = min(best, (k - used) ** 2 + cost[end + 1])
        cost[start] = int(best)
    return cost[0]