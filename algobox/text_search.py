"""Substring search, border lengths, rotations and minimal covering windows."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_HASHES = ((26, 1_000_000_007), (27, 1_000_000_033))


def _prefix_function(seq: Sequence[object]) -> list[int]:
    border = [0] * len(seq)
    for i in range(1, len(seq)):
        k = border[i - 1]
        while k > 0 and seq[k] != seq[i]:
            k = border[k - 1]
        border[i] = k + (seq[k] == seq[i])
    return border


def pattern_search(text: str, pattern: str) -> list[int]:
    """Start indices of every (possibly overlapping) occurrence of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    border = _prefix_function(pattern)
    matches: list[int] = []
    k = 0
    for i, ch in enumerate(text):
        while k and ch != pattern[k]:
            k = border[k - 1]
        if ch == pattern[k]:
            k += 1
        if k == len(pattern):
            matches.append(i - k + 1)
            k = border[k - 1]
    return matches


def lps_length(s: str) -> int:
    """Length of the longest proper prefix of ``s`` that is also a suffix."""
    return _prefix_function(s)[-1] if s else 0


def min_chars_for_palindrome(s: str) -> int:
    """Fewest characters to add at the front to make ``s`` a palindrome."""
    combined: list[object] = [*s, None, *reversed(s)]
    return len(s) - _prefix_function(combined)[-1]


def _code(ch: str) -> int:
    return ord(ch) - ord("a")


def _hashes(chunk: str) -> tuple[int, ...]:
    values = []
    for base, mod in _HASHES:
        h = 0
        for ch in chunk:
            h = (h * base + _code(ch)) % mod
        values.append(h)
    return tuple(values)


def rabin_karp_search(pat: str, txt: str) -> list[int]:
    """Start indices of ``pat`` in ``txt`` found by double rolling hashes."""
    if not pat:
        raise ValueError("pattern must not be empty")
    m, n = len(pat), len(txt)
    if m > n:
        return []
    wanted = _hashes(pat)
    leading = tuple(pow(base, m, mod) for base, mod in _HASHES)
    current = _hashes(txt[:m])
    matches = [0] if current == wanted else []
    for i in range(1, n - m + 1):
        outgoing, incoming = _code(txt[i - 1]), _code(txt[i + m - 1])
        current = tuple(
            (h * base - outgoing * lead + incoming) % mod
            for h, lead, (base, mod) in zip(current, leading, _HASHES)
        )
        if current == wanted:
            matches.append(i)
    return matches


def are_rotations(s1: str, s2: str) -> bool:
    """Whether ``s1`` is a rotation of ``s2``."""
    return len(s1) == len(s2) and s1 in s2 + s2


def smallest_window(s: str, p: str) -> str:
    """Shortest, leftmost substring of ``s`` holding every character of ``p`` with multiplicity.

    Returns an empty string when no such window exists.
    """
    if not p:
        return ""
    need = Counter(p)
    missing = len(p)
    best: tuple[int, int] | None = None
    left = 0
    for right, ch in enumerate(s):
        if need[ch] > 0:
            missing -= 1
        need[ch] -= 1
        while missing == 0:
            if best is None or right - left + 1 < best[1] - best[0]:
                best = (left, right + 1)
            need[s[left]] += 1
            if need[s[left]] > 0:
                missing += 1
            left += 1
    return s[best[0]:best[1]] if best else ""


def smallest_distinct_window(s: str) -> int:
    """Length of the shortest substring containing every distinct character of ``s``."""
    distinct = len(set(s))
    counts: Counter[str] = Counter()
    present = 0
    best = len(s)
    left = 0
    for right, ch in enumerate(s):
        if counts[ch] == 0:
            present += 1
        counts[ch] += 1
        while present == distinct:
            best = min(best, right - left + 1)
            counts[s[left]] -= 1
            if counts[s[left]] == 0:
                present -= 1
            left += 1
    return best