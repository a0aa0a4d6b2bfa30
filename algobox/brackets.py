"""Bracket balancing and binary-string alternation problems."""

from __future__ import annotations

_PAIRS = {")": "(", "}": "{", "]": "["}


def is_balanced(s: str) -> bool:
    """Whether the brackets ``()[]{}`` in ``s`` are properly nested; other characters are ignored."""
    stack: list[str] = []
    for ch in s:
        if ch in "({[":
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack[-1] != _PAIRS[ch]:
                return False
            stack.pop()
    return not stack


def min_bracket_swaps(s: str) -> int:
    """Fewest adjacent swaps to balance a string of ``[`` and ``]``."""
    opened = closed = swaps = imbalance = 0
    for ch in s:
        if ch == "[":
            opened += 1
            if imbalance > 0:
                swaps += imbalance
                imbalance -= 1
        else:
            closed += 1
            imbalance = closed - opened
    return swaps


def min_reversals(s: str) -> int:
    """Fewest bracket reversals to balance a string of ``{`` and ``}``."""
    if len(s) % 2:
        raise ValueError("a string of odd length cannot be balanced")
    reversals = 0
    unmatched = 0
    for ch in s:
        if ch == "}":
            if unmatched == 0:
                reversals += 1
                unmatched += 1
            else:
                unmatched -= 1
        else:
            unmatched += 1
    return reversals + unmatched // 2


def max_balanced_substrings(s: str) -> int:
    """Most pieces ``s`` splits into with as many ``0`` as ``1`` in each."""
    zeros = ones = pieces = 0
    for ch in s:
        if ch == "0":
            zeros += 1
        else:
            ones += 1
        if zeros == ones:
            pieces += 1
    if zeros != ones:
        raise ValueError("the string has unequal numbers of 0s and 1s")
    return pieces


def min_flips(s: str) -> int:
    """Fewest flips to make a binary string alternate."""
    if not set(s) <= {"0", "1"}:
        raise ValueError("input must be a binary string")
    mismatches = sum(1 for i, ch in enumerate(s) if ch != "01"[i % 2])
    return min(mismatches, len(s) - mismatches)