"""Everyday string tasks: palindromes, mappings, keypads, numerals, grouping and reordering."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby

_KEYPAD = (
    "2", "22", "222", "3", "33", "333", "4", "44", "444", "5", "55", "555",
    "6", "66", "666", "7", "77", "777", "7777", "8", "88", "888", "9", "99",
    "999", "9999",
)

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def is_palindrome(s: str) -> bool:
    """Whether ``s`` reads the same forwards and backwards."""
    return s == s[::-1]


def are_isomorphic(s1: str, s2: str) -> bool:
    """Whether the characters of ``s1`` map one-to-one onto those of ``s2``."""
    if len(s1) != len(s2):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s1, s2):
        if forward.setdefault(a, b) != b or backward.setdefault(b, a) != a:
            return False
    return True


def keypad_sequence(s: str) -> str:
    """Phone-keypad key presses typing the upper-case letters and spaces of ``s``."""
    presses: list[str] = []
    for ch in s:
        if ch == " ":
            presses.append("0")
        elif "A" <= ch <= "Z":
            presses.append(_KEYPAD[ord(ch) - ord("A")])
        else:
            raise ValueError(f"cannot type {ch!r} on the keypad")
    return "".join(presses)


def roman_to_decimal(s: str) -> int:
    """Value of a Roman numeral."""
    try:
        values = [_ROMAN[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman digit {exc.args[0]!r}") from None
    total = 0
    i = 0
    while i < len(values):
        if i + 1 < len(values) and values[i] < values[i + 1]:
            total += values[i + 1] - values[i]
            i += 2
        else:
            total += values[i]
            i += 1
    return total


def remove_consecutive(s: str) -> str:
    """``s`` with every run of equal adjacent characters collapsed to one."""
    return "".join(ch for ch, _ in groupby(s))


def reverse_chars(chars: Iterable[str]) -> list[str]:
    """The characters in reverse order."""
    return list(chars)[::-1]


def second_most_repeated(words: Sequence[str]) -> str | None:
    """The word with the second highest frequency, or ``None`` if there is none."""
    if len(words) <= 1:
        return None
    counts = Counter(words)
    highest = max(counts.values())
    best: str | None = None
    best_count = 0
    for word, count in counts.items():
        if count != highest and count > best_count:
            best, best_count = word, count
    return best


def duplicate_chars(s: str) -> list[tuple[str, int]]:
    """Characters occurring more than once with their counts, sorted by character."""
    return sorted((ch, count) for ch, count in Counter(s).items() if count > 1)


def group_anagrams(words: Iterable[str]) -> list[list[str]]:
    """Words grouped by anagram class, groups in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in words:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by every string."""
    if not strs:
        raise ValueError("at least one string is required")
    prefix = strs[0]
    for other in strs[1:]:
        length = 0
        for a, b in zip(prefix, other):
            if a != b:
                break
            length += 1
        prefix = prefix[:length]
    return prefix


def rearrange_string(s: str) -> str | None:
    """Reorder ``s`` so no two adjacent characters are equal, or ``None`` if impossible.

    The most frequent character is placed first; ties go to the larger character.
    """
    if not s:
        return ""
    heap = [(-count, -ord(ch)) for ch, count in Counter(s).items()]
    heapq.heapify(heap)
    neg_count, neg_code = heapq.heappop(heap)
    held = (neg_count + 1, neg_code)
    result = [chr(-neg_code)]
    while heap:
        neg_count, neg_code = heapq.heappop(heap)
        result.append(chr(-neg_code))
        if held[0] < 0:
            heapq.heappush(heap, held)
        held = (neg_count + 1, neg_code)
    if len(result) != len(s):
        return None
    return "".join(result)


def transform_cost(a: str, b: str) -> int:
    """Fewest moves of a character to the front turning ``a`` into ``b``."""
    if Counter(a) != Counter(b):
        raise ValueError("the strings are not anagrams of each other")
    moves = 0
    i = len(a) - 1
    for target in reversed(b):
        while i >= 0 and a[i] != target:
            moves += 1
            i -= 1
        i -= 1
        if i < 0:
            break
    return moves


def unoccupied_computers(n: int, s: str) -> int:
    """Customers turned away from ``n`` computers given arrival/departure letters ``s``.

    Each letter appears twice: its first occurrence is an arrival, the second a
    departure; a customer turned away leaves without freeing a computer.
    """
    free = n
    seen: set[str] = set()
    seated: set[str] = set()
    turned_away = 0
    for ch in s:
        if ch not in seen:
            seen.add(ch)
            if free > 0:
                free -= 1
                seated.add(ch)
            else:
                turned_away += 1
        elif ch in seated:
            free += 1
    return turned_away


def min_moves_to_palindrome(s: str) -> int:
    """Fewest adjacent swaps turning ``s`` into a palindrome."""
    chars = list(s)
    moves = 0
    while chars:
        last = len(chars) - 1
        t = chars.index(chars[last])
        if t == last:
            moves += last // 2
            chars.pop()
        else:
            moves += t
            del chars[t]
            chars.pop()
    return moves