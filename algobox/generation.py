"""Generators of permutations, subsequences, sentences, addresses and grid paths."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import groupby, product

_DIGITS = frozenset("0123456789")


def string_permutations(s: str) -> list[str]:
    """All permutations of ``s`` produced by successive swaps (duplicates kept)."""
    chars = list(s)
    result: list[str] = []

    def permute(i: int) -> None:
        if i == len(chars) - 1:
            result.append("".join(chars))
            return
        for a in range(i, len(chars)):
            chars[a], chars[i] = chars[i], chars[a]
            permute(i + 1)
            chars[a], chars[i] = chars[i], chars[a]

    if chars:
        permute(0)
    return result


def _subsequences(s: str, i: int, current: str) -> Iterator[str]:
    if i == len(s):
        if current:
            yield current
        return
    yield from _subsequences(s, i + 1, current + s[i])
    yield from _subsequences(s, i + 1, current)


def subsequences(s: str) -> list[str]:
    """All non-empty subsequences of ``s``, those taking earlier characters first."""
    return list(_subsequences(s, 0, ""))


def sentences(lists: Sequence[Sequence[str]]) -> list[list[str]]:
    """Every sentence made by taking one word from each list in turn."""
    return [list(words) for words in product(*lists)]


def _valid_octet(part: str) -> bool:
    return len(part) == 1 or (part[0] != "0" and int(part) <= 255)


def generate_ips(s: str) -> list[str]:
    """All valid dotted IPv4 addresses formed by inserting three dots into ``s``."""
    if not set(s) <= _DIGITS:
        raise ValueError("input must contain only decimal digits")
    result: list[str] = []

    def build(start: int, dots_left: int, prefix: str) -> None:
        if start >= len(s):
            return
        if dots_left == 0:
            tail = s[start:]
            if len(tail) <= 3 and _valid_octet(tail):
                result.append(prefix + tail)
            return
        for end in range(start + 1, min(start + 3, len(s)) + 1):
            part = s[start:end]
            if _valid_octet(part):
                build(end, dots_left - 1, prefix + part + ".")

    build(0, 3, "")
    return result


def count_and_say(n: int) -> str:
    """The ``n``-th term of the count-and-say sequence, starting from ``"1"``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def count_occurrences(grid: Sequence[Sequence[str]], target: str) -> int:
    """Number of paths through adjacent cells, each used once, that spell ``target``."""
    if not target:
        return 0
    rows = [list(row) for row in grid]
    visited: set[tuple[int, int]] = set()

    def walk(i: int, j: int, idx: int) -> int:
        if not (0 <= i < len(rows) and 0 <= j < len(rows[i])) or (i, j) in visited:
            return 0
        if rows[i][j] != target[idx]:
            return 0
        if idx == len(target) - 1:
            return 1
        visited.add((i, j))
        total = (
            walk(i + 1, j, idx + 1)
            + walk(i, j + 1, idx + 1)
            + walk(i - 1, j, idx + 1)
            + walk(i, j - 1, idx + 1)
        )
        visited.discard((i, j))
        return total

    return sum(walk(i, j, 0) for i, row in enumerate(rows) for j in range(len(row)))