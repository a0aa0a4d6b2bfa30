"""Allocation and placement problems solved by binary or ternary search."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Iterable, Sequence


def soldiers_defeated(strengths: Iterable[int], power: int) -> tuple[int, int]:
    """Number and total strength of the soldiers no stronger than ``power``."""
    ordered = sorted(strengths)
    beaten = ordered[: bisect_right(ordered, power)]
    return len(beaten), sum(beaten)


def _fits(pages: Sequence[int], students: int, limit: int) -> bool:
    used = 1
    load = 0
    for count in pages:
        if load + count > limit:
            used += 1
            load = count
        else:
            load += count
    return used <= students


def find_pages(arr: Sequence[int], k: int) -> int:
    """Smallest possible maximum of pages per student when books go in order to ``k`` students."""
    if not arr:
        raise ValueError("there must be at least one book")
    if not 1 <= k <= len(arr):
        raise ValueError(f"cannot share {len(arr)} books among {k} students")
    low, high = max(arr), sum(arr)
    best = high
    while low <= high:
        mid = (low + high) // 2
        if _fits(arr, k, mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def _can_cook(rank: Sequence[int], minutes: int, wanted: int) -> bool:
    # A cook of rank r makes p items in r * p * (p + 1) / 2 minutes.
    made = sum((math.isqrt(1 + 8 * minutes // r) - 1) // 2 for r in rank)
    return made >= wanted


def min_cook_time(rank: Sequence[int], m: int) -> int:
    """Fewest minutes for cooks of the given ranks to prepare ``m`` items together."""
    low, high = 1, 5 * m * (m + 1)
    while low < high:
        mid = (low + high) // 2
        if _can_cook(rank, mid, m):
            high = mid
        else:
            low = mid + 1
    return high


def max_marker(arr: Sequence[int], m: int) -> int:
    """Highest cutting height that still yields at least ``m`` units from the trees."""
    low, high = 0, sum(arr)
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if sum(max(0, height - mid) for height in arr) >= m:
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def _can_seat(positions: Sequence[int], players: int, gap: int) -> bool:
    last = positions[0]
    players -= 1
    for position in positions[1:]:
        if players <= 0:
            break
        if position - last >= gap:
            players -= 1
            last = position
    return players <= 0


def chess_tournament(positions: Iterable[int], c: int) -> int:
    """Largest minimum distance achievable when seating ``c`` players in the given rooms."""
    ordered = sorted(positions)
    if not ordered:
        raise ValueError("there must be at least one room")
    low, high = 1, ordered[-1]
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if _can_seat(ordered, c, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def _distance_sum(
    a: int, b: int, c: int, x: float, points: Sequence[Sequence[int]]
) -> float:
    y = -(a * x + c) / b
    return sum(math.hypot(x - px, y - py) for px, py in points)


def optimum_distance(a: int, b: int, c: int, points: Sequence[Sequence[int]]) -> float:
    """Least total distance from a point on ``a*x + b*y + c = 0`` to all given points."""
    if b == 0:
        raise ValueError("the line must not be vertical (b == 0)")
    low, high = -1e6, 1e6
    while high - low > 1e-6:
        third = (high - low) / 3
        mid1, mid2 = low + third, high - third
        if _distance_sum(a, b, c, mid1, points) < _distance_sum(a, b, c, mid2, points):
            high = mid2
        else:
            low = mid1
    return _distance_sum(a, b, c, (low + high) / 2, points)