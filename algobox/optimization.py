"""Profit, jump and scheduling optimisation problems over integer sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 if none is profitable."""
    if not prices:
        return 0
    highest = prices[-1]
    best = 0
    for price in reversed(prices[:-1]):
        best = max(best, highest - price)
        highest = max(highest, price)
    return best


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Best profit from at most two non-overlapping buy/sell transactions."""
    # ahead[t][holding_allowed]: best result from the next day on with t
    # transactions left; index 1 means a buy is still possible.
    ahead = [[0, 0] for _ in range(3)]
    for price in reversed(prices):
        current = [[0, 0] for _ in range(3)]
        for left in (1, 2):
            current[left][1] = max(-price + ahead[left][0], ahead[left][1])
            current[left][0] = max(price + ahead[left - 1][1], ahead[left][0])
        ahead = current
    return ahead[2][1]


def min_jumps(arr: Sequence[int]) -> int:
    """Fewest jumps to reach the last index, each value giving the longest jump; -1 if impossible."""
    last = len(arr) - 1
    reach = boundary = jumps = 0
    for i, step in enumerate(arr):
        reach = max(reach, i + step)
        if reach >= last:
            return jumps + 1
        if i == boundary:
            if i == reach:
                return -1
            boundary = reach
            jumps += 1
    return -1


def min_height_difference(arr: Sequence[int], k: int) -> int:
    """Smallest spread after raising or lowering every height by ``k``, never below zero."""
    heights = sorted(arr)
    if not heights:
        raise ValueError("sequence must not be empty")
    lowest, highest = heights[0], heights[-1]
    best = highest - lowest
    for previous, value in zip(heights, heights[1:]):
        if value - k < 0:
            continue
        tallest = max(previous + k, highest - k)
        shortest = min(value - k, lowest + k)
        best = min(best, tallest - shortest)
    return best


def max_job_profit(
    start: Sequence[int], end: Sequence[int], profit: Sequence[int]
) -> int:
    """Largest total profit from jobs whose time spans do not overlap."""
    if not len(start) == len(end) == len(profit):
        raise ValueError("start, end and profit must have the same length")
    jobs = sorted(zip(start, end, profit))
    starts = [job[0] for job in jobs]
    count = len(jobs)
    best = [0] * (count + 1)
    for i in range(count - 1, -1, -1):
        _, finish, gain = jobs[i]
        following = bisect_left(starts, finish, i + 1)
        best[i] = max(gain + best[following], best[i + 1])
    return best[0]


def maximise_path_sum(arr1: Sequence[int], arr2: Sequence[int]) -> int:
    """Largest sum walking two sorted sequences, switching only at common values."""
    i = j = 0
    total = sum1 = sum2 = 0
    while i < len(arr1) and j < len(arr2):
        if arr1[i] < arr2[j]:
            sum1 += arr1[i]
            i += 1
        elif arr1[i] > arr2[j]:
            sum2 += arr2[j]
            j += 1
        else:
            total += max(sum1, sum2) + arr1[i]
            i += 1
            j += 1
            sum1 = sum2 = 0
    sum1 += sum(arr1[i:])
    sum2 += sum(arr2[j:])
    return total + max(sum1, sum2)