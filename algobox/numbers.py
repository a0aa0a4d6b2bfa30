"""Number-theoretic helpers: big factorials, trailing zeros, squares and products."""

from __future__ import annotations

import math
from collections.abc import Sequence


def factorial_digits(n: int) -> list[int]:
    """Decimal digits of ``n!``, most significant first; ``[1]`` for ``n < 2``."""
    return [int(digit) for digit in str(math.factorial(max(n, 0)))]


def _trailing_zeros(num: int) -> int:
    count = 0
    power = 5
    while power <= num:
        count += num // power
        power *= 5
    return count


def min_number_with_trailing_zeros(n: int) -> int:
    """Smallest number whose factorial ends in at least ``n`` zeros."""
    if n < 0:
        raise ValueError("n must not be negative")
    low, high = 1, 5 * n
    while low < high:
        mid = (low + high) // 2
        if _trailing_zeros(mid) >= n:
            high = mid
        else:
            low = mid + 1
    return high


def count_squares(n: int) -> int:
    """Number of positive perfect squares strictly below ``n``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return math.isqrt(n - 1)


def product_except_self(arr: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    zeros = arr.count(0) if isinstance(arr, list) else sum(1 for v in arr if v == 0)
    product = math.prod(value for value in arr if value != 0)
    if zeros > 1:
        return [0] * len(arr)
    if zeros == 1:
        return [product if value == 0 else 0 for value in arr]
    return [product // value for value in arr]