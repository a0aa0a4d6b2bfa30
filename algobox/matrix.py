"""Searches, rotations and area problems on rectangular integer matrices."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from itertools import accumulate, chain

Matrix = Sequence[Sequence[int]]


def search_matrix(matrix: Matrix, target: int) -> bool:
    """Whether ``target`` occurs in a matrix that is sorted in row-major order."""
    cols = len(matrix[0]) if matrix else 0
    low, high = 0, len(matrix) * cols - 1
    while low <= high:
        mid = (low + high) // 2
        row, col = divmod(mid, cols)
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def common_in_rows(mat: Matrix) -> list[int]:
    """Distinct values present in every row, in ascending order."""
    if not mat:
        return []
    common = set(mat[0])
    for row in mat[1:]:
        common &= set(row)
    return sorted(common)


def _count_at_most(mat: Matrix, value: int) -> int:
    return sum(bisect_right(row, value) for row in mat)


def kth_smallest(mat: Matrix, k: int) -> int:
    """The ``k``-th smallest value (1-based) of a matrix sorted along rows and columns."""
    total = sum(len(row) for row in mat)
    if not 1 <= k <= total:
        raise ValueError(f"k={k} out of range for {total} values")
    low, high = mat[0][0], mat[-1][-1]
    while low < high:
        mid = (low + high) // 2
        if _count_at_most(mat, mid) < k:
            low = mid + 1
        else:
            high = mid
    return low


def rotate_clockwise(mat: Matrix) -> list[list[int]]:
    """The matrix turned a quarter turn clockwise."""
    return [list(row) for row in zip(*reversed(mat))]


def max_value_difference(mat: Matrix) -> int:
    """Largest ``mat[c][d] - mat[a][b]`` with ``c > a`` and ``d > b``."""
    if len(mat) < 2 or len(mat[0]) < 2:
        raise ValueError("matrix must have at least two rows and two columns")
    # above[j]: smallest value in rows so far and columns 0..j.
    above = list(accumulate(mat[0], min))
    best: int | None = None
    for row in mat[1:]:
        current: list[int] = []
        for j, value in enumerate(row):
            if j == 0:
                current.append(min(value, above[0]))
                continue
            gain = value - above[j - 1]
            best = gain if best is None else max(best, gain)
            current.append(min(value, above[j], current[j - 1]))
        above = current
    assert best is not None
    return best


def largest_histogram_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle under a histogram of the given bar heights."""
    stack: list[int] = []
    best = 0
    bars = [*heights, 0]
    for i, height in enumerate(bars):
        while stack and bars[stack[-1]] >= height:
            top = bars[stack.pop()]
            width = i - stack[-1] - 1 if stack else i
            best = max(best, top * width)
        stack.append(i)
    return best


def max_rectangle_area(mat: Matrix) -> int:
    """Area of the largest all-ones rectangle in a 0/1 matrix."""
    if not mat:
        return 0
    heights = [0] * len(mat[0])
    best = 0
    for row in mat:
        heights = [h + 1 if cell == 1 else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_histogram_area(heights))
    return best


def matrix_median(mat: Matrix) -> int:
    """Median of a matrix whose rows are each sorted (lower median for even counts)."""
    if not mat or not mat[0]:
        raise ValueError("matrix must not be empty")
    wanted = (sum(len(row) for row in mat) + 1) // 2
    low = min(row[0] for row in mat)
    high = max(row[-1] for row in mat)
    while low < high:
        mid = (low + high) // 2
        if _count_at_most(mat, mid) < wanted:
            low = mid + 1
        else:
            high = mid
    return low


def row_with_max_ones(mat: Matrix) -> int | None:
    """Index of the first row with the most ones in a row-sorted 0/1 matrix, or ``None``."""
    if not mat:
        return None
    found: int | None = None
    row, col = 0, len(mat[0]) - 1
    while row < len(mat) and col >= 0:
        if mat[row][col]:
            found = row
            col -= 1
        else:
            row += 1
    return found


def sorted_matrix(mat: Matrix) -> list[list[int]]:
    """A matrix of the same shape holding all values sorted in row-major order."""
    values = iter(sorted(chain.from_iterable(mat)))
    return [[next(values) for _ in row] for row in mat]


def spiral_order(mat: Matrix) -> list[int]:
    """Values visited clockwise in a spiral from the top-left corner."""
    rows = [list(row) for row in mat]
    result: list[int] = []
    while rows:
        result.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return result