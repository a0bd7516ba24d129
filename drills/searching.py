"""Search puzzles: binary search, rotated arrays, matrices and peaks."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from math import isqrt


def _require_items(values: Sequence, name: str) -> None:
    if not values:
        raise ValueError(f"{name} must not be empty")


def _pivot(nums: Sequence[int]) -> int:
    """Index of the smallest element of a rotated ascending sequence."""
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] > nums[right]:
            left = mid + 1
        else:
            right = mid
    return left


def _find_in_range(nums: Sequence[int], target: int, lo: int, hi: int) -> int:
    index = bisect_left(nums, target, lo, hi)
    if index < hi and nums[index] == target:
        return index
    return -1


def find_min(nums: Sequence[int]) -> int:
    """Smallest value of an ascending sequence of distinct values rotated at a pivot."""
    _require_items(nums, "nums")
    return nums[_pivot(nums)]


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of an element larger than its neighbours (edges count as -infinity)."""
    _require_items(nums, "nums")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] > nums[mid + 1]:
            right = mid
        else:
            left = mid + 1
    return left


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending sequence of distinct values, or -1."""
    if not nums:
        return -1
    pivot = _pivot(nums)
    if nums[pivot] <= target <= nums[-1]:
        return _find_in_range(nums, target, pivot, len(nums))
    return _find_in_range(nums, target, 0, pivot)


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in an ascending sequence of distinct values, or -1."""
    return _find_in_range(nums, target, 0, len(nums))


def is_perfect_square(num: int) -> bool:
    """True when ``num`` is the square of an integer."""
    if num < 0:
        return False
    root = isqrt(num)
    return root * root == num


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Look for ``target`` in a matrix that is ascending when read row by row."""
    if not matrix or not matrix[0]:
        return False
    columns = len(matrix[0])
    left, right = 0, len(matrix) * columns - 1
    while left <= right:
        mid = (left + right) // 2
        value = matrix[mid // columns][mid % columns]
        if value == target:
            return True
        if target > value:
            left = mid + 1
        else:
            right = mid - 1
    return False


def search_sorted_rows_and_columns(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Look for ``target`` in a matrix whose rows and columns each ascend."""
    if not matrix or not matrix[0]:
        return False
    row = len(matrix) - 1
    column = 0
    columns = len(matrix[0])
    while row >= 0 and column < columns:
        value = matrix[row][column]
        if value == target:
            return True
        if value > target:
            row -= 1
        else:
            column += 1
    return False


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Slowest whole eating speed that finishes all ``piles`` within ``h`` hours.

    When no speed is fast enough the largest pile size is returned.
    """
    _require_items(piles, "piles")
    left, right = 1, max(piles)
    while left < right:
        speed = (left + right) // 2
        hours = sum(-(-pile // speed) for pile in piles)
        if hours <= h:
            right = speed
        else:
            left = speed + 1
    return right