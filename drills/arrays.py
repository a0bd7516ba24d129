"""Classic array puzzles: sums, scans, voting, partitioning and in-place moves."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence
from functools import reduce
from itertools import accumulate
from math import gcd
from operator import xor


def _require_items(values: Sequence[int], name: str) -> None:
    if not values:
        raise ValueError(f"{name} must not be empty")


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return index pairs (earlier, later) whose values add up to ``target``.

    Every match met in a single left-to-right pass is reported, flattened
    into one list; an empty list means no pair was found.
    """
    seen: dict[int, int] = {}
    result: list[int] = []
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            result.extend((partner, index))
        else:
            seen[value] = index
    return result


def max_profit(prices: Sequence[int]) -> int:
    """Best gain from buying once and selling later; zero if no gain exists."""
    _require_items(prices, "prices")
    cheapest = prices[0]
    best = 0
    for price in prices[1:]:
        cheapest = min(cheapest, price)
        best = max(best, price - cheapest)
    return best


def replace_elements(arr: Sequence[int]) -> list[int]:
    """Replace each element by the largest one to its right, the last by -1."""
    result: list[int] = []
    max_right = -1
    for value in reversed(arr):
        result.append(max_right)
        max_right = max(max_right, value)
    result.reverse()
    return result


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Index of the station from which the full circuit can be driven, or -1."""
    pairs = list(zip(gas, cost, strict=True))
    if sum(gas) < sum(cost):
        return -1
    start = 0
    tank = 0
    for index, (fuel, spend) in enumerate(pairs):
        tank += fuel - spend
        if tank < 0:
            start = index + 1
            tank = 0
    return start


def single_number(nums: Sequence[int]) -> int:
    """The one value that is not paired up, found by XOR-ing everything."""
    return reduce(xor, nums, 0)


def find_lucky(arr: Sequence[int]) -> int:
    """Largest value whose frequency equals itself, or -1 if there is none."""
    freq = Counter(arr)
    return max((value for value, count in freq.items() if value == count), default=-1)


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a contiguous, non-empty run of ``nums``."""
    _require_items(nums, "nums")
    best = nums[0]
    left = right = 1
    for front, back in zip(nums, reversed(nums)):
        left = (left or 1) * front
        right = (right or 1) * back
        best = max(best, left, right)
    return best


def running_sum(nums: Sequence[int]) -> list[int]:
    """Prefix sums of ``nums``."""
    return list(accumulate(nums))


def num_identical_pairs(nums: Sequence[int]) -> int:
    """Number of index pairs i < j with equal values."""
    seen: Counter[int] = Counter()
    pairs = 0
    for value in nums:
        pairs += seen[value]
        seen[value] += 1
    return pairs


def num_water_bottles(num_bottles: int, num_exchange: int) -> int:
    """Bottles drunk when ``num_exchange`` empties buy one full bottle."""
    if num_exchange < 2:
        raise ValueError("num_exchange must be at least 2")
    if num_bottles <= 0:
        return 0
    return num_bottles + (num_bottles - 1) // (num_exchange - 1)


def majority_element(nums: Sequence[int]) -> int:
    """The element occurring more than half the time (Boyer-Moore vote)."""
    _require_items(nums, "nums")
    candidate = nums[0]
    votes = 1
    for value in nums[1:]:
        if value == candidate:
            votes += 1
        else:
            votes -= 1
            if votes == 0:
                candidate = value
                votes = 1
    return candidate


def majority_elements(nums: Sequence[int]) -> list[int]:
    """All elements occurring more than ``len(nums) // 3`` times."""
    first = second = None
    first_votes = second_votes = 0
    for value in nums:
        if value == first:
            first_votes += 1
        elif value == second:
            second_votes += 1
        elif first_votes == 0:
            first, first_votes = value, 1
        elif second_votes == 0:
            second, second_votes = value, 1
        else:
            first_votes -= 1
            second_votes -= 1

    counts = Counter(value for value in nums if value in (first, second))
    threshold = len(nums) // 3
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and counts[candidate] > threshold
    ]


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = list(nums[len(nums) - k:]) + list(nums[:len(nums) - k])


def interchangeable_rectangles(rectangles: Sequence[Sequence[int]]) -> int:
    """Number of rectangle pairs sharing the same width-to-height ratio."""
    seen: Counter[tuple[int, int]] = Counter()
    pairs = 0
    for width, height in rectangles:
        divisor = gcd(width, height) or 1
        ratio = (width // divisor, height // divisor)
        pairs += seen[ratio]
        seen[ratio] += 1
    return pairs


def maximum_difference(nums: Sequence[int]) -> int:
    """Largest ``nums[j] - nums[i]`` with i < j and nums[i] < nums[j], else -1."""
    best = -1
    lowest: int | None = None
    for value in nums:
        if lowest is not None and value > lowest:
            best = max(best, value - lowest)
        if lowest is None or value < lowest:
            lowest = value
    return best


def missing_number(nums: Sequence[int]) -> int:
    """The one number of ``0..len(nums)`` absent from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move zeroes to the end in place, keeping the order of the others."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def trap(heights: Sequence[int]) -> int:
    """Units of rain water trapped between the bars of an elevation map."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            if left_max < heights[left]:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if right_max < heights[right]:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a contiguous, non-empty run (Kadane)."""
    _require_items(nums, "nums")
    best = nums[0]
    current = 0
    for value in nums:
        current += value
        best = max(best, current)
        current = max(current, 0)
    return best


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place with one Dutch-flag pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            mid += 1
            low += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1