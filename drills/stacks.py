"""Stack puzzles: bracket matching and next-greater lookups."""

from __future__ import annotations

from collections.abc import Sequence

_OPENERS = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(s: str) -> bool:
    """True when every bracket in ``s`` is closed in the right order.

    Characters that are not brackets are accepted only while some bracket
    is open.
    """
    stack: list[str] = []
    for char in s:
        if char in "([{":
            stack.append(char)
            continue
        if not stack:
            return False
        opener = _OPENERS.get(char)
        if opener is not None:
            if stack[-1] != opener:
                return False
            stack.pop()
    return not stack


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the first larger value after it in ``nums2``, or -1.

    Raises KeyError for a value of ``nums1`` that does not occur in ``nums2``.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in nums2:
        while stack and value > stack[-1]:
            greater[stack.pop()] = value
        stack.append(value)
    for value in stack:
        greater[value] = -1
    return [greater[value] for value in nums1]


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """Next larger value for each element, wrapping around the end, or -1."""
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for position in range(2 * n):
        index = position % n
        value = nums[index]
        while stack and value > nums[stack[-1]]:
            result[stack.pop()] = value
        if position < n:
            stack.append(index)
    return result


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Days to wait for a warmer temperature, 0 where none comes."""
    result = [0] * len(temperatures)
    stack: list[int] = []
    for index, temperature in enumerate(temperatures):
        while stack and temperature > temperatures[stack[-1]]:
            earlier = stack.pop()
            result[earlier] = index - earlier
        stack.append(index)
    return result