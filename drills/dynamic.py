"""Dynamic-programming puzzles: sequences, paths, robbers and edit distance."""

from __future__ import annotations

from collections.abc import Sequence
from math import comb


def _require_grid(grid: Sequence[Sequence[int]]) -> None:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")


def _require_non_negative(n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative")


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    _require_non_negative(n, "n")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest subsequence shared by both strings."""
    previous = [0] * (len(text2) + 1)
    for char1 in text1:
        row = [0]
        for j, char2 in enumerate(text2):
            if char1 == char2:
                row.append(previous[j] + 1)
            else:
                row.append(max(previous[j + 1], row[j]))
        previous = row
    return previous[-1]


def longest_palindrome_subseq(s: str) -> int:
    """Length of the longest palindromic subsequence of ``s``."""
    return longest_common_subsequence(s, s[::-1])


def rob(nums: Sequence[int]) -> int:
    """Most loot from a row of houses when no two neighbours may be robbed."""
    before, best = 0, 0
    for value in nums:
        before, best = best, max(best, before + value)
    return best


def rob_circular(nums: Sequence[int]) -> int:
    """Like :func:`rob`, but the first and last houses are neighbours."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    return max(rob(nums[:-1]), rob(nums[1:]))


def unique_paths(m: int, n: int) -> int:
    """Right/down paths from the top-left to the bottom-right of an m-by-n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    return comb(m + n - 2, m - 1)


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Right/down paths through ``grid`` avoiding every non-zero cell."""
    _require_grid(grid)
    ways = [0] * len(grid[0])
    ways[0] = 1
    for row in grid:
        for j, cell in enumerate(row):
            if cell != 0:
                ways[j] = 0
            elif j > 0:
                ways[j] += ways[j - 1]
    return ways[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a right/down path from the top-left to the bottom-right."""
    _require_grid(grid)
    best: list[int] = []
    for row in grid:
        if not best:
            running = 0
            for cell in row:
                running += cell
                best.append(running)
            continue
        best[0] += row[0]
        for j in range(1, len(row)):
            best[j] = row[j] + min(best[j], best[j - 1])
    return best[-1]


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time (zero steps give 0)."""
    _require_non_negative(n, "n")
    if n <= 1:
        return n
    return fib(n + 1)


def min_distance(word1: str, word2: str) -> int:
    """Fewest insertions, deletions and substitutions turning ``word1`` into ``word2``."""
    previous = list(range(len(word2) + 1))
    for i, char1 in enumerate(word1, start=1):
        row = [i]
        for j, char2 in enumerate(word2, start=1):
            if char1 == char2:
                row.append(previous[j - 1])
            else:
                row.append(1 + min(row[j - 1], previous[j], previous[j - 1]))
        previous = row
    return previous[-1]


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top, starting on step 0 or 1 and climbing one or two."""
    from_next = from_after = 0
    for step_cost in reversed(cost):
        from_next, from_after = step_cost + min(from_next, from_after), from_next
    return min(from_next, from_after)