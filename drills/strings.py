"""String puzzles: anagrams, subsequences and rotations."""

from __future__ import annotations

from collections.abc import Iterable


def is_anagram(s: str, t: str) -> bool:
    """True when ``t`` uses exactly the characters of ``s``."""
    return sorted(s) == sorted(t)


def is_subsequence(s: str, t: str) -> bool:
    """True when ``s`` can be read from ``t`` by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first sight."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def rotate_string(s: str, goal: str) -> bool:
    """True when some non-trivial shift count rotates ``s`` into ``goal``.

    Two empty strings are not considered rotations of each other.
    """
    return bool(s) and len(s) == len(goal) and goal in s + s