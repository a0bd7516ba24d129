"""Classic algorithm drills on arrays, strings, searching, stacks and dynamic programming."""

__version__ = "0.1.0"
__all__ = ["arrays", "strings", "searching", "dynamic", "stacks"]