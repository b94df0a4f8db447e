"""Classic data structures, recursion and backtracking exercises, and small algorithm puzzles."""

__version__ = "0.1.0"