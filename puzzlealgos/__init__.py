"""Exact solutions to classic integer, sequence and string puzzles."""

__version__ = "0.1.0"
__all__ = ["bits", "combinatorics", "digits", "mirror", "search", "sequences", "text"]