"""Sudoku played in a terminal or a pygame window, a backtracking solver, and a small matrix toolkit."""

__version__ = "0.1.0"
__all__ = ["button", "console", "gui", "matrix", "sudoku"]