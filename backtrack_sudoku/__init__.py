"""
backtrack_sudoku: solves 9x9 Sudoku puzzles by depth-first backtracking.
"""

__version__ = "1.0.0"
