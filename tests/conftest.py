"""
Shared puzzles for the tests.
"""

from typing import List

import pytest

from backtrack_sudoku.grid import Grid


def rows_from_strings(lines: List[str]) -> List[List[int]]:
    return [[int(ch) for ch in line] for line in lines]


# Wikipedia's example puzzle and its published solution.
EASY_PUZZLE = rows_from_strings([
    "530070000",
    "600195000",
    "098000060",
    "800060003",
    "400803001",
    "700020006",
    "060000280",
    "000419005",
    "000080079",
])

EASY_SOLUTION = rows_from_strings([
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
])

EASY_PUZZLE_TEXT = """
# Wikipedia's example puzzle
5 3 x x 7 x x x x
6 x x 1 9 5 x x x
x 9 8 x x x x 6 x
8 x x x 6 x x x 3
4 x x 8 x 3 x x 1
7 x x x 2 x x x 6
x 6 x x x x 2 8 x
x x x 4 1 9 x x 5
x x x x 8 x x 7 9
"""


@pytest.fixture
def easy_puzzle() -> Grid:
    return Grid(EASY_PUZZLE)


@pytest.fixture
def easy_solution() -> Grid:
    return Grid(EASY_SOLUTION)
