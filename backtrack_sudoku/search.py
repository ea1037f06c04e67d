#!/usr/bin/env python

"""
backtrack_sudoku/search.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

**Depth-first backtracking search.**

Strategy:

1.  Find the first empty cell, in row-major order.

2.  For each digit that is not already used in that cell's row, column, or
    3x3 box (in ascending order), place it and recurse on the next empty
    cell.

3.  If the recursion succeeds, we are done. If it fails, try the next digit.
    If there are no digits left to try, blank the cell again and report
    failure to the level above.

4.  If there are no empty cells left, we have a solution.

Since we only ever place a digit that is legal at the time, a full grid is a
valid grid, provided the starting digits were consistent with each other.
That is checked once, before we start.

The grid is modified in place and blanked again on the way back out of a
failed branch, so an unsolvable puzzle leaves the grid exactly as it was.

Recursion depth is at most the number of empty cells (81).

"""

import logging
from typing import Optional, Tuple

from backtrack_sudoku.common import EMPTY
from backtrack_sudoku.constraints import candidates
from backtrack_sudoku.grid import Grid

log = logging.getLogger(__name__)


# =============================================================================
# SearchStats
# =============================================================================

class SearchStats(object):
    """
    Counts how hard the search had to work.
    """
    def __init__(self) -> None:
        self.placements = 0
        self.backtracks = 0

    def __str__(self) -> str:
        return (f"{self.placements} placement(s), "
                f"{self.backtracks} backtrack(s)")


# =============================================================================
# Search
# =============================================================================

def _solve_from(grid: Grid, cell: Optional[Tuple[int, int]],
                stats: SearchStats) -> bool:
    """
    Solves the grid from this empty cell onwards.

    Args:
        grid: the grid, modified in place
        cell: ``row_zb, col_zb`` of an empty cell, or ``None`` if there are
            none left
        stats: counters to update

    Returns:
        solved? If not, every cell from ``cell`` onwards is as it was when we
        were called.
    """
    if cell is None:
        return True
    row, col = cell
    next_cell = grid.find_next_empty(row, col, exclusive=True)
    for digit in candidates(grid, row, col):
        grid.set(row, col, digit)
        stats.placements += 1
        if _solve_from(grid, next_cell, stats):
            return True
    grid.set(row, col, EMPTY)
    stats.backtracks += 1
    return False


def solve(grid: Grid, stats: SearchStats = None) -> bool:
    """
    Fills in the blanks in a grid.

    Args:
        grid:
            the puzzle; filled in place if a solution is found, and left
            unchanged otherwise
        stats:
            optional :class:`SearchStats` to receive counts of work done

    Returns:
        solved?
    """
    if stats is None:
        stats = SearchStats()
    if not grid.is_consistent():
        log.debug("Starting digits clash with each other; no solution")
        return False
    log.debug(f"Searching; {grid.n_empty()} empty cell(s)")
    solved = _solve_from(grid, grid.find_next_empty(0, 0), stats)
    log.debug(f"Search finished ({'solved' if solved else 'unsolvable'}): "
              f"{stats}")
    if solved:
        assert grid.is_solved(), "Search produced an invalid grid!"
    return solved
