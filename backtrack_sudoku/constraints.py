#!/usr/bin/env python

"""
backtrack_sudoku/constraints.py

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

**Which digits may legally go in a cell?**

"""

from typing import Generator, List, Tuple

from backtrack_sudoku.common import DIGITS, EMPTY, N
from backtrack_sudoku.grid import Box, Grid


def peer_cells(row_zb: int, col_zb: int) \
        -> Generator[Tuple[int, int], None, None]:
    """
    Generates ``(row_zb, col_zb)`` for every cell sharing a row, column, or
    3x3 box with the cell given, including that cell itself. Some cells
    appear more than once (the row and column overlap with the box).
    """
    for c in range(N):
        yield row_zb, c
    for r in range(N):
        yield r, col_zb
    for r, c in Box.containing(row_zb, col_zb).gen_cells():
        yield r, c


def candidates(grid: Grid, row_zb: int, col_zb: int) -> List[int]:
    """
    Returns the digits (1-9) not already present in this cell's row, column,
    or 3x3 box. They are always returned in ascending order.

    Depends only on the grid's current contents.
    """
    present = set(
        grid.get(r, c) for r, c in peer_cells(row_zb, col_zb)
    )
    present.discard(EMPTY)
    return [d for d in DIGITS if d not in present]
