#!/usr/bin/env python

"""
backtrack_sudoku/grid.py

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

**The 9x9 Sudoku grid.**

Cells hold digits 1-9, or 0 (:data:`EMPTY`) for a blank. All coordinates are
zero-based and given as ``row, col``.

"""

from typing import Generator, List, Optional, Sequence, Tuple

from backtrack_sudoku.common import EMPTY, N, RANK


# =============================================================================
# Box
# =============================================================================

class Box(object):
    """
    Represents a 3x3 box within the Sudoku grid.
    """
    def __init__(self, box_zb: int) -> None:
        """
        Boxes are numbered 0-8, left to right then top to bottom.

        Args:
            box_zb: box number, as above; zero-based
        """
        assert 0 <= box_zb < N, (
            f"box_zb was {box_zb}; must be in range 0 to {N - 1} inclusive"
        )
        self.box_zb = box_zb

    def __str__(self) -> str:
        """
        Coordinate-based description for a 3x3 box.
        """
        return f"{{{self.boxrow + 1},{self.boxcol + 1}}}"

    def __repr__(self) -> str:
        return self.__str__()

    def __eq__(self, other: "Box") -> bool:
        return self.box_zb == other.box_zb

    @property
    def boxrow(self) -> int:
        """
        Zero-based row number of the box (not its cells).
        """
        return self.box_zb // RANK

    @property
    def boxcol(self) -> int:
        """
        Zero-based column number of the box (not its cells).
        """
        return self.box_zb % RANK

    def top_left_cell(self) -> Tuple[int, int]:
        """
        Returns ``row_zb, col_zb`` for the top-left cell in the 3x3 box.
        """
        return self.boxrow * RANK, self.boxcol * RANK

    @classmethod
    def containing(cls, row_zb: int, col_zb: int) -> "Box":
        """
        Returns the box containing this cell.
        """
        assert 0 <= row_zb < N
        assert 0 <= col_zb < N
        return cls((row_zb // RANK) * RANK + col_zb // RANK)

    def gen_cells(self) -> Generator[Tuple[int, int], None, None]:
        """
        Generates ``(row_zb, col_zb)`` tuples for all the cells in this box.
        """
        row_min, col_min = self.top_left_cell()
        for r in range(row_min, row_min + RANK):
            for c in range(col_min, col_min + RANK):
                yield r, c


# =============================================================================
# Grid
# =============================================================================

class Grid(object):
    """
    A fixed 9x9 board of cell values, stored row-major.

    The grid does no policing: :meth:`set` will happily write a digit that
    clashes with its neighbours. Legality is the caller's business (see
    :mod:`backtrack_sudoku.constraints`).
    """

    def __init__(self, rows: Sequence[Sequence[int]] = None) -> None:
        """
        Args:
            rows:
                optional 9x9 list of lists of ints in [0, 9], indexed
                ``rows[row_zb][col_zb]``; copied. If not given, the grid
                starts out entirely empty.
        """
        if rows is None:
            self._cells = [
                [
                    EMPTY for _col_zb in range(N)
                ] for _row_zb in range(N)
            ]  # type: List[List[int]]
        else:
            self._cells = [list(row) for row in rows]
        # ... index as: self._cells[row_zb][col_zb]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._cells!r})"

    def copy(self) -> "Grid":
        return self.__class__(self._cells)

    def to_lists(self) -> List[List[int]]:
        """
        Returns a copy of the contents as a list of rows.
        """
        return [list(row) for row in self._cells]

    # -------------------------------------------------------------------------
    # Cell access
    # -------------------------------------------------------------------------

    @staticmethod
    def _check_coords(row_zb: int, col_zb: int) -> None:
        # Negative indices would silently wrap around in Python.
        if not (0 <= row_zb < N and 0 <= col_zb < N):
            raise IndexError(
                f"Cell (row={row_zb}, col={col_zb}) is outside the grid; "
                f"both must be in range 0 to {N - 1}")

    def get(self, row_zb: int, col_zb: int) -> int:
        """
        Returns the digit at this cell, or 0 if it is empty.
        """
        self._check_coords(row_zb, col_zb)
        return self._cells[row_zb][col_zb]

    def set(self, row_zb: int, col_zb: int, value: int) -> None:
        """
        Overwrites the cell.
        """
        self._check_coords(row_zb, col_zb)
        self._cells[row_zb][col_zb] = value

    def row_values(self, row_zb: int) -> List[int]:
        return list(self._cells[row_zb])

    def col_values(self, col_zb: int) -> List[int]:
        return [self._cells[r][col_zb] for r in range(N)]

    def box_values(self, box: Box) -> List[int]:
        return [self._cells[r][c] for r, c in box.gen_cells()]

    # -------------------------------------------------------------------------
    # Scanning
    # -------------------------------------------------------------------------

    def find_next_empty(self, row_zb: int, col_zb: int,
                        exclusive: bool = False) -> Optional[Tuple[int, int]]:
        """
        Scans in row-major order from ``(row_zb, col_zb)`` for the first empty
        cell.

        Args:
            row_zb: starting row
            col_zb: starting column
            exclusive:
                start at the cell *after* the one given, rather than at the
                cell itself

        Returns:
            ``row_zb, col_zb`` of the empty cell, or ``None`` if there are no
            more empty cells between the starting point and the end of the
            grid.
        """
        self._check_coords(row_zb, col_zb)
        start = row_zb * N + col_zb
        if exclusive:
            start += 1
        for index in range(start, N * N):
            r, c = divmod(index, N)
            if self._cells[r][c] == EMPTY:
                return r, c
        return None

    def n_empty(self) -> int:
        """
        Number of blank cells. Maximum is 81.
        """
        return sum(
            1 if value == EMPTY else 0
            for row in self._cells
            for value in row
        )

    # -------------------------------------------------------------------------
    # Validity
    # -------------------------------------------------------------------------

    def gen_units(self) -> Generator[List[int], None, None]:
        """
        Generates the values of every row, then every column, then every box.
        """
        for r in range(N):
            yield self.row_values(r)
        for c in range(N):
            yield self.col_values(c)
        for b in range(N):
            yield self.box_values(Box(b))

    def is_complete(self) -> bool:
        """
        No blanks left?
        """
        return self.n_empty() == 0

    def is_consistent(self) -> bool:
        """
        Is every placed digit unique within its row, column, and box? Blanks
        are ignored, so a partially filled grid can be consistent.
        """
        for unit in self.gen_units():
            digits = [v for v in unit if v != EMPTY]
            if len(digits) != len(set(digits)):
                return False
        return True

    def is_solved(self) -> bool:
        """
        Completely and correctly filled in?
        """
        return self.is_complete() and self.is_consistent()
