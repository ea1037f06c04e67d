#!/usr/bin/env python

"""
backtrack_sudoku/textio.py

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

**Reading and writing grids as text.**

Puzzle text format:

- Lines starting with ``#`` are comments.
- Blank lines are ignored.
- Use digits 1-9 for known cells.
- ``x``, ``.`` or ``0`` represents an unknown cell.
- Whitespace within a line is ignored, so digits may be separated by spaces
  (``5 3 x x 7 x x x x``) or grouped by box (``53. .7. ...``).
- There must be 9 lines of 9 cells.

"""

import logging
from typing import List

from backtrack_sudoku.common import (
    BLANK_MARKERS,
    DIGITS,
    DISPLAY_BLANK_COMPACT,
    DISPLAY_BLANK_PRETTY,
    EMPTY,
    HASH,
    N,
    NEWLINE,
    RANK,
    SPACE,
)
from backtrack_sudoku.grid import Grid

log = logging.getLogger(__name__)

VALID_DIGIT_CHARS = [str(d) for d in DIGITS]
HORIZONTAL_RULE = "-" * (2 * N + 2 * (RANK + 1) - 1)
VERTICAL_RULE = "|"


# =============================================================================
# Reading
# =============================================================================

def parse_grid(string_version: str) -> Grid:
    """
    Reads a grid from text, in the format described above.

    Raises:
        :exc:`ValueError` if the text is not a well-formed 9x9 grid
    """
    lines = string_version.splitlines()
    if not lines:
        raise ValueError("No data")

    # Remove comments
    lines = [line for line in lines if not line.lstrip().startswith(HASH)]

    lines = ["".join(line.split())
             for line in lines if line.strip()]  # remove blank lines/columns
    if len(lines) != N:
        raise ValueError(f"Must have {N} active lines; "
                         f"found {len(lines)}, which are:\n"
                         f"{lines}")

    rows = []  # type: List[List[int]]
    for row_zb, line in enumerate(lines):
        if len(line) != N:
            raise ValueError(
                f"Data line {row_zb + 1} has wrong non-blank length: should "
                f"be {N}, but is {len(line)} ({line!r})")
        row = []  # type: List[int]
        for col_zb, char in enumerate(line):
            if char in BLANK_MARKERS:
                row.append(EMPTY)
            elif char in VALID_DIGIT_CHARS:
                row.append(int(char))
            else:
                raise ValueError(
                    f"Bad character {char!r} at (row={row_zb + 1}, "
                    f"col={col_zb + 1}); use digits 1-9 or one of "
                    f"{list(BLANK_MARKERS)} for a blank")
        rows.append(row)
    return Grid(rows)


def read_grid_file(filename: str) -> Grid:
    """
    Reads a grid from a text file.
    """
    log.info(f"Reading {filename}")
    with open(filename, "rt") as f:
        string_version = f.read()
    return parse_grid(string_version)


# =============================================================================
# Writing
# =============================================================================

def _cell_str(value: int, blank: str) -> str:
    return blank if value == EMPTY else str(value)


def grid_to_compact_str(grid: Grid, blank: str = DISPLAY_BLANK_COMPACT) -> str:
    """
    Creates the string representation used for puzzle files: one space
    between boxes, one blank line between rows of boxes.
    """
    x = ""
    for row_zb in range(N):
        for col_zb in range(N):
            x += _cell_str(grid.get(row_zb, col_zb), blank)
            if col_zb % RANK == RANK - 1 and col_zb < N - 1:
                x += SPACE
        if row_zb < N - 1:
            x += NEWLINE
            if row_zb % RANK == RANK - 1:
                x += NEWLINE
    return x


def grid_to_pretty_str(grid: Grid, blank: str = DISPLAY_BLANK_PRETTY) -> str:
    """
    Creates a bordered representation for the console, e.g.

    .. code-block:: none

        -------------------------
        | 5 3 x | x 7 x | x x x |
        ...
        -------------------------

    """
    lines = [HORIZONTAL_RULE]
    for row_zb in range(N):
        line = VERTICAL_RULE + SPACE
        for col_zb in range(N):
            line += _cell_str(grid.get(row_zb, col_zb), blank) + SPACE
            if col_zb % RANK == RANK - 1:
                line += VERTICAL_RULE + SPACE
        lines.append(line.rstrip())
        if row_zb % RANK == RANK - 1:
            lines.append(HORIZONTAL_RULE)
    return NEWLINE.join(lines)
