#!/usr/bin/env python

"""
backtrack_sudoku/intprog.py

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

**Solves a grid by integer programming, as a cross-check on the search.**

You say "here are my constraints; go" and a few milliseconds later you have a
valid answer. For a puzzle with a unique solution, this must agree with the
backtracking search.

"""

import logging
from typing import Optional

from mip import BINARY, Constr, Model, Var, xsum

from backtrack_sudoku.common import EMPTY, N
from backtrack_sudoku.grid import Box, Grid

log = logging.getLogger(__name__)

ALMOST_ONE = 0.99


# =============================================================================
# Functions for mip models
# =============================================================================

def debug_model_constraints(m: Model) -> None:
    """
    Shows constraints for a model.
    """
    if not log.isEnabledFor(logging.DEBUG):
        return
    lines = [f"Constraints in model {m.name!r}:"]
    for c in m.constrs:  # type: Constr
        lines.append(f"{c.name} == {c.expr}")
    log.debug("\n".join(lines))


def debug_model_vars(m: Model) -> None:
    """
    Show the names/values of model variables after fitting.
    """
    if not log.isEnabledFor(logging.DEBUG):
        return
    lines = [f"Variables in model {m.name!r}:"]
    for v in m.vars:  # type: Var
        lines.append(f"{v.name} == {v.x}")
    log.debug("\n".join(lines))


# =============================================================================
# Solve
# =============================================================================

def solve_ip(grid: Grid) -> Optional[Grid]:
    """
    Solves the puzzle via integer programming.

    Args:
        grid: the puzzle; not modified

    Returns:
        a solved copy, or ``None`` if there is no solution
    """
    m = Model("Sudoku solver")
    m.verbose = 0

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Variables
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    x = [
        [
            [
                m.add_var(f"x(row={r + 1}, col={c + 1}, digit={d + 1})",
                          var_type=BINARY)
                for d in range(N)
            ] for c in range(N)
        ] for r in range(N)
    ]  # index as: x[row_zb][col_zb][digit_zb]

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Constraints
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # One digit per cell
    for r in range(N):
        for c in range(N):
            m += xsum(x[r][c][d] for d in range(N)) == 1
    for d in range(N):
        # One of each digit per row
        for r in range(N):
            m += xsum(x[r][c][d] for c in range(N)) == 1
        # One of each digit per column
        for c in range(N):
            m += xsum(x[r][c][d] for r in range(N)) == 1
        # One of each digit in each 3x3 box
        for b in range(N):
            m += xsum(x[r][c][d] for r, c in Box(b).gen_cells()) == 1
    # Starting values
    for r in range(N):
        for c in range(N):
            value = grid.get(r, c)
            if value != EMPTY:
                m += x[r][c][value - 1] == 1

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Solve
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    debug_model_constraints(m)
    m.optimize()

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Read out answers
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    if not m.num_solutions:
        log.debug("Integer programming found no solution")
        return None
    debug_model_vars(m)
    solution = Grid()
    for r in range(N):
        for c in range(N):
            for d_zb in range(N):
                if x[r][c][d_zb].x > ALMOST_ONE:
                    solution.set(r, c, d_zb + 1)
                    break
    return solution

