#!/usr/bin/env python

"""
backtrack_sudoku/sudoku.py

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

**Solves Sudoku puzzles.**

It uses two approaches:

- Depth-first backtracking search (the main method): fill in the first blank
  with the first digit that fits, move on, and back up when stuck.

- Integer programming, as a cross-check.

"""


import argparse
import logging
import sys

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from backtrack_sudoku.common import (
    EXIT_SUCCESS,
    run_guard,
    SolutionFailure,
)
from backtrack_sudoku.grid import Grid
from backtrack_sudoku.search import SearchStats, solve
from backtrack_sudoku.textio import (
    grid_to_compact_str,
    grid_to_pretty_str,
    parse_grid,
    read_grid_file,
)

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEMO_SUDOKU_1 = """
# Wikipedia, "Sudoku"

53. .7. ...
6.. 195 ...
.98 ... .6.

8.. .6. ..3
4.. 8.3 ..1
7.. .2. ..6

.6. ... 28.
... 419 ..5
... .8. .79
"""


# =============================================================================
# Sudoku
# =============================================================================

class Sudoku(object):
    """
    Represents and solves Sudoku puzzles.
    """

    def __init__(self, string_version: str = None,
                 grid: Grid = None) -> None:
        """
        Args:
            string_version:
                String representation of the puzzle; see
                :mod:`backtrack_sudoku.textio`.
            grid:
                Alternatively, the puzzle as a :class:`Grid` (copied).
        """
        if grid is not None:
            self.problem = grid.copy()
        elif string_version is not None:
            self.problem = parse_grid(string_version)
        else:
            raise ValueError("No data")
        self.solution = self.problem.copy()
        self.solved = False
        self.stats = SearchStats()

    @classmethod
    def from_file(cls, filename: str) -> "Sudoku":
        return cls(grid=read_grid_file(filename))

    # -------------------------------------------------------------------------
    # String representations
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.solution_str() if self.solved else self.problem_str()

    def problem_str(self) -> str:
        """
        Creates the string representation of the problem.
        """
        return grid_to_compact_str(self.problem)

    def solution_str(self) -> str:
        """
        Creates the string representation of the solution.
        """
        return grid_to_compact_str(self.solution)

    def pretty_str(self) -> str:
        """
        Bordered version of whatever :meth:`__str__` would show.
        """
        return grid_to_pretty_str(
            self.solution if self.solved else self.problem)

    # -------------------------------------------------------------------------
    # Solve
    # -------------------------------------------------------------------------

    def solve(self) -> bool:
        """
        Solves the problem by backtracking search, writing to :attr:`solved`
        and :attr:`solution`.

        Returns: solved?
        """
        if self.solved:
            log.info("Already solved")
            return True
        working = self.problem.copy()
        self.stats = SearchStats()
        if solve(working, self.stats):
            self.solved = True
            self.solution = working
            log.debug(f"Solved via backtracking: {self.stats}")
        else:
            log.error("Unable to solve!")
        return self.solved

    def solve_ip(self) -> bool:
        """
        Solves the problem via integer programming, writing to
        :attr:`solved` and :attr:`solution`.

        Returns: solved?
        """
        # Imported here so that the backtracking solver does not need mip.
        from backtrack_sudoku.intprog import solve_ip

        if self.solved:
            log.info("Already solved")
            return True
        solution = solve_ip(self.problem)
        if solution is None:
            log.error("Unable to solve!")
        else:
            self.solved = True
            self.solution = solution
            log.debug("Solved via integer programming method")
        return self.solved


# =============================================================================
# main
# =============================================================================

def main() -> None:
    """
    Command-line entry point.
    """
    cmd_demo = "demo"
    cmd_ip = "ip"
    cmd_solve = "solve"

    help_filename = (
        "Puzzle filename to read. Must contain text in format as above.")

    parser = argparse.ArgumentParser(
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=(
            f"Solve Sudoku puzzles by backtracking search. Format is:\n\n"
            f"{DEMO_SUDOKU_1}\n"
            f"(Use digits 1-9 for known cells and 'x', '.' or '0' for "
            f"blanks. Whitespace within a line is ignored.)"
        )
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Be verbose")
    subparsers = parser.add_subparsers(
        dest="command",
        help="Append --help for more help")

    parser_solve = subparsers.add_parser(
        cmd_solve, help="Solve from a file, by backtracking search")
    parser_solve.add_argument(
        "filename", type=str, help=help_filename)

    parser_ip = subparsers.add_parser(
        cmd_ip, help="Solve from a file, by integer programming")
    parser_ip.add_argument(
        "filename", type=str, help=help_filename)

    _parser_demo = subparsers.add_parser(cmd_demo, help="Run demo")

    args = parser.parse_args()
    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose
                                    else logging.INFO)

    if not args.command:
        parser.print_help()
        raise ValueError("Must specify command")
    if args.command == cmd_demo:
        problem = Sudoku(DEMO_SUDOKU_1)
    else:
        problem = Sudoku.from_file(args.filename)

    log.info(f"Solving:\n{problem.pretty_str()}")
    if args.command == cmd_ip:
        solved = problem.solve_ip()
    else:
        solved = problem.solve()
    if not solved:
        raise SolutionFailure("No solution exists")
    log.info(f"Answer:\n{problem.pretty_str()}")
    sys.exit(EXIT_SUCCESS)


def cli() -> None:
    """
    Console script entry point.
    """
    run_guard(main)


# =============================================================================
# Command-line entry point
# =============================================================================

if __name__ == "__main__":
    cli()
