#!/usr/bin/env python

"""
backtrack_sudoku/common.py

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

Common constants and functions for the Sudoku solver.

"""

import logging
import sys
import traceback
from typing import Callable

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

RANK = 3  # size of a box
N = RANK ** 2  # size of the grid; 9 for a standard Sudoku
EMPTY = 0
DIGITS = tuple(range(1, N + 1))

BLANK_MARKERS = ("x", ".", "0")
DISPLAY_BLANK_COMPACT = "."
DISPLAY_BLANK_PRETTY = "x"
HASH = "#"
NEWLINE = "\n"
SPACE = " "

EXIT_FAILURE = 1
EXIT_SUCCESS = 0


# =============================================================================
# Exceptions
# =============================================================================

class SolutionFailure(Exception):
    pass


# =============================================================================
# Generic helper functions
# =============================================================================

def run_guard(function: Callable[[], None]) -> None:
    """
    Runs the command-line entry point. An unsolvable puzzle is reported
    briefly; anything else that escapes is logged with a traceback. Either
    way, the exit code is :data:`EXIT_FAILURE`.
    """
    try:
        function()
    except SolutionFailure as e:
        log.error(str(e) or "Unable to solve!")
        sys.exit(EXIT_FAILURE)
    except Exception as e:
        log.critical(str(e))
        traceback.print_exc()
        sys.exit(EXIT_FAILURE)
