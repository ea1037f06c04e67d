import logging
import sys

import pytest

from backtrack_sudoku.common import EXIT_FAILURE, EXIT_SUCCESS
from backtrack_sudoku.grid import Grid
from backtrack_sudoku.sudoku import cli, DEMO_SUDOKU_1, Sudoku

from conftest import EASY_PUZZLE_TEXT


UNSOLVABLE_TEXT = "\n".join(
    ["5 5 x x x x x x x"] + ["x x x x x x x x x"] * 8
)


class TestSudoku:
    def test_solve(self, easy_solution: Grid) -> None:
        s = Sudoku(EASY_PUZZLE_TEXT)
        assert not s.solved
        assert s.solve()
        assert s.solved
        assert s.solution == easy_solution
        assert s.stats.placements > 0

    def test_problem_kept(self, easy_puzzle: Grid) -> None:
        s = Sudoku(EASY_PUZZLE_TEXT)
        s.solve()
        assert s.problem == easy_puzzle

    def test_str_switches_to_solution(self) -> None:
        s = Sudoku(EASY_PUZZLE_TEXT)
        assert str(s) == s.problem_str()
        assert "." in str(s)
        s.solve()
        assert str(s) == s.solution_str()
        assert "." not in str(s)
        assert "x" not in s.pretty_str()

    def test_solve_twice(self) -> None:
        s = Sudoku(EASY_PUZZLE_TEXT)
        assert s.solve()
        first = s.solution.copy()
        assert s.solve()
        assert s.solution == first

    def test_unsolvable(self, caplog: pytest.LogCaptureFixture) -> None:
        s = Sudoku(UNSOLVABLE_TEXT)
        with caplog.at_level(logging.ERROR):
            assert not s.solve()
        assert not s.solved
        assert s.solution == s.problem
        assert "Unable to solve!" in caplog.text

    def test_from_grid(self, easy_puzzle: Grid) -> None:
        s = Sudoku(grid=easy_puzzle)
        easy_puzzle.set(0, 2, 4)
        assert s.problem.get(0, 2) == 0

    def test_no_data(self) -> None:
        with pytest.raises(ValueError):
            Sudoku()

    def test_demo(self) -> None:
        s = Sudoku(DEMO_SUDOKU_1)
        assert s.solve()
        assert s.solution.is_solved()

    def test_from_file(self, tmp_path, easy_solution: Grid) -> None:
        filename = tmp_path / "puzzle.txt"
        filename.write_text(EASY_PUZZLE_TEXT)
        s = Sudoku.from_file(str(filename))
        assert s.solve()
        assert s.solution == easy_solution


class TestCommandLine:
    @staticmethod
    def run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
        monkeypatch.setattr(sys, "argv", ["backtrack-sudoku", *args])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return exc_info.value.code

    def test_demo(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self.run(monkeypatch, "demo") == EXIT_SUCCESS

    def test_solve_file(self, monkeypatch: pytest.MonkeyPatch,
                        tmp_path) -> None:
        filename = tmp_path / "puzzle.txt"
        filename.write_text(EASY_PUZZLE_TEXT)
        assert self.run(monkeypatch, "solve", str(filename)) == EXIT_SUCCESS

    def test_unsolvable_file(self, monkeypatch: pytest.MonkeyPatch,
                             tmp_path) -> None:
        filename = tmp_path / "puzzle.txt"
        filename.write_text(UNSOLVABLE_TEXT)
        assert self.run(monkeypatch, "solve", str(filename)) == EXIT_FAILURE

    def test_malformed_file(self, monkeypatch: pytest.MonkeyPatch,
                            tmp_path) -> None:
        filename = tmp_path / "puzzle.txt"
        filename.write_text("1 2 3\n")
        assert self.run(monkeypatch, "solve", str(filename)) == EXIT_FAILURE

    def test_missing_file(self, monkeypatch: pytest.MonkeyPatch,
                          tmp_path) -> None:
        filename = tmp_path / "nonexistent.txt"
        assert self.run(monkeypatch, "solve", str(filename)) == EXIT_FAILURE

    def test_no_command(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self.run(monkeypatch) == EXIT_FAILURE
