import pytest

from backtrack_sudoku.grid import Grid
from backtrack_sudoku.textio import (
    grid_to_compact_str,
    grid_to_pretty_str,
    parse_grid,
    read_grid_file,
)

from conftest import EASY_PUZZLE_TEXT


COMPACT_EASY = """53. .7. ...
6.. 195 ...
.98 ... .6.

8.. .6. ..3
4.. 8.3 ..1
7.. .2. ..6

.6. ... 28.
... 419 ..5
... .8. .79"""


class TestParse:
    def test_spaced_format(self, easy_puzzle: Grid) -> None:
        assert parse_grid(EASY_PUZZLE_TEXT) == easy_puzzle

    def test_compact_format(self, easy_puzzle: Grid) -> None:
        assert parse_grid(COMPACT_EASY) == easy_puzzle

    def test_zero_is_blank(self, easy_puzzle: Grid) -> None:
        text = "\n".join(
            "".join(str(easy_puzzle.get(r, c)) for c in range(9))
            for r in range(9)
        )
        assert parse_grid(text) == easy_puzzle

    def test_no_data(self) -> None:
        with pytest.raises(ValueError, match="No data"):
            parse_grid("")

    def test_too_few_lines(self) -> None:
        text = "\n".join(["x x x x x x x x x"] * 8)
        with pytest.raises(ValueError, match="9 active lines"):
            parse_grid(text)

    def test_too_many_lines(self) -> None:
        text = "\n".join(["x x x x x x x x x"] * 10)
        with pytest.raises(ValueError, match="9 active lines"):
            parse_grid(text)

    def test_wrong_token_count(self) -> None:
        lines = ["x x x x x x x x x"] * 9
        lines[3] = "x x x x x x x x"
        with pytest.raises(ValueError, match="line 4"):
            parse_grid("\n".join(lines))

    def test_bad_token(self) -> None:
        lines = ["x x x x x x x x x"] * 9
        lines[0] = "x x q x x x x x x"
        with pytest.raises(ValueError, match="Bad character 'q'"):
            parse_grid("\n".join(lines))

    def test_read_file(self, tmp_path, easy_puzzle: Grid) -> None:
        filename = tmp_path / "puzzle.txt"
        filename.write_text(EASY_PUZZLE_TEXT)
        assert read_grid_file(str(filename)) == easy_puzzle

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            read_grid_file(str(tmp_path / "nonexistent.txt"))


class TestWrite:
    def test_compact(self, easy_puzzle: Grid) -> None:
        assert grid_to_compact_str(easy_puzzle) == COMPACT_EASY

    def test_compact_reads_back(self, easy_puzzle: Grid) -> None:
        assert parse_grid(grid_to_compact_str(easy_puzzle)) == easy_puzzle

    def test_pretty(self, easy_puzzle: Grid) -> None:
        lines = grid_to_pretty_str(easy_puzzle).splitlines()
        assert len(lines) == 13
        rule = "-" * 25
        assert lines[0] == rule
        assert lines[4] == rule
        assert lines[8] == rule
        assert lines[12] == rule
        assert lines[1] == "| 5 3 x | x 7 x | x x x |"
        assert lines[5] == "| 8 x x | x 6 x | x x 3 |"

    def test_pretty_custom_blank(self) -> None:
        text = grid_to_pretty_str(Grid(), blank="_")
        assert "| _ _ _ | _ _ _ | _ _ _ |" in text
