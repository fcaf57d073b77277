"""Tests for pitfall.level_manager – text level loading."""

from __future__ import annotations

import logging
import random
from pathlib import Path

import pytest

from pitfall.constants import PURSUER_SYMBOL, Cell
from pitfall.level_manager import load_level, load_levels, parse_level
from pitfall.levels import LEVEL_FILES, LEVELS_DIR
from pitfall.solver import is_solvable, pursuer_is_mobile

VALID = """\
3 4
2 1
1 1 1 1
1 0 0 1
1 1 2 1
"""


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# parse_level – happy paths
# ---------------------------------------------------------------------------

class TestParseHappy:
    def test_dimensions_and_cells(self):
        level = parse_level(VALID)
        assert (level.grid.rows, level.grid.cols) == (3, 4)
        assert level.grid.get(2, 2) is Cell.GOAL
        assert level.grid.get(1, 1) is Cell.OPEN
        assert level.grid.get(0, 0) is Cell.WALL

    def test_pursuer_start_is_x_then_y(self):
        level = parse_level(VALID)
        assert level.pursuer.position == (2, 1)
        assert level.pursuer.symbol == PURSUER_SYMBOL

    def test_any_whitespace_layout(self):
        flat = " ".join(VALID.split())
        assert parse_level(flat).grid.as_rows() == parse_level(VALID).grid.as_rows()

    def test_index_name_and_rng(self):
        rng = random.Random(7)
        level = parse_level(VALID, index=4, name="Cellar", rng=rng)
        assert level.index == 4
        assert level.name == "Cellar"
        assert level.rng is rng

    def test_unreachable_goal_only_warns(self, caplog: pytest.LogCaptureFixture):
        text = "3 5\n3 1\n1 1 1 1 1\n1 0 1 0 1\n1 1 1 2 1\n"
        with caplog.at_level(logging.WARNING):
            level = parse_level(text, source="walled.txt")
        assert level.grid.rows == 3
        assert "goal unreachable" in caplog.text
        assert "Pursuer at (3,1) can always move." in caplog.text
        assert "Verdict: UNSOLVABLE" in caplog.text


# ---------------------------------------------------------------------------
# parse_level – error paths
# ---------------------------------------------------------------------------

class TestParseErrors:
    def test_empty(self):
        with pytest.raises(ValueError, match="header"):
            parse_level("", source="empty.txt")

    def test_short_header(self):
        with pytest.raises(ValueError, match="header"):
            parse_level("3 3\n1")

    def test_non_numeric(self):
        with pytest.raises(ValueError, match="non-numeric"):
            parse_level("3 x\n1 1\n")

    @pytest.mark.parametrize("dims", ["0 3", "3 0", "-2 2"])
    def test_non_positive_dimensions(self, dims):
        with pytest.raises(ValueError, match="positive"):
            parse_level(f"{dims}\n0 0\n")

    def test_too_few_cells(self):
        with pytest.raises(ValueError, match="needs 12 cells, found 11"):
            parse_level(VALID.rsplit(" ", 1)[0])

    def test_too_many_cells(self):
        with pytest.raises(ValueError, match="found 13"):
            parse_level(VALID + "0\n")

    def test_unknown_cell_code(self):
        with pytest.raises(ValueError, match=r"unknown cell code\(s\) \[3\]"):
            parse_level(VALID.replace("2 1\n1 1 1 1", "2 1\n1 1 1 3"))

    def test_pursuer_out_of_bounds(self):
        with pytest.raises(ValueError, match="pursuer start \\(9,1\\) is outside"):
            parse_level(VALID.replace("2 1\n", "9 1\n", 1))

    def test_pursuer_on_wall(self):
        with pytest.raises(ValueError, match="pursuer start \\(0,0\\) is a wall"):
            parse_level(VALID.replace("2 1\n", "0 0\n", 1))

    def test_user_on_wall(self):
        with pytest.raises(ValueError, match="user start"):
            parse_level(VALID, user_start=(3, 1))

    def test_shared_start(self):
        with pytest.raises(ValueError, match="both start"):
            parse_level(VALID.replace("2 1\n", "1 1\n", 1))

    def test_stranded_pursuer(self):
        text = "3 5\n4 1\n1 1 1 1 1\n1 0 2 1 0\n1 1 1 1 1\n"
        with pytest.raises(ValueError, match="stuck"):
            parse_level(text, source="trap.txt")

    def test_message_names_source(self):
        with pytest.raises(ValueError, match="^broken.txt:"):
            parse_level("", source="broken.txt")


# ---------------------------------------------------------------------------
# Files and directories
# ---------------------------------------------------------------------------

class TestFiles:
    def test_load_level_names_by_index(self, tmp_path: Path):
        path = _write(tmp_path / "one.txt", VALID)
        level = load_level(path, index=1)
        assert level.name == "Maze 2"
        assert level.index == 1

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Level file not found"):
            load_level(tmp_path / "nope.txt")

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Levels directory"):
            load_levels(tmp_path / "absent", ["a.txt"])

    def test_load_levels_keeps_order_and_shares_rng(self, tmp_path: Path):
        _write(tmp_path / "b.txt", VALID)
        _write(tmp_path / "a.txt", VALID)
        rng = random.Random(1)
        seq = load_levels(tmp_path, ["b.txt", "a.txt"], rng=rng)
        assert [lv.index for lv in seq] == [0, 1]
        assert [lv.name for lv in seq] == ["Maze 1", "Maze 2"]
        assert all(lv.rng is rng for lv in seq)

    def test_one_bad_file_aborts_all(self, tmp_path: Path):
        _write(tmp_path / "good.txt", VALID)
        _write(tmp_path / "bad.txt", "2 2\n0 0\n0 0 0\n")
        with pytest.raises(ValueError, match="bad.txt"):
            load_levels(tmp_path, ["good.txt", "bad.txt"])

    def test_empty_file_list(self, tmp_path: Path):
        with pytest.raises(ValueError, match="No level files"):
            load_levels(tmp_path, [])


# ---------------------------------------------------------------------------
# Bundled levels
# ---------------------------------------------------------------------------

class TestBundledLevels:
    def test_all_load(self):
        seq = load_levels()
        assert len(seq) == len(LEVEL_FILES)

    @pytest.mark.parametrize("filename", LEVEL_FILES)
    def test_each_is_solvable_and_mobile(self, filename):
        level = load_level(LEVELS_DIR / filename)
        assert is_solvable(level)[0]
        assert pursuer_is_mobile(level)[0]
