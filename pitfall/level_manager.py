"""
level_manager.py — Data-driven level loader for Pitfall.

Levels are plain text files so they can be written by hand or exported
by other tools.  parse_level() turns the text into a MazeLevel;
load_levels() reads the bundled files in play order.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, Optional

from pitfall.constants import PURSUER_SYMBOL, USER_START, Cell
from pitfall.entities import Actor
from pitfall.grid import Grid
from pitfall.level import MazeLevel
from pitfall.levels import LEVEL_FILES, LEVELS_DIR
from pitfall.sequence import LevelSequence
from pitfall.solver import is_solvable, pursuer_is_mobile, solve_report

_CELL_CODES = {Cell.OPEN.value, Cell.WALL.value, Cell.GOAL.value}


def parse_level(text: str, index: int = 0, name: str = "",
                user_start=USER_START, rng=None,
                source: str = "<level>") -> MazeLevel:
    """
    Parse level text into a MazeLevel.

    Expected format  (whitespace-delimited integers)
    ------------------------------------------------
        rows cols
        pursuerStartX pursuerStartY
        <rows * cols cell codes, row-major>

    Cell codes:  0 → open,  1 → wall,  2 → goal.

    Validation
    ----------
    Every problem raises ValueError prefixed with *source*:
      • missing header, non-integer tokens, non-positive dimensions;
      • cell count different from rows * cols, unknown cell codes;
      • pursuer or user start off the board or on a wall, or both
        starts on the same cell;
      • a pursuer that could reach a cell with no passable neighbour.

    An unreachable goal is only logged: the level still loads.
    """
    tokens = text.split()
    if len(tokens) < 4:
        raise ValueError(
            f"{source}: expected 'rows cols' and 'pursuerX pursuerY' "
            f"header, got {len(tokens)} token(s).")
    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise ValueError(f"{source}: non-numeric token ({exc}).") from exc

    rows, cols, px, py = values[:4]
    if rows <= 0 or cols <= 0:
        raise ValueError(
            f"{source}: grid dimensions must be positive, got {rows}x{cols}.")

    cells = values[4:]
    if len(cells) != rows * cols:
        raise ValueError(
            f"{source}: {rows}x{cols} grid needs {rows * cols} cells, "
            f"found {len(cells)}.")
    bad = sorted({v for v in cells if v not in _CELL_CODES})
    if bad:
        raise ValueError(
            f"{source}: unknown cell code(s) {bad}; use 0, 1 or 2.")

    grid = Grid(rows, cols, cells)
    ux, uy = user_start
    for label, (x, y) in (("pursuer", (px, py)), ("user", (ux, uy))):
        if not grid.in_bounds(y, x):
            raise ValueError(
                f"{source}: {label} start ({x},{y}) is outside the "
                f"{rows}x{cols} grid.")
        if grid.get(y, x) is Cell.WALL:
            raise ValueError(f"{source}: {label} start ({x},{y}) is a wall.")
    if (px, py) == (ux, uy):
        raise ValueError(
            f"{source}: user and pursuer both start at ({px},{py}).")

    level = MazeLevel(grid, Actor(px, py, PURSUER_SYMBOL), index=index,
                      name=name, user_start=user_start, rng=rng)

    mobile, report = pursuer_is_mobile(level)
    if not mobile:
        raise ValueError(f"{source}: " + " ".join(r.strip() for r in report))

    solvable, _ = is_solvable(level)
    if not solvable:
        logging.warning("%s: goal unreachable.\n%s", source, solve_report(level))
    return level


def load_level(path: Path, index: int = 0, rng=None) -> MazeLevel:
    """Read and parse one level file.  Missing files raise FileNotFoundError."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Level file not found: {path}")
    text = path.read_text(encoding="utf-8")
    level = parse_level(text, index=index, name=f"Maze {index + 1}",
                        rng=rng, source=path.name)
    logging.info("Loaded %s as %s (%dx%d)", path.name, level.name,
                 level.grid.rows, level.grid.cols)
    return level


def load_levels(directory: Path = LEVELS_DIR,
                filenames: Iterable[str] = LEVEL_FILES,
                rng: Optional[random.Random] = None) -> LevelSequence:
    """
    Load *filenames* from *directory*, in the given order, into a
    LevelSequence.  All levels share *rng*.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Levels directory not found: {directory}")
    if rng is None:
        rng = random.Random()

    sequence = LevelSequence()
    for index, filename in enumerate(filenames):
        sequence.append(load_level(directory / filename, index=index, rng=rng))
    if len(sequence) == 0:
        raise ValueError(f"No level files listed for {directory}")
    return sequence
