"""Shared fixtures for the Pitfall test suite."""

from __future__ import annotations

from typing import Iterable

import pytest

from pitfall.constants import PURSUER_SYMBOL, Cell
from pitfall.entities import Actor
from pitfall.grid import Grid
from pitfall.level import MazeLevel

_SKETCH_CODES = {".": Cell.OPEN, "#": Cell.WALL, "$": Cell.GOAL}


class ScriptedRng:
    """Stands in for random.Random: choice() replays fixed directions."""

    def __init__(self, directions: Iterable[str]) -> None:
        self._directions = iter(directions)
        self.calls = 0

    def choice(self, options):
        self.calls += 1
        direction = next(self._directions)
        assert direction in options
        return direction


def grid_from_sketch(*rows: str) -> Grid:
    """'#' wall, '.' open, '$' goal; one string per row."""
    cells = [_SKETCH_CODES[ch] for row in rows for ch in row]
    return Grid(len(rows), len(rows[0]), cells)


def make_level(rows, pursuer=(0, 0), user_start=(1, 1), rng=None,
               index=0) -> MazeLevel:
    return MazeLevel(grid_from_sketch(*rows),
                     Actor(pursuer[0], pursuer[1], PURSUER_SYMBOL),
                     index=index, user_start=user_start, rng=rng)


@pytest.fixture()
def corner_level() -> MazeLevel:
    """3x3, wall in the middle, goal bottom-right, pursuer bottom-left."""
    return make_level(["...", ".#.", "..$"], pursuer=(0, 2), user_start=(0, 0))
