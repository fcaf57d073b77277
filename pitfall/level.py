"""
level.py — One playable maze: move resolution and outcome detection.

Contains the legality rules for both actors, the pursuer's random walk,
the win / loss check and the render model handed to the presentation
layer.  No I/O happens here.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from pitfall.constants import (
    CARDINALS, DIR_DELTA, LOST, ONGOING, USER_START, WON, Cell,
)
from pitfall.entities import Actor
from pitfall.grid import Grid


@dataclass(frozen=True)
class RenderModel:
    """Everything the renderer needs to draw one frame."""

    level_number: int
    name: str
    rows: int
    cols: int
    cells: tuple            # tuple of row tuples of Cell
    user_pos: tuple         # (x, y)
    user_symbol: str
    user_on_goal: bool
    pursuer_pos: tuple      # (x, y)
    pursuer_symbol: str


class MazeLevel:
    """
    A grid, its pursuer and the user's starting square.

    Parameters
    ----------
    grid       : Grid
    pursuer    : Actor        – placed at its starting square.
    index      : int          – zero-based position in the match.
    name       : str          – title shown above the board.
    user_start : (x, y)       – where the user appears on this level.
    rng        : random.Random or anything with ``choice()``.
    """

    def __init__(self, grid: Grid, pursuer: Actor, index: int = 0,
                 name: str = "", user_start=USER_START, rng=None):
        self.grid       = grid
        self.pursuer    = pursuer
        self.index      = index
        self.name       = name or f"Maze {index + 1}"
        self.user_start = tuple(user_start)
        self.rng        = rng if rng is not None else random.Random()

    def _target(self, actor: Actor, direction: str):
        """(x, y) one step from *actor* in *direction*, or None."""
        if direction not in DIR_DELTA:
            return None
        dr, dc = DIR_DELTA[direction]
        return actor.x + dc, actor.y + dr

    # ── User ────────────────────────────────────────────────────────────

    def reset_user(self, user: Actor):
        """Move *user* to this level's starting square."""
        user.place(*self.user_start)

    def try_move_user(self, user: Actor, direction: str) -> bool:
        """
        Step *user* one cell in *direction* if the target is legal.

        The target must be on the board, not a wall and not the
        pursuer's cell.  Anything else, including an unknown direction,
        leaves the user where it is.

        Returns
        -------
        True when the user moved.
        """
        target = self._target(user, direction)
        if target is None:
            return False
        x, y = target
        if not self.grid.is_passable(y, x):
            return False
        if target == self.pursuer.position:
            return False
        user.place(x, y)
        return True

    # ── Pursuer ─────────────────────────────────────────────────────────

    def step_pursuer(self) -> str:
        """
        Move the pursuer one cell in a uniformly random legal direction.

        Directions are drawn until one lands in-bounds on a non-wall
        cell.  Goal cells and the user's cell are both fair game.  The
        loader guarantees the pursuer always has a passable neighbour,
        otherwise this never returns.

        Returns
        -------
        The direction taken.
        """
        while True:
            direction = self.rng.choice(CARDINALS)
            x, y = self._target(self.pursuer, direction)
            if self.grid.is_passable(y, x):
                self.pursuer.place(x, y)
                return direction

    # ── Outcome / rendering ─────────────────────────────────────────────

    def check_outcome(self, user: Actor) -> str:
        """'lost' on collision (checked first), 'won' on a goal, else 'ongoing'."""
        if user.position == self.pursuer.position:
            return LOST
        if self.grid.get(user.y, user.x) is Cell.GOAL:
            return WON
        return ONGOING

    def render(self, user: Actor) -> RenderModel:
        return RenderModel(
            level_number=self.index + 1,
            name=self.name,
            rows=self.grid.rows,
            cols=self.grid.cols,
            cells=self.grid.as_rows(),
            user_pos=user.position,
            user_symbol=user.symbol,
            user_on_goal=self.grid.get(user.y, user.x) is Cell.GOAL,
            pursuer_pos=self.pursuer.position,
            pursuer_symbol=self.pursuer.symbol,
        )
