"""
engine.py — Turn, level and match drivers for Pitfall.

No I/O or rendering happens here.  Input arrives through the
*read_direction* callable and each finished frame is handed to the
optional *on_render* callback, so the same loop runs against a real
keyboard or a scripted list of moves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from pitfall.constants import LOST, ONGOING, WON
from pitfall.entities import Actor
from pitfall.level import MazeLevel, RenderModel
from pitfall.sequence import LevelSequence


@dataclass
class MatchState:
    """Where a match stands: current level, the carried user, result."""

    level_index: int
    user: Actor
    outcome: str = ONGOING
    level_outcome: str = ONGOING   # result of the level at level_index


def play_turn(level: MazeLevel, user: Actor, direction: str) -> str:
    """
    Resolve one turn: the user's move, then the pursuer's.

    A collision after the user's move ends the turn before the pursuer
    moves.  Otherwise the pursuer always steps, and the outcome is
    checked again, so a pursuer landing on a user who just reached the
    goal is still a loss.
    """
    level.try_move_user(user, direction)
    outcome = level.check_outcome(user)
    if outcome == LOST:
        return outcome
    level.step_pursuer()
    return level.check_outcome(user)


def play_level(level: MazeLevel, user: Actor,
               read_direction: Callable[[], str],
               on_render: Optional[Callable[[RenderModel], None]] = None
               ) -> str:
    """
    Play *level* until it is won or lost.

    Parameters
    ----------
    read_direction : callable
        Blocks until the next direction is available and returns it.
    on_render : callable or None
        Invoked with a fresh RenderModel before the first turn and after
        every turn.

    Returns
    -------
    'won' or 'lost'.
    """
    level.reset_user(user)
    if on_render:
        on_render(level.render(user))

    turns = 0
    while True:
        direction = read_direction()
        outcome = play_turn(level, user, direction)
        turns += 1
        if on_render:
            on_render(level.render(user))
        if outcome != ONGOING:
            logging.info("%s finished: %s after %d turn(s)",
                         level.name, outcome, turns)
            return outcome


def play_match(sequence: LevelSequence, user: Actor,
               read_direction: Callable[[], str],
               on_render: Optional[Callable[[RenderModel], None]] = None,
               on_level_end: Optional[Callable[[MatchState], None]] = None
               ) -> MatchState:
    """
    Play every level of *sequence* once, in order, with the same *user*.

    A loss ends the match at once.  A win moves on to the next level;
    winning the last level wins the match.  *on_level_end* sees the
    state after each level, before the next one starts.
    """
    if len(sequence) == 0:
        raise ValueError("Cannot play a match with no levels.")

    state = MatchState(level_index=0, user=user)
    for index, level in enumerate(sequence):
        state.level_index = index
        state.level_outcome = ONGOING
        outcome = play_level(level, user, read_direction, on_render)
        state.level_outcome = outcome
        if outcome == LOST:
            state.outcome = LOST
        elif index == sequence.last_index:
            state.outcome = WON
        if on_level_end:
            on_level_end(state)
        if state.outcome != ONGOING:
            break

    logging.info("Match over: %s on level %d of %d",
                 state.outcome, state.level_index + 1, len(sequence))
    return state
