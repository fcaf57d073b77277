"""
sequence.py — The ordered set of levels that make up one match.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List

from pitfall.level import MazeLevel


class LevelSequence:
    """Levels in play order.  Insertion order is the order they are played."""

    def __init__(self, levels: Iterable[MazeLevel] = ()) -> None:
        self._levels: List[MazeLevel] = list(levels)

    def append(self, level: MazeLevel) -> None:
        self._levels.append(level)

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[MazeLevel]:
        return iter(self._levels)

    def __getitem__(self, index: int) -> MazeLevel:
        return self._levels[index]

    @property
    def last_index(self) -> int:
        return len(self._levels) - 1
