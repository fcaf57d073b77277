"""
solver.py — Automated sanity checks for Pitfall levels.

Both checks are a breadth-first flood over passable cells:

  1. Pursuer mobility.  The pursuer's random walk only terminates when
     its current cell has a passable neighbour.  Flood from its start;
     any reached cell with no passable neighbour would hang the game,
     so the level is rejected.

  2. Goal reachability.  Flood from the user's start, ignoring the
     pursuer.  If no goal cell is reached the level can never be won.

The public functions return a human-readable report alongside the
verdict for logging.

Complexity: O(R · C) per check.
"""

from __future__ import annotations

from collections import deque
from typing import Tuple

from pitfall.grid import Grid
from pitfall.level import MazeLevel


# ═══════════════════════════════════════════════════════════════════════════
#  INTERNAL HELPERS
# ═══════════════════════════════════════════════════════════════════════════

def reachable_cells(grid: Grid, start: tuple) -> set[tuple]:
    """
    Every passable (row, col) reachable from *start* (row, col).

    Returns an empty set when *start* itself is not passable.
    """
    if not grid.is_passable(*start):
        return set()
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for nxt in grid.passable_neighbours(*cell):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def stranded_cells(grid: Grid, start: tuple) -> list[tuple]:
    """
    Cells reachable from *start* (row, col) that have no passable
    neighbour, in row-major order.

    Only an isolated start cell can qualify, since every other reached
    cell was entered from a passable neighbour.  The flood still checks
    them all.
    """
    if not grid.is_passable(*start):
        return [start]
    return sorted(c for c in reachable_cells(grid, start)
                  if not grid.passable_neighbours(*c))


# ═══════════════════════════════════════════════════════════════════════════
#  PUBLIC API
# ═══════════════════════════════════════════════════════════════════════════

def pursuer_is_mobile(level: MazeLevel) -> Tuple[bool, list[str]]:
    """
    Check that the pursuer can always take a step.

    Returns
    -------
    (mobile: bool, report: list[str])
    """
    x, y = level.pursuer.position
    stuck = stranded_cells(level.grid, (y, x))
    if not stuck:
        return True, [f"Pursuer at ({x},{y}) can always move."]
    report = [f"Pursuer at ({x},{y}) can get stuck:"]
    for r, c in stuck:
        report.append(f"  no passable neighbour at ({c},{r})")
    report.append("Verdict: INVALID — the pursuer would never finish its move.")
    return False, report


def is_solvable(level: MazeLevel) -> Tuple[bool, list[str]]:
    """
    Determine whether a goal can be reached from the user's start.

    The pursuer is ignored: it wanders, so it never blocks a path for
    good.

    Returns
    -------
    (solvable: bool, report: list[str])
    """
    grid = level.grid
    x, y = level.user_start
    goals = grid.goal_cells()
    report: list[str] = []

    if not goals:
        report.append("No goal cell on the board.")
        report.append("Verdict: UNSOLVABLE")
        return False, report

    region = reachable_cells(grid, (y, x))
    report.append(f"{len(region)} cell(s) reachable from ({x},{y}).")
    reached = [g for g in goals if g in region]
    if not reached:
        report.append(
            f"None of {len(goals)} goal cell(s) is reachable: "
            + ", ".join(f"({c},{r})" for r, c in goals))
        report.append("Verdict: UNSOLVABLE")
        return False, report

    report.append(
        "Reachable goal(s): " + ", ".join(f"({c},{r})" for r, c in reached))
    report.append("Verdict: SOLVABLE")
    return True, report


def solve_report(level: MazeLevel) -> str:
    """
    Convenience wrapper: both reports as a single string.
    """
    _, mobility = pursuer_is_mobile(level)
    _, solvable = is_solvable(level)
    return "\n".join(mobility + [""] + solvable)
