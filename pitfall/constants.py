"""
constants.py — Shared constants for Pitfall.

Cell types, directional data, key bindings, rendering glyphs, ANSI
codes and outcome names live here so every other module can import
them from a single authoritative source.
"""

from enum import IntEnum


# ═══════════════════════════════════════════════════════════════════════════
#  CELL TYPES
# ═══════════════════════════════════════════════════════════════════════════

class Cell(IntEnum):
    """Static type of one grid square.  Values match the level file codes."""

    OUT_OF_BOUNDS = -1   # returned by Grid.get(), never stored
    OPEN = 0
    WALL = 1
    GOAL = 2


# ═══════════════════════════════════════════════════════════════════════════
#  ANSI ESCAPE CODES
# ═══════════════════════════════════════════════════════════════════════════

ANSI_RESET = "\033[0m"
ANSI_BOLD  = "\033[1m"

ANSI_COLORS = {
    "red":   "\033[31m",
    "green": "\033[32m",
    "blue":  "\033[34m",
}

# ═══════════════════════════════════════════════════════════════════════════
#  GLYPHS
# ═══════════════════════════════════════════════════════════════════════════

WALL_CHAR      = "#"
OPEN_CHAR      = " "
GOAL_CHAR      = "$"
PURSUER_SYMBOL = "@"

CELL_CHARS = {
    Cell.OPEN: OPEN_CHAR,
    Cell.WALL: WALL_CHAR,
    Cell.GOAL: GOAL_CHAR,
}

# ═══════════════════════════════════════════════════════════════════════════
#  DIRECTIONAL DATA
# ═══════════════════════════════════════════════════════════════════════════

NO_MOVE = "none"

# Row / column deltas for each compass direction.
DIR_DELTA = {
    "up":    (-1,  0),
    "down":  ( 1,  0),
    "left":  ( 0, -1),
    "right": ( 0,  1),
}

# Order the pursuer samples from.
CARDINALS = ("left", "down", "right", "up")

KEY_BINDINGS = {
    "w": "up",
    "a": "left",
    "s": "down",
    "d": "right",
}

# ═══════════════════════════════════════════════════════════════════════════
#  OUTCOMES
# ═══════════════════════════════════════════════════════════════════════════

ONGOING = "ongoing"
WON     = "won"
LOST    = "lost"

# (x, y) where the user appears at the start of every level.
USER_START = (1, 1)
