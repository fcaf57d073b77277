"""
renderer.py — Terminal rendering for Pitfall.

Handles screen clearing, the welcome banner, the end-of-match banner
and drawing the ANSI-colored maze from a RenderModel.
"""

import os

from pitfall.constants import (
    ANSI_BOLD, ANSI_COLORS, ANSI_RESET, CELL_CHARS, GOAL_CHAR,
    PURSUER_SYMBOL, Cell,
)
from pitfall.level import RenderModel

_RED   = ANSI_COLORS["red"]
_GREEN = ANSI_COLORS["green"]
_BLUE  = ANSI_COLORS["blue"]


def clear_screen():
    """Clear the terminal (cross-platform)."""
    os.system("cls" if os.name == "nt" else "clear")


def _paint(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    return f"{''.join(codes)}{text}{ANSI_RESET}"


def banner_lines(word: str, width: int) -> list:
    """
    Three rows of '+' with *word* centred in the middle one.

    *width* is the number of maze columns; the bars are two wider so
    they line up with the side borders.
    """
    bar   = "+" * (width + 2)
    left  = "+" * max((width + 2 - len(word)) // 2, 0)
    right = "+" * max(width + 2 - len(word) - len(left), 0)
    return [bar, f"{left}{word}{right}", bar]


def build_frame(model: RenderModel, color: bool = True) -> list:
    """
    Lay out one frame as a list of lines.

    Drawing priority inside a cell, highest first:
      user on a goal  →  bold green user glyph
      pursuer         →  bold red pursuer glyph (covers the user)
      user            →  blue user glyph
      wall / goal / open
    """
    ux, uy = model.user_pos
    px, py = model.pursuer_pos

    lines = banner_lines(f" Maze {model.level_number} ", model.cols)
    lines.append("┌" + "─" * model.cols + "┐")
    for r, row in enumerate(model.cells):
        parts = []
        for c, cell in enumerate(row):
            if (c, r) == (ux, uy) and model.user_on_goal and (c, r) != (px, py):
                parts.append(_paint(model.user_symbol, ANSI_BOLD, _GREEN,
                                    color=color))
            elif (c, r) == (px, py):
                parts.append(_paint(model.pursuer_symbol, ANSI_BOLD, _RED,
                                    color=color))
            elif (c, r) == (ux, uy):
                parts.append(_paint(model.user_symbol, _BLUE, color=color))
            elif cell is Cell.GOAL:
                parts.append(_paint(GOAL_CHAR, _GREEN, color=color))
            else:
                parts.append(CELL_CHARS[cell])
        lines.append("|" + "".join(parts) + "|")
    lines.append("└" + "─" * model.cols + "┘")
    return lines


def render(model: RenderModel):
    """Print the full game board for *model*."""
    print("\n".join(build_frame(model)))


def instruction_lines(color: bool = True) -> list:
    monster = _paint(PURSUER_SYMBOL, ANSI_BOLD, _RED, color=color)
    token   = _paint(GOAL_CHAR, _GREEN, color=color)
    return [
        "***********************************",
        "*    Welcome to the Pitfall!!!    *",
        "*  You need to escape as quickly  *",
        "*    as possible to ensure the    *",
        f"*  monster '{monster}' does not catch up  *",
        "*  to you! In order to escape the *",
        "* maze, you must find the path to *",
        f"* this token: '{token}'                 *",
        "*  Move with W / A / S / D keys.  *",
        "*********** !GOOD LUCK! ***********",
    ]


def print_instructions():
    print("\n".join(instruction_lines()))


def print_banner(word: str, width: int):
    """Print the ' Winner ' / ' Defeat ' box under the final frame."""
    print("\n".join(banner_lines(word, width)))
