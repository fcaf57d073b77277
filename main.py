#!/usr/bin/env python3
"""
main.py — Entry point for Pitfall.

Run from the repository root:
    python main.py

Environment
-----------
  PITFALL_SEED        integer seed for the pursuer's random walk
  PITFALL_LOG_LEVEL   logging level name (default WARNING)
"""

import logging
import os
import random
import sys

from pitfall.constants import WON
from pitfall.engine import play_match
from pitfall.entities import Actor
from pitfall.keyboard import read_direction
from pitfall.level_manager import load_levels
from pitfall.renderer import (
    clear_screen, print_banner, print_instructions, render,
)


def configure_logging() -> None:
    level_name = os.environ.get("PITFALL_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def make_rng() -> random.Random:
    """One generator for the whole run, seeded from PITFALL_SEED if set."""
    seed = os.environ.get("PITFALL_SEED")
    if seed is None:
        return random.Random()
    try:
        return random.Random(int(seed))
    except ValueError:
        logging.warning("Ignoring non-integer PITFALL_SEED=%r", seed)
        return random.Random()


def enable_windows_ansi():
    """Enable virtual-terminal processing on Windows 10+ for ANSI codes."""
    if os.name == "nt":
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            # ENABLE_PROCESSED_OUTPUT | ENABLE_WRAP_AT_EOL | ENABLE_VIRTUAL_TERMINAL
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
        except (AttributeError, OSError) as exc:
            logging.debug("ANSI colors unavailable: %s", exc)


def prompt_symbol(prompt: str = "Choose your character: ") -> str:
    """Ask until the player types a non-blank character; return the first."""
    while True:
        answer = input(prompt).strip()
        if answer:
            return answer[0]


def main():
    configure_logging()
    enable_windows_ansi()

    try:
        sequence = load_levels(rng=make_rng())
    except (OSError, ValueError) as exc:
        logging.error("Level load failed: %s", exc)
        print(f"  Could not load levels: {exc}")
        sys.exit(1)

    clear_screen()
    print_instructions()
    try:
        symbol = prompt_symbol()
    except (EOFError, KeyboardInterrupt):
        print("\n  Goodbye!")
        return

    # Helper: redraw the whole screen.
    def refresh(model):
        clear_screen()
        render(model)

    user = Actor(0, 0, symbol)
    try:
        state = play_match(sequence, user, read_direction, on_render=refresh)
    except (EOFError, KeyboardInterrupt):
        print("\n  Goodbye!")
        return

    # ── Result ──
    width = sequence[state.level_index].grid.cols
    if state.outcome == WON:
        print_banner(" Winner ", width)
    else:
        print_banner(" Defeat ", width)


if __name__ == "__main__":
    main()
