"""
keyboard.py — Single-keypress input for Pitfall.

read_key() returns one character as soon as it is pressed, without
waiting for Enter.  direction_for_key() turns it into a direction.
"""

import logging
import os
import sys

from pitfall.constants import KEY_BINDINGS, NO_MOVE

if os.name == "nt":
    import msvcrt

    def read_key() -> str:
        ch = msvcrt.getwch()
        if ch == "\x03":
            raise KeyboardInterrupt
        if ch in ("\x04", "\x1a"):
            raise EOFError
        return ch
else:
    import termios
    import tty

    def _read_raw() -> str:
        """One character with the terminal in cbreak mode."""
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            # cbreak keeps Ctrl-C working as a signal
            tty.setcbreak(fd)
            return sys.stdin.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    def read_key() -> str:
        # Piped or redirected input has no terminal modes to change.
        if not sys.stdin.isatty():
            ch = sys.stdin.read(1)
        else:
            try:
                ch = _read_raw()
            except termios.error as exc:
                logging.debug("Raw key read unavailable: %s", exc)
                ch = sys.stdin.read(1)
        if ch == "":
            raise EOFError
        return ch


def direction_for_key(ch: str) -> str:
    """W/A/S/D (any case) → up/left/down/right; anything else → 'none'."""
    return KEY_BINDINGS.get(ch.lower(), NO_MOVE)


def read_direction() -> str:
    """Block for one keypress and return the direction it stands for."""
    return direction_for_key(read_key())
