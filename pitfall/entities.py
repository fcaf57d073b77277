"""
entities.py — Positioned actors for Pitfall.
"""


class Actor:
    """
    The user's avatar or the pursuer.

    Attributes
    ----------
    x      : int   – column on the grid.
    y      : int   – row on the grid.
    symbol : str   – single character drawn at (x, y).
    """

    def __init__(self, x: int, y: int, symbol: str):
        self.x      = x
        self.y      = y
        self.symbol = symbol

    @property
    def position(self):
        """The (x, y) the actor currently occupies."""
        return self.x, self.y

    def place(self, x: int, y: int):
        self.x = x
        self.y = y

    def __repr__(self):
        return f"Actor({self.x}, {self.y}, {self.symbol!r})"
