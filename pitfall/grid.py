"""
grid.py — Fixed-size cell storage for a Pitfall maze.

Cells live in one flat list indexed ``row * cols + col``.  Every read
and write goes through a bounds check, so callers can probe any
integer coordinate without guarding it first.
"""

from pitfall.constants import DIR_DELTA, Cell


class Grid:
    """
    A ``rows x cols`` board of :class:`Cell` values.

    Attributes
    ----------
    rows : int   – grid height, fixed at construction.
    cols : int   – grid width, fixed at construction.
    """

    def __init__(self, rows: int, cols: int, cells=None):
        if rows <= 0 or cols <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {rows}x{cols}.")
        if cells is None:
            cells = [Cell.OPEN] * (rows * cols)
        elif len(cells) != rows * cols:
            raise ValueError(
                f"Grid {rows}x{cols} needs {rows * cols} cells, "
                f"got {len(cells)}.")
        self.rows   = rows
        self.cols   = cols
        self._cells = [Cell(value) for value in cells]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> Cell:
        """Return the cell at (row, col), or ``Cell.OUT_OF_BOUNDS``."""
        if not self.in_bounds(row, col):
            return Cell.OUT_OF_BOUNDS
        return self._cells[row * self.cols + col]

    def set(self, row: int, col: int, value) -> None:
        """Store *value* at (row, col); silently ignored out of bounds."""
        if self.in_bounds(row, col):
            self._cells[row * self.cols + col] = Cell(value)

    def is_passable(self, row: int, col: int) -> bool:
        """True when (row, col) is on the board and not a wall."""
        cell = self.get(row, col)
        return cell is not Cell.OUT_OF_BOUNDS and cell is not Cell.WALL

    def passable_neighbours(self, row: int, col: int) -> list:
        """Every passable (row, col) one step away from (row, col)."""
        result = []
        for dr, dc in DIR_DELTA.values():
            nr, nc = row + dr, col + dc
            if self.is_passable(nr, nc):
                result.append((nr, nc))
        return result

    def goal_cells(self) -> list:
        """All (row, col) positions holding a goal, in row-major order."""
        return [
            divmod(i, self.cols)
            for i, cell in enumerate(self._cells)
            if cell is Cell.GOAL
        ]

    def as_rows(self) -> tuple:
        """Immutable row-major snapshot, one tuple per row."""
        return tuple(
            tuple(self._cells[r * self.cols:(r + 1) * self.cols])
            for r in range(self.rows)
        )
