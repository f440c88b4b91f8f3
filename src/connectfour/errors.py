from __future__ import annotations


class InvalidInput(ValueError):
    """Malformed or out-of-range setup or move input."""


class OutOfBounds(IndexError):
    """A board coordinate outside the grid was accessed."""

    def __init__(self, col: int, row: int) -> None:
        super().__init__(f"Cell ({col}, {row}) is outside the board.")
        self.col = col
        self.row = row
