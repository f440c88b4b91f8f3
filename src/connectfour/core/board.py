# src/connectfour/core/board.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple

from connectfour.config import DEFAULT_ROWS, DEFAULT_COLS
from connectfour.errors import InvalidInput, OutOfBounds
from connectfour.types import Cell

logger = logging.getLogger(__name__)

Snapshot = Tuple[Tuple[Cell, ...], ...]


class DropResult(NamedTuple):
    row: Optional[int]
    success: bool


@dataclass(slots=True)
class Board:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    # grid[row][col], row 0 is the bottom of the board
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Cell.EMPTY for _ in range(self.cols)] for _ in range(self.rows)]

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def cell_at(self, col: int, row: int) -> Cell:
        if not self.in_bounds(col, row):
            raise OutOfBounds(col, row)
        return self.grid[row][col]

    def column_height(self, col: int) -> int:
        if not 0 <= col < self.cols:
            raise OutOfBounds(col, 0)
        return sum(1 for r in range(self.rows) if self.grid[r][col] is not Cell.EMPTY)

    def is_full(self) -> bool:
        return all(cell is not Cell.EMPTY for row in self.grid for cell in row)

    def drop_disc(self, column: int, disc: Cell) -> DropResult:
        """
        Drop `disc` into the 1-based `column`.

        The disc lands in the lowest empty row. A full column is not an
        error: the board is left untouched and the result has success=False.
        """
        if disc is Cell.EMPTY:
            raise InvalidInput("Cannot drop an empty cell.")
        if column < 1 or column > self.cols:
            raise InvalidInput(f"The column number is out of range (1 - {self.cols})")

        c = column - 1
        for r in range(self.rows):
            if self.grid[r][c] is Cell.EMPTY:
                self.grid[r][c] = disc
                logger.debug("Dropped %s into column %d, row %d", disc.name, column, r)
                return DropResult(r, True)

        logger.debug("Column %d is full", column)
        return DropResult(None, False)

    def reset(self) -> None:
        for row in self.grid:
            for c in range(self.cols):
                row[c] = Cell.EMPTY
        logger.debug("Board reset (%d x %d)", self.rows, self.cols)

    def snapshot(self) -> Snapshot:
        return tuple(tuple(row) for row in self.grid)
