# src/connectfour/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class Cell(Enum):
    EMPTY = " "
    PLAYER1 = "o"
    PLAYER2 = "*"

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


Coord = Tuple[int, int]  # (col, row), both 0-based, row 0 at the bottom


@dataclass(frozen=True)
class ForcedEnd:
    pass


@dataclass(frozen=True)
class ColumnChoice:
    column: int  # 1-based


MoveCommand = Union[ForcedEnd, ColumnChoice]
