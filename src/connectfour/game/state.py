from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from connectfour.config import DEFAULT_COLS, DEFAULT_GAMES, DEFAULT_ROWS, MAX_SIZE, MIN_SIZE
from connectfour.errors import InvalidInput
from connectfour.types import Cell, Coord


@dataclass(slots=True)
class Player:
    name: str
    disc: Cell
    points: int = 0


@dataclass(slots=True)
class MatchState:
    last_move: Optional[Coord] = None
    game_over: bool = False
    forced_end: bool = False
    game_number: int = 0
    current: int = 0
    moves: int = 0

    def start_game(self) -> None:
        """Advance to the next game. Player 1 always opens."""
        self.game_number += 1
        self.last_move = None
        self.game_over = False
        self.forced_end = False
        self.current = 0
        self.moves = 0


@dataclass(frozen=True)
class SeriesSetup:
    player1: str
    player2: str
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    games: int = DEFAULT_GAMES

    def __post_init__(self) -> None:
        if not MIN_SIZE <= self.rows <= MAX_SIZE:
            raise InvalidInput(f"Board rows should be from {MIN_SIZE} to {MAX_SIZE}")
        if not MIN_SIZE <= self.cols <= MAX_SIZE:
            raise InvalidInput(f"Board columns should be from {MIN_SIZE} to {MAX_SIZE}")
        if self.games < 1:
            raise InvalidInput("Invalid input")
