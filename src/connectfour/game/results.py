from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GameOutcome(Enum):
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameRecord:
    game_number: int
    outcome: GameOutcome
    winner: Optional[str]
    moves: int
    player1: str
    points1: int
    player2: str
    points2: int
