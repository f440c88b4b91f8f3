from __future__ import annotations
from typing import Optional, Protocol

from connectfour.core.board import Snapshot
from connectfour.game.state import SeriesSetup
from connectfour.types import MoveCommand


class MoveSource(Protocol):
    def request_series_setup(self) -> SeriesSetup:
        ...

    def request_move(self, player_name: str, cols: int) -> MoveCommand:
        """Return ForcedEnd or a ColumnChoice already checked to be in [1, cols]."""
        ...


class Reporter(Protocol):
    def report_match_header(self, setup: SeriesSetup) -> None:
        ...

    def report_game_number(self, number: int) -> None:
        ...

    def report_board(self, snapshot: Snapshot) -> None:
        ...

    def report_turn_prompt(self, player_name: str) -> None:
        ...

    def report_invalid_move(self, reason: str) -> None:
        ...

    def report_game_result(self, winner_name: Optional[str]) -> None:
        ...

    def report_scores(self, name1: str, points1: int, name2: str, points2: int) -> None:
        ...

    def report_series_end(self) -> None:
        ...
