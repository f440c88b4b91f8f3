from __future__ import annotations
import logging
import re
from typing import Callable, Optional, Tuple

from connectfour.config import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    END_COMMAND,
    MAX_SIZE,
    MIN_SIZE,
)
from connectfour.errors import InvalidInput
from connectfour.game.state import SeriesSetup
from connectfour.types import ColumnChoice, ForcedEnd, MoveCommand
from connectfour.ui.render import ConsoleReporter

logger = logging.getLogger(__name__)

_SIZE_RE = re.compile(r"\s*(\d+)\s*[xX]\s*(\d+)\s*")


def parse_move(raw: str, cols: int) -> MoveCommand:
    s = raw.strip()
    if s == END_COMMAND:
        return ForcedEnd()
    try:
        col = int(s)
    except ValueError:
        raise InvalidInput("Incorrect column number") from None
    if col < 1 or col > cols:
        raise InvalidInput(f"The column number is out of range (1 - {cols})")
    return ColumnChoice(col)


def parse_board_size(raw: str) -> Tuple[int, int]:
    if raw == "":
        return DEFAULT_ROWS, DEFAULT_COLS

    m = _SIZE_RE.fullmatch(raw)
    if m is None:
        raise InvalidInput("Invalid input")

    rows, cols = int(m.group(1)), int(m.group(2))
    if not MIN_SIZE <= rows <= MAX_SIZE:
        raise InvalidInput(f"Board rows should be from {MIN_SIZE} to {MAX_SIZE}")
    if not MIN_SIZE <= cols <= MAX_SIZE:
        raise InvalidInput(f"Board columns should be from {MIN_SIZE} to {MAX_SIZE}")
    return rows, cols


def parse_game_count(raw: str) -> int:
    if raw in {"", "1"}:
        return 1
    try:
        n = int(raw)
    except ValueError:
        raise InvalidInput("Invalid input") from None
    if n < 1:
        raise InvalidInput("Invalid input")
    return n


class ConsoleInput:
    """
    Reads setup and moves from a line source, re-asking until the text parses.

    Parse errors are shown through the reporter and never leave this class.
    """

    def __init__(self, reporter: ConsoleReporter, read: Optional[Callable[[], str]] = None) -> None:
        self.reporter = reporter
        self.read = read if read is not None else input

    def _ask(self, prompt: str) -> str:
        self.reporter.report_message(prompt)
        return self.read()

    def request_player_name(self, prefix: str) -> str:
        return self._ask(f"{prefix} player's name:")

    def request_board_size(self) -> Tuple[int, int]:
        while True:
            raw = self._ask("Set the board dimensions (Rows x Columns)\nPress Enter for default (6 x 7)")
            try:
                return parse_board_size(raw)
            except InvalidInput as e:
                logger.debug("Rejected board size %r: %s", raw, e)
                self.reporter.report_invalid_move(str(e))

    def request_game_count(self) -> int:
        while True:
            raw = self._ask(
                "Do you want to play single or multiple games?\n"
                "For a single game, input 1 or press Enter\n"
                "Input a number of games:"
            )
            try:
                return parse_game_count(raw)
            except InvalidInput as e:
                logger.debug("Rejected game count %r: %s", raw, e)
                self.reporter.report_invalid_move(str(e))

    def request_series_setup(self) -> SeriesSetup:
        self.reporter.report_message("Connect Four")
        player1 = self.request_player_name("First")
        player2 = self.request_player_name("Second")
        rows, cols = self.request_board_size()
        games = self.request_game_count()
        return SeriesSetup(player1, player2, rows, cols, games)

    def request_move(self, player_name: str, cols: int) -> MoveCommand:
        # the controller has already shown the turn prompt for the first attempt
        while True:
            raw = self.read()
            try:
                return parse_move(raw, cols)
            except InvalidInput as e:
                logger.debug("Rejected move %r from %s: %s", raw, player_name, e)
                self.reporter.report_invalid_move(str(e))
                self.reporter.report_turn_prompt(player_name)
