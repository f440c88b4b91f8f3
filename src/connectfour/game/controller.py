from __future__ import annotations

import logging
from typing import List, Optional

from connectfour.config import DRAW_POINTS, WIN_POINTS
from connectfour.core.board import Board
from connectfour.core.rules import is_draw, is_winning_move
from connectfour.game.ports import MoveSource, Reporter
from connectfour.game.results import GameOutcome, GameRecord
from connectfour.game.state import MatchState, Player, SeriesSetup
from connectfour.types import Cell, ForcedEnd

logger = logging.getLogger(__name__)


class MatchController:
    """
    Runs a series of games between two players.

    Moves come from a MoveSource and everything the players should see goes
    to a Reporter; the controller owns the board, both players and the
    per-game state.
    """

    def __init__(self, setup: SeriesSetup, moves: MoveSource, reporter: Reporter) -> None:
        self.setup = setup
        self.moves = moves
        self.reporter = reporter

        self.board = Board(setup.rows, setup.cols)
        self.players = (
            Player(setup.player1, Cell.PLAYER1),
            Player(setup.player2, Cell.PLAYER2),
        )
        self.state = MatchState()
        self.history: List[GameRecord] = []

    @property
    def current_player(self) -> Player:
        return self.players[self.state.current]

    def _next_player(self) -> None:
        self.state.current = (self.state.current + 1) % len(self.players)

    def play_turn(self) -> None:
        """
        Ask the active player for moves until one lands or the series is
        ended. A full column is reported and the same player asked again.
        """
        player = self.current_player
        while True:
            self.reporter.report_turn_prompt(player.name)
            command = self.moves.request_move(player.name, self.board.cols)

            if isinstance(command, ForcedEnd):
                logger.info("%s ended the series during game %d", player.name, self.state.game_number)
                self.state.forced_end = True
                return

            result = self.board.drop_disc(command.column, player.disc)
            if not result.success:
                logger.info("%s tried full column %d", player.name, command.column)
                self.reporter.report_invalid_move(f"Column {command.column} is full")
                continue

            self.state.last_move = (command.column - 1, result.row)
            self.state.moves += 1
            self.reporter.report_board(self.board.snapshot())
            return

    def evaluate(self) -> Optional[GameOutcome]:
        """Score the last move of the active player, if it ended the game."""
        if self.state.last_move is None:
            return None

        player = self.current_player
        if is_winning_move(self.board, self.state.last_move, player.disc):
            player.points += WIN_POINTS
            self.state.game_over = True
            logger.info("Game %d won by %s", self.state.game_number, player.name)
            self.reporter.report_game_result(player.name)
            return GameOutcome.WIN

        if is_draw(self.board, self.state.last_move, player.disc):
            for p in self.players:
                p.points += DRAW_POINTS
            self.state.game_over = True
            logger.info("Game %d is a draw", self.state.game_number)
            self.reporter.report_game_result(None)
            return GameOutcome.DRAW

        return None

    def play_game(self) -> Optional[GameRecord]:
        """Play one game; returns None when it was ended early."""
        self.state.start_game()
        if self.setup.games > 1:
            self.reporter.report_game_number(self.state.game_number)
        self.reporter.report_board(self.board.snapshot())

        outcome: Optional[GameOutcome] = None
        winner: Optional[str] = None
        while not self.state.game_over and not self.state.forced_end:
            self.play_turn()
            if not self.state.forced_end:
                outcome = self.evaluate()
                if outcome is GameOutcome.WIN:
                    winner = self.current_player.name
            self._next_player()
            logger.debug("Turn passes to %s", self.current_player.name)

        if self.state.forced_end or outcome is None:
            return None

        p1, p2 = self.players
        record = GameRecord(
            game_number=self.state.game_number,
            outcome=outcome,
            winner=winner,
            moves=self.state.moves,
            player1=p1.name,
            points1=p1.points,
            player2=p2.name,
            points2=p2.points,
        )
        self.history.append(record)
        return record

    def play(self) -> List[GameRecord]:
        self.reporter.report_match_header(self.setup)

        while self.state.game_number < self.setup.games:
            record = self.play_game()
            if record is None:
                break

            if self.setup.games > 1:
                p1, p2 = self.players
                self.reporter.report_scores(p1.name, p1.points, p2.name, p2.points)
                self.board.reset()

        logger.info("Series finished after %d game(s)", len(self.history))
        self.reporter.report_series_end()
        return self.history
