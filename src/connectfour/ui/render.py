from __future__ import annotations
from typing import Callable, List, Optional

from connectfour.core.board import Snapshot
from connectfour.game.state import SeriesSetup
from connectfour.types import Cell
from connectfour.ui.colors import c, BOLD, DIM, FG_CYAN, FG_RED, FG_YELLOW


def _piece(cell: Cell) -> str:
    if cell is Cell.PLAYER1:
        return c(cell.symbol, FG_RED)
    if cell is Cell.PLAYER2:
        return c(cell.symbol, FG_YELLOW)
    return cell.symbol


def render_board(snapshot: Snapshot) -> List[str]:
    """
    Lines of the board, top row first.

    `snapshot` is bottom row first, as produced by Board.snapshot().
    """
    rows = len(snapshot)
    cols = len(snapshot[0]) if rows else 0

    lines = [" " + " ".join(str(i + 1) for i in range(cols))]
    for r in range(rows - 1, -1, -1):
        parts = []
        for col in range(cols):
            parts.append(f"║{_piece(snapshot[r][col])}")
        lines.append("".join(parts) + "║")
    lines.append("╚" + "═╩" * (cols - 1) + "═╝")
    return lines


def match_header(setup: SeriesSetup) -> List[str]:
    mode = "Single game" if setup.games == 1 else f"Total {setup.games} games"
    return [
        f"{setup.player1} VS {setup.player2}",
        f"{setup.rows} X {setup.cols} board",
        mode,
    ]


class ConsoleReporter:
    def __init__(self, out: Callable[[str], None] = print) -> None:
        self.out = out

    def report_match_header(self, setup: SeriesSetup) -> None:
        lines = match_header(setup)
        self.out(c(lines[0], BOLD))
        for line in lines[1:]:
            self.out(line)

    def report_game_number(self, number: int) -> None:
        self.out(f"Game #{number}")

    def report_board(self, snapshot: Snapshot) -> None:
        for line in render_board(snapshot):
            self.out(line)

    def report_turn_prompt(self, player_name: str) -> None:
        self.out(f"{player_name}'s turn:")

    def report_invalid_move(self, reason: str) -> None:
        self.out(reason)

    def report_message(self, message: str) -> None:
        self.out(message)

    def report_game_result(self, winner_name: Optional[str]) -> None:
        if winner_name is None:
            self.out(c("It is a draw", FG_CYAN))
        else:
            self.out(c(f"Player {winner_name} won", FG_CYAN))

    def report_scores(self, name1: str, points1: int, name2: str, points2: int) -> None:
        self.out("Score")
        self.out(f"{name1}: {points1} {name2}: {points2}")

    def report_series_end(self) -> None:
        self.out(c("Game over!", DIM))
