import pytest

from connectfour.errors import InvalidInput
from connectfour.game.controller import MatchController
from connectfour.game.results import GameOutcome
from connectfour.game.state import SeriesSetup
from connectfour.types import Cell
from tests.helpers import RecordingReporter, ScriptedMoves, moves_from

# P1 stacks column 1 and wins on its fourth disc (7 moves)
P1_WINS = (1, 2, 1, 2, 1, 2, 1)
# fills a 5x5 board with no four in a line (25 moves)
DRAW_5X5 = (1,) * 5 + (3,) * 5 + (2,) * 5 + (4,) * 5 + (5,) * 5
# P2 stacks column 2 and wins on its fourth disc (8 moves)
P2_WINS = (1, 2, 1, 2, 3, 2, 3, 2)


def _controller(moves, rows=6, cols=7, games=1):
    setup = SeriesSetup("Ann", "Bob", rows, cols, games)
    source = ScriptedMoves(moves_from(*moves))
    reporter = RecordingReporter()
    return MatchController(setup, source, reporter), source, reporter


def test_three_stacked_discs_do_not_win_fourth_does():
    ctl, _, reporter = _controller((4, 3, 4, 5, 4, 1, 4))
    ctl.state.start_game()

    for _ in range(5):
        ctl.play_turn()
        assert ctl.evaluate() is None
        ctl._next_player()

    assert [ctl.board.cell_at(3, r) for r in range(3)] == [Cell.PLAYER1] * 3
    assert ctl.players[0].points == 0

    ctl.play_turn()
    assert ctl.evaluate() is None
    ctl._next_player()

    ctl.play_turn()
    assert ctl.evaluate() is GameOutcome.WIN
    assert ctl.state.game_over
    assert ctl.state.last_move == (3, 3)
    assert ctl.players[0].points == 2
    assert ctl.players[1].points == 0
    assert reporter.of("result") == [("Ann",)]


def test_single_game_vertical_win_end_to_end():
    ctl, source, reporter = _controller((4, 3, 4, 5, 4, 1, 4))
    history = ctl.play()

    assert len(history) == 1
    record = history[0]
    assert record.outcome is GameOutcome.WIN
    assert record.winner == "Ann"
    assert record.moves == 7
    assert (record.points1, record.points2) == (2, 0)

    assert source.requests == ["Ann", "Bob"] * 3 + ["Ann"]
    # single games show no game number and no score line
    assert reporter.of("game") == []
    assert reporter.of("scores") == []
    assert reporter.events[0][0] == "header"
    assert reporter.events[-1] == ("end",)
    # empty board first, then one board per drop
    assert len(reporter.of("board")) == 8


def test_full_column_asks_same_player_again():
    ctl, source, reporter = _controller((1, 1, 1, 1, 1, 1, 2, "end"), rows=5, cols=5)
    ctl.play()

    assert reporter.of("invalid") == [("Column 1 is full",)]
    assert source.requests == ["Ann", "Bob", "Ann", "Bob", "Ann", "Bob", "Bob", "Ann"]
    assert ctl.board.column_height(0) == 5
    assert ctl.board.cell_at(1, 0) is Cell.PLAYER2
    assert ctl.state.moves == 6


def test_win_on_last_empty_cell_beats_draw():
    ctl, _, reporter = _controller((5,), rows=5, cols=5)
    for r in range(5):
        for c in range(5):
            ctl.board.grid[r][c] = Cell.PLAYER1 if (r + c) % 2 == 0 else Cell.PLAYER2
    ctl.board.grid[4][4] = Cell.EMPTY

    history = ctl.play()

    assert ctl.board.is_full()
    assert history[0].outcome is GameOutcome.WIN
    assert reporter.of("result") == [("Ann",)]
    assert (ctl.players[0].points, ctl.players[1].points) == (2, 0)


def test_draw_gives_each_player_a_point():
    ctl, _, reporter = _controller(DRAW_5X5, rows=5, cols=5)
    history = ctl.play()

    assert ctl.board.is_full()
    assert history[0].outcome is GameOutcome.DRAW
    assert history[0].winner is None
    assert history[0].moves == 25
    assert reporter.of("result") == [(None,)]
    assert (ctl.players[0].points, ctl.players[1].points) == (1, 1)


def test_series_scoring_win_draw_loss():
    ctl, source, reporter = _controller(P1_WINS + DRAW_5X5 + P2_WINS, rows=5, cols=5, games=3)
    history = ctl.play()

    assert [r.outcome for r in history] == [GameOutcome.WIN, GameOutcome.DRAW, GameOutcome.WIN]
    assert [r.winner for r in history] == ["Ann", None, "Bob"]
    assert (ctl.players[0].points, ctl.players[1].points) == (3, 3)

    assert reporter.of("game") == [(1,), (2,), (3,)]
    assert reporter.of("scores") == [
        ("Ann", 2, "Bob", 0),
        ("Ann", 3, "Bob", 1),
        ("Ann", 3, "Bob", 3),
    ]
    assert reporter.events[-1] == ("end",)
    assert source.moves == []


def test_player_one_opens_every_game():
    # game 1 ends on Ann's move, so rotation alone would hand game 2 to Bob
    ctl, source, _ = _controller(P1_WINS + (3, "end"), games=2)
    ctl.play()

    assert source.requests[len(P1_WINS)] == "Ann"


def test_board_is_reset_between_games():
    ctl, _, reporter = _controller(P1_WINS + ("end",), games=2)
    ctl.play()

    boards = reporter.of("board")
    # the board shown at the start of game 2 is empty again
    start_of_game_two = boards[len(P1_WINS) + 1][0]
    assert all(cell is Cell.EMPTY for row in start_of_game_two for cell in row)


def test_forced_end_mid_series_skips_scoring():
    ctl, source, reporter = _controller(P1_WINS + (1, "end"), games=3)
    history = ctl.play()

    assert len(history) == 1
    assert (ctl.players[0].points, ctl.players[1].points) == (2, 0)
    assert ctl.state.forced_end
    assert reporter.of("game") == [(1,), (2,)]
    assert reporter.of("scores") == [("Ann", 2, "Bob", 0)]
    assert reporter.of("result") == [("Ann",)]
    assert reporter.events[-1] == ("end",)
    assert source.moves == []


def test_forced_end_on_first_move():
    ctl, _, reporter = _controller(("end",))
    history = ctl.play()

    assert history == []
    assert reporter.of("result") == []
    assert (ctl.players[0].points, ctl.players[1].points) == (0, 0)
    assert [e[0] for e in reporter.events] == ["header", "board", "turn", "end"]


@pytest.mark.parametrize(
    "rows, cols, games",
    [(4, 7, 1), (10, 7, 1), (6, 4, 1), (6, 10, 1), (6, 7, 0)],
)
def test_series_setup_is_validated(rows, cols, games):
    with pytest.raises(InvalidInput):
        SeriesSetup("Ann", "Bob", rows, cols, games)
