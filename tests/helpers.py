from connectfour.types import ColumnChoice, ForcedEnd


def moves_from(*items):
    """Columns as ints, 'end' for a forced end."""
    return [ForcedEnd() if item == "end" else ColumnChoice(item) for item in items]


class ScriptedMoves:
    def __init__(self, moves, setup=None):
        self.moves = list(moves)
        self.setup = setup
        self.requests = []

    def request_series_setup(self):
        return self.setup

    def request_move(self, player_name, cols):
        self.requests.append(player_name)
        if not self.moves:
            raise AssertionError(f"no scripted move left for {player_name}")
        return self.moves.pop(0)


class RecordingReporter:
    def __init__(self):
        self.events = []

    def _add(self, kind, *args):
        self.events.append((kind,) + args)

    def of(self, kind):
        return [e[1:] for e in self.events if e[0] == kind]

    def report_match_header(self, setup):
        self._add("header", setup)

    def report_game_number(self, number):
        self._add("game", number)

    def report_board(self, snapshot):
        self._add("board", snapshot)

    def report_turn_prompt(self, player_name):
        self._add("turn", player_name)

    def report_invalid_move(self, reason):
        self._add("invalid", reason)

    def report_game_result(self, winner_name):
        self._add("result", winner_name)

    def report_scores(self, name1, points1, name2, points2):
        self._add("scores", name1, points1, name2, points2)

    def report_series_end(self):
        self._add("end")
