from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from connectfour.config import LOG_FORMAT, LOG_LEVEL
from connectfour.game.controller import MatchController
from connectfour.game.results import GameRecord
from connectfour.ui.colors import set_color
from connectfour.ui.prompts import ConsoleInput
from connectfour.ui.render import ConsoleReporter

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connectfour", description="Play Connect Four in the terminal.")
    ap.add_argument("--color", action="store_true", help="Color the discs with ANSI escapes")
    ap.add_argument("--log-level", type=str, default=LOG_LEVEL, help="Logging level for stderr (default: %(default)s)")
    ap.add_argument("--export-csv", type=str, default=None, help="Write the per-game results to this CSV (or a timestamped file in this directory)")
    ap.add_argument("--summary", action="store_true", help="Print player standings when the series is over")
    return ap


def _report_history(history: List[GameRecord], args: argparse.Namespace) -> None:
    # pandas is only needed for these extras
    from connectfour_analysis.io.load_results import records_to_frame, save_results, timestamped_path
    from connectfour_analysis.metrics.summarize import standings

    df = records_to_frame(history)

    if args.summary:
        print("\n=== Standings ===")
        print(standings(df).to_string(index=False))

    if args.export_csv:
        target = Path(args.export_csv)
        if target.is_dir():
            target = timestamped_path(target)
        out = save_results(df, target)
        print(f"Results written to: {out.resolve()}")


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT, stream=sys.stderr)
    set_color(args.color)

    reporter = ConsoleReporter()
    console = ConsoleInput(reporter)

    try:
        setup = console.request_series_setup()
        logger.info("Starting series: %s", setup)
        history = MatchController(setup, console, reporter).play()
    except (EOFError, KeyboardInterrupt):
        logger.warning("Input closed, leaving the game")
        return 130

    if history and (args.summary or args.export_csv):
        _report_history(history, args)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
