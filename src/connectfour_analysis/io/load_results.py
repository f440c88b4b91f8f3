from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
import time
from typing import Iterable

import pandas as pd

from connectfour.game.results import GameRecord


DEFAULT_EXPECTED_COLS = [
    "game",
    "outcome",
    "winner",
    "moves",
    "player1", "points1",
    "player2", "points2",
]

NUMERIC_COLS = ["game", "moves", "points1", "points2"]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    expected_cols: tuple[str, ...] = tuple(DEFAULT_EXPECTED_COLS)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def records_to_frame(records: Iterable[GameRecord]) -> pd.DataFrame:
    rows = []
    for r in records:
        row = asdict(r)
        row["game"] = row.pop("game_number")
        row["outcome"] = r.outcome.value
        rows.append(row)
    return pd.DataFrame(rows, columns=DEFAULT_EXPECTED_COLS)


def save_results(df: pd.DataFrame, csv_path: Path) -> Path:
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(csv_path, index=False)
    return csv_path


def timestamped_path(results_dir: Path, prefix: str = "series_results") -> Path:
    ts = time.strftime("%Y%m%d_%H%M%S")
    return results_dir / f"{prefix}_{ts}.csv"


def load_results(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path, dtype={"winner": str, "player1": str, "player2": str})
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in spec.expected_cols if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    df = _coerce_numeric(df, NUMERIC_COLS)
    return df.sort_values("game").reset_index(drop=True)


def load_latest_from_dir(results_dir: Path, pattern: str = "series_results_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]
