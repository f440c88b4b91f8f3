from __future__ import annotations

import pandas as pd

from connectfour.config import DRAW_POINTS, WIN_POINTS


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def player_names(df: pd.DataFrame) -> tuple[str, str]:
    _require_cols(df, ["player1", "player2"])
    if df.empty:
        raise ValueError("No games in results.")
    first = df.iloc[0]
    return str(first["player1"]), str(first["player2"])


def standings(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per player: games, wins, draws, losses, points and points per game,
    best first.
    """
    _require_cols(df, ["outcome", "winner"])
    names = player_names(df)

    games = len(df)
    draws = int((df["outcome"] == "draw").sum())

    rows = []
    for name in names:
        wins = int((df["winner"] == name).sum())
        losses = games - wins - draws
        points = wins * WIN_POINTS + draws * DRAW_POINTS
        rows.append(
            {
                "name": name,
                "games": games,
                "wins": wins,
                "draws": draws,
                "losses": losses,
                "points": points,
                "ppg": round(points / games, 3) if games else 0.0,
            }
        )

    out = pd.DataFrame(rows).sort_values(["points", "wins"], ascending=False, kind="stable")
    out = out.reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def score_progression(df: pd.DataFrame) -> pd.DataFrame:
    """Cumulative points of each player after every game, indexed by game."""
    _require_cols(df, ["game", "points1", "points2"])
    name1, name2 = player_names(df)
    out = df[["game", "points1", "points2"]].rename(columns={"points1": name1, "points2": name2})
    return out.set_index("game").sort_index()


def outcome_counts(df: pd.DataFrame) -> pd.Series:
    """Games won by each player plus draws."""
    _require_cols(df, ["outcome", "winner"])
    name1, name2 = player_names(df)
    labels = df["winner"].where(df["outcome"] == "win", "draw")
    return labels.value_counts().reindex([name1, name2, "draw"], fill_value=0)
