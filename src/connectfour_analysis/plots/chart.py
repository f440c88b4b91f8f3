from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt

from ..metrics.summarize import outcome_counts, score_progression


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_score_progression(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    prog = score_progression(df)

    fig = plt.figure()
    for name in prog.columns:
        plt.step(prog.index, prog[name], where="post", marker="o", label=name)
    plt.title("Cumulative points")
    plt.xlabel("game")
    plt.ylabel("points")
    plt.xticks(list(prog.index))
    plt.legend()

    return _finish(fig, outdir, "score_progression.png", show=show)


def plot_outcomes(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    counts = outcome_counts(df)

    fig = plt.figure()
    plt.bar(counts.index.astype(str), counts.values)
    plt.title("Results")
    plt.xlabel("winner")
    plt.ylabel("games")

    return _finish(fig, outdir, "outcomes.png", show=show)
