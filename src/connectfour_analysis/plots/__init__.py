from .chart import (
    plot_outcomes,
    plot_score_progression,
)

__all__ = [
    "plot_outcomes",
    "plot_score_progression",
]
