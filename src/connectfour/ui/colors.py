from __future__ import annotations
import os

from connectfour.config import USE_COLOR

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"

_enabled = USE_COLOR and os.environ.get("NO_COLOR") is None


def set_color(enabled: bool) -> None:
    global _enabled
    _enabled = enabled and os.environ.get("NO_COLOR") is None


def c(s: str, code: str) -> str:
    if not _enabled:
        return s
    return f"{code}{s}{RESET}"
