# src/connectfour/config.py

from __future__ import annotations

import os

DEFAULT_ROWS = 6
DEFAULT_COLS = 7
MIN_SIZE = 5
MAX_SIZE = 9
CONNECT_N = 4

DEFAULT_GAMES = 1
WIN_POINTS = 2
DRAW_POINTS = 1

# typed by a player instead of a column number
END_COMMAND = "end"

# UI toggles
USE_COLOR = False

# Logging goes to stderr; stdout carries the game itself
LOG_LEVEL = os.environ.get("CONNECTFOUR_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
