from __future__ import annotations
from typing import Tuple

from connectfour.config import CONNECT_N
from connectfour.core.board import Board
from connectfour.types import Cell, Coord

Axis = Tuple[int, int]  # (dcol, drow)

# vertical, horizontal, rising diagonal, falling diagonal
AXES: Tuple[Axis, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def count_direction(board: Board, coord: Coord, disc: Cell, dc: int, dr: int) -> int:
    """
    Number of consecutive `disc` cells starting at `coord` (inclusive) and
    walking by (dc, dr) until a different cell or the edge.
    """
    col, row = coord
    n = 0
    while board.in_bounds(col, row) and board.grid[row][col] == disc:
        n += 1
        col += dc
        row += dr
    return n


def axis_length(board: Board, coord: Coord, disc: Cell, axis: Axis) -> int:
    dc, dr = axis
    forward = count_direction(board, coord, disc, dc, dr)
    backward = count_direction(board, coord, disc, -dc, -dr)
    if forward == 0:
        return 0
    # the anchor cell is counted by both walks
    return forward + backward - 1


def is_winning_move(board: Board, coord: Coord, disc: Cell) -> bool:
    if disc is Cell.EMPTY:
        return False
    return any(axis_length(board, coord, disc, axis) >= CONNECT_N for axis in AXES)


def is_draw(board: Board, coord: Coord, disc: Cell) -> bool:
    # a move that fills the board and connects four is a win
    return board.is_full() and not is_winning_move(board, coord, disc)
