from __future__ import annotations
from typing import Optional, List, Tuple

from dropfour.config import CONNECT_N
from dropfour.core.board import Board
from dropfour.types import Coord

# (dcol, drow) in scan order: vertical, horizontal, diagonal up, diagonal down
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def _starts(board: Board, dc: int, dr: int):
    span = CONNECT_N - 1
    col_stop = board.cols - span if dc else board.cols
    if dr > 0:
        rows = range(board.rows - span)
    elif dr < 0:
        rows = range(span, board.rows)
    else:
        rows = range(board.rows)

    # horizontal windows are walked row by row, the rest column by column
    if dr == 0:
        for r in rows:
            for c in range(col_stop):
                yield c, r
    else:
        for c in range(col_stop):
            for r in rows:
                yield c, r


def winning_line(board: Board) -> Optional[Tuple[int, List[Coord]]]:
    """First four-in-a-row found, as (owner, cells), or None."""
    g = board.cells
    rows = board.rows

    for dc, dr in DIRECTIONS:
        step = dc * rows + dr
        for c, r in _starts(board, dc, dr):
            i = c * rows + r
            p = g[i]
            if p is None:
                continue
            if all(g[i + k * step] == p for k in range(1, CONNECT_N)):
                return p, [(c + k * dc, r + k * dr) for k in range(CONNECT_N)]

    return None


def check_winner(board: Board) -> Optional[int]:
    res = winning_line(board)
    return res[0] if res else None


def is_tie(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
