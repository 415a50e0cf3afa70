from __future__ import annotations
from typing import Iterable, List, Optional, Set

from dropfour.config import USE_COLOR
from dropfour.core.board import Board
from dropfour.core.rules import winning_line
from dropfour.types import Cell, Coord
from dropfour.ui.colors import c, BOLD, DIM, FG_GRAY, FG_RED, FG_YELLOW, REVERSE

SYMBOLS = {0: "X", 1: "O"}


def _piece(cell: Cell, color: bool) -> str:
    if cell is None:
        return c("·", FG_GRAY, color)
    return c(SYMBOLS[cell], FG_RED if cell == 0 else FG_YELLOW, color)


def render(
    board: Board,
    status: str = "",
    highlight: Optional[Iterable[Coord]] = None,
    color: bool = USE_COLOR,
) -> str:
    """
    Text picture of the board, top row first. Player 0 is X, player 1 is O.
    Without an explicit `highlight` the winning line (if any) is marked.
    """
    if highlight is None:
        w = winning_line(board)
        highlight = w[1] if w else ()
    hl: Set[Coord] = set(highlight)

    lines: List[str] = []
    if status:
        lines.append(c(status, BOLD, color))

    lines.append(c("   " + " ".join(str(i) for i in range(board.cols)), DIM, color))

    for r in range(board.rows - 1, -1, -1):
        parts = []
        for col in range(board.cols):
            p = _piece(board.cell(col, r), color)
            if (col, r) in hl:
                p = c(p, REVERSE, color) if color else p.lower()
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")

    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM, color))
    return "\n".join(lines)
