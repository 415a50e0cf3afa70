from __future__ import annotations
from dataclasses import dataclass, field

from dropfour.config import ROWS, COLS
from dropfour.core.board import Board


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    next_player: int = 0

    def copy(self) -> "GameState":
        return GameState(board=self.board.copy(), next_player=self.next_player)


def new_game(rows: int = ROWS, cols: int = COLS) -> GameState:
    """Empty board, player 0 to move."""
    return GameState(board=Board(rows, cols), next_player=0)
