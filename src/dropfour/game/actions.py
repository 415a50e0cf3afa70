from __future__ import annotations
from dataclasses import dataclass
from typing import List

from dropfour.errors import ColumnFull, InvalidColumn
from dropfour.game.results import TerminalStatus, evaluate
from dropfour.game.state import GameState


@dataclass(frozen=True, slots=True)
class Action:
    column: int


def other(player: int) -> int:
    return 1 - player


def is_legal(state: GameState, action: Action) -> bool:
    board = state.board
    if action.column < 0 or action.column >= board.cols:
        return False
    return board.top_is_empty(action.column)


def legal_actions(state: GameState) -> List[Action]:
    return [Action(c) for c in range(state.board.cols) if state.board.top_is_empty(c)]


def apply_action(state: GameState, action: Action) -> TerminalStatus:
    """
    Drop the mover's piece in the lowest empty row of the column, hand the
    turn over, and return the new terminal status.

    Raises InvalidColumn / ColumnFull before touching the board.
    """
    board = state.board
    col = action.column
    if col < 0 or col >= board.cols:
        raise InvalidColumn(col, board.cols)

    row = board.height(col)
    if row == board.rows:
        raise ColumnFull(col)

    board.cells[board.index(col, row)] = state.next_player
    state.next_player = other(state.next_player)
    return evaluate(state)
