from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from dropfour.core.board import Board
from dropfour.core.rules import winning_line


@dataclass(frozen=True, slots=True)
class Winner:
    player: int

    def __str__(self) -> str:
        return f"Winner({self.player})"


@dataclass(frozen=True, slots=True)
class Tie:
    def __str__(self) -> str:
        return "Tie"


Outcome = Union[Winner, Tie]


@dataclass(frozen=True, slots=True)
class InProgress:
    pass


@dataclass(frozen=True, slots=True)
class Over:
    outcome: Outcome


TerminalStatus = Union[InProgress, Over]


def evaluate(state) -> TerminalStatus:
    """
    Terminal status of a GameState (or a bare Board).

    Only the pieces matter; whose turn it is does not. Nothing is cached,
    every call rescans the board.
    """
    board: Board = state if isinstance(state, Board) else state.board

    w = winning_line(board)
    if w is not None:
        return Over(Winner(w[0]))
    if board.is_full():
        return Over(Tie())
    return InProgress()
