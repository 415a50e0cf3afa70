from __future__ import annotations
from typing import Protocol

from dropfour.game.actions import Action
from dropfour.game.state import GameState


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Action:
        ...
