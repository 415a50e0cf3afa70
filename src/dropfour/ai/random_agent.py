from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import Optional

from dropfour.game.actions import Action, is_legal
from dropfour.game.state import GameState


@dataclass(slots=True)
class RandomAgent:
    """
    Uniform random column, resampled until it is legal.

    Pass `rng` to share a generator with the caller (rollouts do this),
    otherwise one is built from `seed`.
    """
    name: str = "Random AI"
    seed: Optional[int] = None
    rng: Optional[random.Random] = None

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random(self.seed)

    def choose_move(self, state: GameState) -> Action:
        cols = state.board.cols
        if not any(state.board.top_is_empty(c) for c in range(cols)):
            raise ValueError("No valid moves.")

        while True:
            action = Action(self.rng.randrange(cols))
            if is_legal(state, action):
                return action
