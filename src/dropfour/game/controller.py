from __future__ import annotations
from typing import Callable, Optional

from dropfour.ai.base import Agent
from dropfour.game.actions import Action, apply_action
from dropfour.game.results import Outcome, Over, TerminalStatus, evaluate
from dropfour.game.state import GameState

MoveHook = Callable[[GameState, Action, TerminalStatus], None]


def play_game(
    state: GameState,
    agent_0: Agent,
    agent_1: Agent,
    on_move: Optional[MoveHook] = None,
) -> Outcome:
    """
    Alternate the two agents on `state` (mutated in place) until the game ends.

    A state that is already over returns its outcome without asking either
    agent. Illegal moves raise ActionError out of here unchanged.
    """
    status = evaluate(state)

    while not isinstance(status, Over):
        agent = agent_0 if state.next_player == 0 else agent_1
        action = agent.choose_move(state)
        status = apply_action(state, action)

        if on_move is not None:
            on_move(state, action, status)

    return status.outcome
