from __future__ import annotations

import random
import time
from concurrent.futures import Executor, ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from dropfour.ai.random_agent import RandomAgent
from dropfour.config import ROLLOUT_BATCH_SIZE, ROLLOUTS_PER_MOVE
from dropfour.game.actions import Action, apply_action, legal_actions
from dropfour.game.controller import play_game
from dropfour.game.results import Outcome, Winner
from dropfour.game.state import GameState


@dataclass(slots=True)
class RolloutTally:
    wins: int = 0
    losses: int = 0
    ties: int = 0

    @classmethod
    def from_outcome(cls, outcome: Outcome, player: int) -> "RolloutTally":
        if isinstance(outcome, Winner):
            if outcome.player == player:
                return cls(wins=1)
            return cls(losses=1)
        return cls(ties=1)

    def __add__(self, other: "RolloutTally") -> "RolloutTally":
        return RolloutTally(
            self.wins + other.wins,
            self.losses + other.losses,
            self.ties + other.ties,
        )

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.ties

    def score(self) -> float:
        """(wins - losses) / playouts; ties only count in the denominator."""
        if self.total == 0:
            return 0.0
        return (self.wins - self.losses) / self.total


def run_rollouts(state: GameState, action: Action, seeds: Sequence[int]) -> RolloutTally:
    """
    Play `action` on a private copy of `state`, then finish the game with
    random moves for both sides, once per seed.

    Module level so process pools can pickle it.
    """
    mover = state.next_player
    tally = RolloutTally()

    for seed in seeds:
        s = state.copy()
        apply_action(s, action)
        rng = random.Random(seed)
        outcome = play_game(s, RandomAgent(rng=rng), RandomAgent(rng=rng))
        tally = tally + RolloutTally.from_outcome(outcome, mover)

    return tally


def _chunked(items: Sequence[int], size: int) -> Iterator[Sequence[int]]:
    for i in range(0, len(items), size):
        yield items[i : i + size]


Job = Tuple[int, GameState, Action, Sequence[int]]


@dataclass(slots=True)
class RolloutAgent:
    """
    Flat Monte Carlo move picker.

    Every legal column gets `rollouts` random-vs-random playouts from the
    position after it is played. The score is (wins - losses) / playouts for
    the side to move, and the highest score wins, lowest column first on ties.
    No tree is built.

    Playouts are split into batches of `batch_size` and fanned out over a
    process pool. Each playout has its own seed, so batches share nothing.

      - max_workers=1: run every batch in this process
      - executor: reuse a caller-owned pool instead of opening one per move
    """
    name: str = "Rollout"

    rollouts: int = ROLLOUTS_PER_MOVE
    batch_size: int = ROLLOUT_BATCH_SIZE
    max_workers: Optional[int] = None
    seed: Optional[int] = None
    executor: Optional[Executor] = None

    rng: random.Random = field(init=False)
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)
        self.last_info = {}

        if self.rollouts < 1:
            self.rollouts = 1
        if self.batch_size < 1:
            self.batch_size = 1

    # --------- Fan-out ---------
    def _jobs(self, state: GameState, candidates: List[Action]) -> List[Job]:
        jobs: List[Job] = []
        for action in candidates:
            seeds = [self.rng.getrandbits(64) for _ in range(self.rollouts)]
            for batch in _chunked(seeds, self.batch_size):
                jobs.append((action.column, state, action, batch))
        return jobs

    @staticmethod
    def _submit_all(ex: Executor, jobs: List[Job]) -> Iterable[Tuple[int, RolloutTally]]:
        futures = {ex.submit(run_rollouts, s, a, seeds): col for (col, s, a, seeds) in jobs}
        return [(futures[fut], fut.result()) for fut in as_completed(futures)]

    def _run(self, jobs: List[Job]) -> Iterable[Tuple[int, RolloutTally]]:
        if self.executor is not None:
            return self._submit_all(self.executor, jobs)

        if self.max_workers == 1:
            return [(col, run_rollouts(s, a, seeds)) for (col, s, a, seeds) in jobs]

        with ProcessPoolExecutor(max_workers=self.max_workers) as ex:
            return self._submit_all(ex, jobs)

    def evaluate_moves(self, state: GameState) -> Dict[int, RolloutTally]:
        """Playout tallies per legal column, keyed in ascending column order."""
        candidates = legal_actions(state)
        tallies: Dict[int, RolloutTally] = {a.column: RolloutTally() for a in candidates}

        for col, tally in self._run(self._jobs(state, candidates)):
            tallies[col] = tallies[col] + tally

        return tallies

    # --------- Public API ---------
    def choose_move(self, state: GameState) -> Action:
        t0 = time.perf_counter()

        tallies = self.evaluate_moves(state)
        if not tallies:
            raise ValueError("No valid moves.")

        best_col: Optional[int] = None
        best_score = float("-inf")
        scores: Dict[int, float] = {}
        for col, tally in tallies.items():
            s = tally.score()
            scores[col] = s
            if s > best_score:
                best_score = s
                best_col = col

        self.last_info = {
            "move_col": best_col,
            "eval": best_score,
            "scores": scores,
            "simulations": sum(t.total for t in tallies.values()),
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
        }
        return Action(best_col)
