from __future__ import annotations

import csv
import logging
import random
import time
from concurrent.futures import Executor, ProcessPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from dropfour.ai.base import Agent
from dropfour.ai.random_agent import RandomAgent
from dropfour.ai.rollout_agent import RolloutAgent
from dropfour.config import DEFAULT_NUM_GAMES, ROLLOUTS_PER_MOVE
from dropfour.game.actions import Action
from dropfour.game.controller import play_game
from dropfour.game.results import Outcome, TerminalStatus, Winner
from dropfour.game.state import GameState, new_game
from dropfour.ui.render import render

log = logging.getLogger(__name__)

AGENT_KINDS = ("random", "rollout")

CSV_COLUMNS = ["game", "agent_0", "agent_1", "outcome", "winner", "moves", "time_ms"]


@dataclass
class GameRecord:
    game: int
    agent_0: str
    agent_1: str
    outcome: str
    winner: Optional[int]
    moves: int
    time_ms: int


@dataclass
class MatchSummary:
    agent_0: str
    agent_1: str
    games: int = 0
    wins: List[int] = field(default_factory=lambda: [0, 0])
    ties: int = 0
    moves: int = 0
    time_ms: int = 0

    def add(self, rec: GameRecord) -> None:
        self.games += 1
        self.moves += rec.moves
        self.time_ms += rec.time_ms
        if rec.winner is None:
            self.ties += 1
        else:
            self.wins[rec.winner] += 1

    def win_rate(self, player: int) -> float:
        return (self.wins[player] / self.games) if self.games else 0.0


def make_agent(
    kind: str,
    seed: Optional[int] = None,
    rollouts: int = ROLLOUTS_PER_MOVE,
    max_workers: Optional[int] = None,
    executor: Optional[Executor] = None,
) -> Agent:
    if kind == "random":
        return RandomAgent(seed=seed)
    if kind == "rollout":
        return RolloutAgent(
            name=f"Rollout (k{rollouts})",
            rollouts=rollouts,
            max_workers=max_workers,
            seed=seed,
            executor=executor,
        )
    raise ValueError(f"Unknown agent kind {kind!r}. Expected one of {AGENT_KINDS}.")


def play_headless(agent_0: Agent, agent_1: Agent) -> Tuple[Outcome, int, GameState]:
    """One game from an empty board. Returns (outcome, moves played, final state)."""
    state = new_game()
    moves = 0

    def count(_state: GameState, action: Action, status: TerminalStatus) -> None:
        nonlocal moves
        moves += 1
        log.debug("player %d -> column %d (%s)", 1 - _state.next_player, action.column, type(status).__name__)

    outcome = play_game(state, agent_0, agent_1, on_move=count)
    return outcome, moves, state


def write_csv(records: List[GameRecord], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for rec in records:
            w.writerow([
                rec.game,
                rec.agent_0,
                rec.agent_1,
                rec.outcome,
                "" if rec.winner is None else rec.winner,
                rec.moves,
                rec.time_ms,
            ])
    return out_path


def run_match(
    kind_0: str = "random",
    kind_1: str = "rollout",
    num_games: int = DEFAULT_NUM_GAMES,
    rollouts: int = ROLLOUTS_PER_MOVE,
    max_workers: Optional[int] = None,
    seed: Optional[int] = None,
    show_board: bool = False,
    csv_path: Optional[Path] = None,
) -> Tuple[List[GameRecord], MatchSummary]:
    """
    Play `num_games` games, kind_0 always moving first.

    Rollout agents share one process pool for the whole match.
    """
    for kind in (kind_0, kind_1):
        if kind not in AGENT_KINDS:
            raise ValueError(f"Unknown agent kind {kind!r}. Expected one of {AGENT_KINDS}.")

    needs_pool = "rollout" in (kind_0, kind_1) and max_workers != 1
    pool = ProcessPoolExecutor(max_workers=max_workers) if needs_pool else None

    rng = random.Random(seed)
    records: List[GameRecord] = []
    summary: Optional[MatchSummary] = None

    try:
        for i in range(num_games):
            agent_0 = make_agent(kind_0, rng.getrandbits(32), rollouts, max_workers, pool)
            agent_1 = make_agent(kind_1, rng.getrandbits(32), rollouts, max_workers, pool)
            if summary is None:
                summary = MatchSummary(agent_0=agent_0.name, agent_1=agent_1.name)
                log.info("Match: %s (X) vs %s (O), %d games", agent_0.name, agent_1.name, num_games)

            t0 = time.perf_counter()
            outcome, moves, state = play_headless(agent_0, agent_1)
            ms = max(1, int((time.perf_counter() - t0) * 1000))

            rec = GameRecord(
                game=i,
                agent_0=agent_0.name,
                agent_1=agent_1.name,
                outcome=str(outcome),
                winner=outcome.player if isinstance(outcome, Winner) else None,
                moves=moves,
                time_ms=ms,
            )
            records.append(rec)
            summary.add(rec)

            print(f"Game {i}: {outcome}")
            if show_board:
                print(render(state.board))
            log.debug("game %d took %d ms over %d moves", i, ms, moves)
    finally:
        if pool is not None:
            pool.shutdown()

    if summary is None:
        summary = MatchSummary(agent_0=kind_0, agent_1=kind_1)

    if csv_path is not None:
        write_csv(records, csv_path)
        log.info("Wrote CSV: %s", csv_path)

    return records, summary


def print_summary(summary: MatchSummary) -> None:
    print("\n=== MATCH RESULTS ===")
    print(f"{summary.agent_0} (X) wins: {summary.wins[0]}  ({summary.win_rate(0):.1%})")
    print(f"{summary.agent_1} (O) wins: {summary.wins[1]}  ({summary.win_rate(1):.1%})")
    print(f"Ties:     {summary.ties}")
    if summary.games:
        print(f"Avg moves/game: {summary.moves / summary.games:.1f}")
        print(f"Avg ms/game:    {summary.time_ms / summary.games:.1f}")
