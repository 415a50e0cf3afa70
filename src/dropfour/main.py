from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from dropfour.config import DEFAULT_NUM_GAMES, ROLLOUTS_PER_MOVE
from dropfour.scripts.match import AGENT_KINDS, print_summary, run_match


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="dropfour",
        description="Play Connect-4 matches between a random agent and a flat Monte Carlo rollout agent.",
    )
    ap.add_argument("--games", type=int, default=DEFAULT_NUM_GAMES, help="Number of games to play")
    ap.add_argument("--x-agent", choices=AGENT_KINDS, default="random", help="Agent for player 0 (moves first)")
    ap.add_argument("--o-agent", choices=AGENT_KINDS, default="rollout", help="Agent for player 1")
    ap.add_argument("--rollouts", type=int, default=ROLLOUTS_PER_MOVE, help="Playouts per candidate column")
    ap.add_argument("--workers", type=int, default=None, help="Worker processes for rollouts (1 = in-process)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for reproducible agent randomness")
    ap.add_argument("--show-board", action="store_true", help="Print the final board of every game")
    ap.add_argument("--csv", type=str, default=None, help="Write per-game results to this CSV")
    ap.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for progress output",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.games < 0:
        print("--games must be >= 0")
        return 2

    start = time.perf_counter()

    _records, summary = run_match(
        args.x_agent,
        args.o_agent,
        num_games=args.games,
        rollouts=args.rollouts,
        max_workers=args.workers,
        seed=args.seed,
        show_board=args.show_board,
        csv_path=Path(args.csv) if args.csv else None,
    )
    print_summary(summary)

    elapsed = time.perf_counter() - start
    m = int(elapsed // 60)
    s = elapsed % 60
    print(f"Total runtime: {m}:{s:06.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
