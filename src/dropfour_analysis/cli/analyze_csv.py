from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import agent_table, numeric_summary, outcome_counts
from ..plots.chart import plot_game_lengths, plot_win_rates


def build_argparser(prog: str = "dropfour_analysis") -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog=prog, description="Summarize dropfour match CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a results CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing match_*.csv")
    ap.add_argument("--pattern", type=str, default="match_*.csv", help="Glob pattern for selecting latest file")
    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    return ap


def _load(args: argparse.Namespace):
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)
    return csv_path, load_results(LoadSpec(csv_path=csv_path))


def summary_main(argv: list[str] | None = None) -> int:
    args = build_argparser("dropfour_analysis summary").parse_args(argv)
    csv_path, df = _load(args)

    print(f"\nLoaded: {csv_path}")
    print(f"Games: {len(df):,}")

    print("\n=== Agents ===")
    print(agent_table(df).to_string(index=False))

    print("\n=== Outcomes ===")
    print(outcome_counts(df).to_string(index=False))

    desc = numeric_summary(df)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    return 0


def figures_main(argv: list[str] | None = None) -> int:
    args = build_argparser("dropfour_analysis figures").parse_args(argv)
    csv_path, df = _load(args)
    outdir = Path(args.outdir)

    print(f"Loaded: {csv_path}")
    written = [
        plot_win_rates(agent_table(df), outdir, show=args.show),
        plot_game_lengths(df, outdir, show=args.show),
    ]
    for path in written:
        if path is not None:
            print(f"Saved: {path}")

    return 0
