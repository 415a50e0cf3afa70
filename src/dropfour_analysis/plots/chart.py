from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def plot_win_rates(table: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked W/D/L share per agent seat, from agent_table()."""
    if table.empty:
        return None

    if not show:
        _ensure_dir(outdir)

    labels = [f"{a} ({'X' if s == 0 else 'O'})" for a, s in zip(table["agent"], table["side"])]
    games = table["games"].astype(float)
    win = table["wins"] / games
    draw = table["draws"] / games
    loss = table["losses"] / games

    fig = plt.figure(figsize=(8, 4))
    plt.bar(labels, win, label="win")
    plt.bar(labels, draw, bottom=win, label="draw")
    plt.bar(labels, loss, bottom=win + draw, label="loss")
    plt.title("Outcome share by agent")
    plt.ylabel("share of games")
    plt.ylim(0, 1)
    plt.xticks(rotation=20, ha="right")
    plt.legend()

    if show:
        plt.show()
        return None

    path = outdir / "win_rates.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_game_lengths(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if "moves" not in df.columns or not pd.api.types.is_numeric_dtype(df["moves"]):
        return None
    moves = df["moves"].dropna()
    if moves.empty:
        return None

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure()
    plt.hist(moves, bins=range(int(moves.min()), int(moves.max()) + 2))
    plt.title("Game length")
    plt.xlabel("moves")
    plt.ylabel("count")

    if show:
        plt.show()
        return None

    path = outdir / "game_lengths.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path
