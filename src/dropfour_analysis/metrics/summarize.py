from __future__ import annotations

import pandas as pd


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def _long_by_side(df: pd.DataFrame) -> pd.DataFrame:
    """One row per (game, side) from the seat of that side's agent."""
    frames = []
    for side in (0, 1):
        frames.append(pd.DataFrame({
            "agent": df[f"agent_{side}"].astype(str),
            "side": side,
            "wins": (df["winner"] == side).astype(int),
            "losses": (df["winner"] == 1 - side).astype(int),
            "draws": df["winner"].isna().astype(int),
            "moves": df["moves"],
            "time_ms": df["time_ms"],
        }))
    return pd.concat(frames, ignore_index=True)


def agent_table(df: pd.DataFrame) -> pd.DataFrame:
    """
    W/D/L per agent and seat, plus win rate and the same net score the
    rollout agent uses: (wins - losses) / games.
    """
    _require_cols(df, ["agent_0", "agent_1", "winner", "moves", "time_ms"])

    if df.empty:
        return pd.DataFrame(columns=[
            "agent", "side", "games", "wins", "draws", "losses",
            "win_rate", "net_score", "avg_moves", "avg_ms_per_game",
        ])

    out = (
        _long_by_side(df)
        .groupby(["agent", "side"], as_index=False)
        .agg(
            games=("wins", "size"),
            wins=("wins", "sum"),
            draws=("draws", "sum"),
            losses=("losses", "sum"),
            avg_moves=("moves", "mean"),
            avg_ms_per_game=("time_ms", "mean"),
        )
    )
    out["win_rate"] = out["wins"] / out["games"]
    out["net_score"] = (out["wins"] - out["losses"]) / out["games"]

    cols = [
        "agent", "side", "games", "wins", "draws", "losses",
        "win_rate", "net_score", "avg_moves", "avg_ms_per_game",
    ]
    out = out[cols].sort_values(["net_score", "agent"], ascending=[False, True])
    return out.reset_index(drop=True)


def outcome_counts(df: pd.DataFrame) -> pd.DataFrame:
    _require_cols(df, ["outcome"])
    counts = df["outcome"].value_counts().rename_axis("outcome").reset_index(name="games")
    counts["share"] = counts["games"] / max(1, int(counts["games"].sum()))
    return counts


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df[[c for c in ("moves", "time_ms") if c in df.columns]].select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
