from __future__ import annotations
from typing import Iterable, Union
import numpy as np
import pandas as pd

from boxgame.constants import N_BOXES, PLAYERS, TRANSCRIPT_COLUMNS
from boxgame.state import GameResult, TurnRecord

def transcript_frame(src: Union[GameResult, Iterable[TurnRecord]]) -> pd.DataFrame:
    """One row per turn, columns in TRANSCRIPT_COLUMNS order."""
    turns = src.turns if isinstance(src, GameResult) else src
    rows = [t.to_row() for t in turns]
    df = pd.DataFrame(rows, columns=list(TRANSCRIPT_COLUMNS))
    return df.astype({"turn": np.int64, "box_index": np.int64, "box_weight": np.float64,
                      "result": np.float64, "player_score": np.float64})

def check_columns(df: pd.DataFrame) -> None:
    missing = [c for c in TRANSCRIPT_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"transcript is missing columns: {missing}")

def player_totals(df: pd.DataFrame) -> pd.Series:
    """Sum of turn results per player; both players always present."""
    return (df.groupby("player")["result"].sum()
              .reindex(list(PLAYERS)).fillna(0.0).astype(np.float64))

def box_usage(df: pd.DataFrame) -> pd.DataFrame:
    """Turns, total and mean result per box index (all boxes listed)."""
    g = df.groupby("box_index")["result"]
    out = pd.DataFrame({"turns": g.size(), "total": g.sum(), "mean": g.mean()})
    out = out.reindex(range(N_BOXES))
    out["turns"] = out["turns"].fillna(0).astype(int)
    out["total"] = out["total"].fillna(0.0)
    out["mean"] = out["mean"].fillna(0.0)  # unused boxes
    out.index.name = "box_index"
    return out

def score_share(df: pd.DataFrame) -> dict[str, float]:
    """Fraction of the combined score won by each player."""
    totals = player_totals(df)
    grand = float(totals.sum())
    if grand == 0.0:
        return {p: 0.0 for p in PLAYERS}
    return {p: float(totals[p] / grand) for p in PLAYERS}

def cumulative_scores(df: pd.DataFrame) -> pd.DataFrame:
    """Running score of each player after every turn (index = turn)."""
    out = pd.DataFrame(index=df["turn"].to_numpy())
    for p in PLAYERS:
        out[p] = np.cumsum(np.where(df["player"].to_numpy() == p, df["result"].to_numpy(), 0.0))
    out.index.name = "turn"
    return out
