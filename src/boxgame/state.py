from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Optional

@dataclass(frozen=True, slots=True)
class TurnRecord:
    turn: int               # 0-based, one per token
    player: str             # "A" | "B"
    token: float
    box_index: int          # 0..3 in creation order
    box_kind: str           # "green" | "blue"
    box_weight: float       # after absorption
    result: float
    player_score: float     # mover's running total after the turn

    def to_row(self) -> dict:
        return asdict(self)

@dataclass(frozen=True, slots=True)
class GameResult:
    score_a: float
    score_b: float
    turns: tuple[TurnRecord, ...] = ()

    def as_pair(self) -> tuple[float, float]:
        return (self.score_a, self.score_b)

    @property
    def winner(self) -> Optional[str]:
        if self.score_a > self.score_b:
            return "A"
        if self.score_b > self.score_a:
            return "B"
        return None
