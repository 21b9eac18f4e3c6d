from __future__ import annotations
from dataclasses import dataclass

from boxgame.boxes.box_set import BoxSet

@dataclass(slots=True)
class Player:
    name: str
    score: float = 0.0

    def take_turn(self, token: float, box_set: BoxSet) -> tuple[int, float]:
        """Let the lightest box absorb `token`; returns (box index, result)."""
        idx = box_set.lightest_index()
        result = box_set[idx].absorb(token)
        self.score += result
        return idx, result
