from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from typing import ClassVar, Optional

from boxgame.constants import GREEN_WINDOW
from boxgame.scoring.formulas import cantor_pairing, mean


class Box(ABC):
    """
    Stateful accumulator. Absorbing a token adds it to the box weight and
    returns a score; how the score is computed depends on the variant.
    Weight is only ever changed through `absorb`.
    """
    kind: ClassVar[str]

    def __init__(self, initial_weight: float):
        self._weight = float(initial_weight)

    @classmethod
    def make_green_box(cls, initial_weight: float) -> Box:
        return GreenBox(initial_weight)

    @classmethod
    def make_blue_box(cls, initial_weight: float) -> Box:
        return BlueBox(initial_weight)

    @property
    def weight(self) -> float:
        return self._weight

    def __lt__(self, other: Box) -> bool:
        return self._weight < other._weight

    def absorb(self, token: float) -> float:
        self._weight += token
        self._record(token)
        return self.score()

    @abstractmethod
    def _record(self, token: float) -> None:
        ...

    @abstractmethod
    def score(self) -> float:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(weight={self._weight!r})"


class GreenBox(Box):
    """Scores the squared mean of the last GREEN_WINDOW absorbed tokens."""
    kind = "green"

    def __init__(self, initial_weight: float):
        super().__init__(initial_weight)
        self._recent: deque[float] = deque(maxlen=GREEN_WINDOW)  # oldest first

    @property
    def recent_tokens(self) -> tuple[float, ...]:
        return tuple(self._recent)

    def _record(self, token: float) -> None:
        self._recent.append(token)

    def score(self) -> float:
        m = mean(self._recent)
        return m * m


class BlueBox(Box):
    """Scores cantor_pairing(smallest, largest) over absorbed tokens."""
    kind = "blue"

    def __init__(self, initial_weight: float):
        super().__init__(initial_weight)
        self._min: Optional[float] = None
        self._max: Optional[float] = None

    @property
    def has_absorbed(self) -> bool:
        return self._min is not None

    @property
    def min_token(self) -> Optional[float]:
        return self._min

    @property
    def max_token(self) -> Optional[float]:
        return self._max

    def _record(self, token: float) -> None:
        # initial weight never takes part in min/max
        if self._min is None:
            self._min = self._max = token
        else:
            self._min = min(self._min, token)
            self._max = max(self._max, token)

    def score(self) -> float:
        if self._min is None:
            return 0.0
        return cantor_pairing(self._min, self._max)


def make_green_box(initial_weight: float) -> Box:
    return GreenBox(initial_weight)

def make_blue_box(initial_weight: float) -> Box:
    return BlueBox(initial_weight)

BOX_FACTORIES = {"green": make_green_box, "blue": make_blue_box}
