from __future__ import annotations
from typing import Iterable, Iterator

from boxgame.boxes.box import BOX_FACTORIES, Box
from boxgame.constants import BOX_LAYOUT, N_BOXES


class BoxSet:
    """The four boxes of one game, in fixed creation order."""

    def __init__(self, boxes: Iterable[Box]):
        self._boxes = tuple(boxes)
        if len(self._boxes) != N_BOXES:
            raise ValueError(f"BoxSet needs exactly {N_BOXES} boxes, got {len(self._boxes)}")

    @classmethod
    def standard(cls) -> BoxSet:
        return cls(BOX_FACTORIES[kind](w) for kind, w in BOX_LAYOUT)

    def __len__(self) -> int:
        return len(self._boxes)

    def __iter__(self) -> Iterator[Box]:
        return iter(self._boxes)

    def __getitem__(self, idx: int) -> Box:
        return self._boxes[idx]

    def weights(self) -> tuple[float, ...]:
        return tuple(b.weight for b in self._boxes)

    def lightest_index(self) -> int:
        best = 0
        for i in range(1, len(self._boxes)):
            # strict: on equal weight the earlier box keeps the pick
            if self._boxes[i] < self._boxes[best]:
                best = i
        return best

    def select_lightest(self) -> Box:
        return self._boxes[self.lightest_index()]
