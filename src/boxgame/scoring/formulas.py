from __future__ import annotations
from typing import Sequence
import numpy as np

def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=np.float64)))

def cantor_pairing(x: float, y: float) -> float:
    """Cantor's pairing function, pairing(0, 1) == 2."""
    return (x + y) * (x + y + 1) / 2 + y
