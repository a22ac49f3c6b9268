from __future__ import annotations

"""Shared grid for the tabulated inverse CDFs used by the recursive generators.

The grid ``X`` spans [0, pi]. ``SINE`` and ``NEG_COSINE`` are its pointwise
images. The unnormalized CDF of the polar-angle density ``sin(x)**k`` is

    T_0 = X
    T_1 = NEG_COSINE
    T_k = ((k - 1) * T_(k-2) + NEG_COSINE * SINE**(k-1)) / k

and is inverted by linear interpolation over the grid.
"""

import math
import threading
from dataclasses import dataclass

import numpy as np

GRID_POINTS = 300
TWO_PI = 2.0 * math.pi
HALF_PI = 0.5 * math.pi


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr = np.ascontiguousarray(arr, dtype=np.float64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class GridTables:
    """Read-only grid over [0, pi] with its sine and negative cosine."""
    x: np.ndarray
    sine: np.ndarray
    neg_cosine: np.ndarray

    @classmethod
    def build(cls, points: int = GRID_POINTS) -> "GridTables":
        if points < 2:
            raise ValueError(f"grid needs at least 2 points (got {points})")
        x = np.linspace(0.0, math.pi, points)
        return cls(x=_frozen(x), sine=_frozen(np.sin(x)), neg_cosine=_frozen(-np.cos(x)))

    def next_tp(self, tp_minus2: np.ndarray, k: int) -> np.ndarray:
        """Return ``T_k`` given ``T_(k-2)``."""
        if k < 2:
            raise ValueError(f"recurrence starts at k=2 (got {k})")
        return _frozen(((k - 1) * tp_minus2 + self.neg_cosine * self.sine ** (k - 1)) / k)

    def invert(self, tp: np.ndarray, vd: float) -> float:
        """Map ``vd`` in [0, 1) onto the range of ``tp`` and invert it on the grid."""
        ti = tp[0] + (tp[-1] - tp[0]) * vd
        return float(np.interp(ti, tp, self.x))


_TABLES: GridTables | None = None
_TABLES_LOCK = threading.Lock()


def get_grid_tables() -> GridTables:
    """Return the process-wide grid, building it on first use."""
    global _TABLES
    if _TABLES is None:
        with _TABLES_LOCK:
            if _TABLES is None:
                _TABLES = GridTables.build()
    return _TABLES


__all__ = ["GRID_POINTS", "TWO_PI", "HALF_PI", "GridTables", "get_grid_tables"]
