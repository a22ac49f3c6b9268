from __future__ import annotations

"""Utility subpackage exports.

This module re-exports the numeric kernels so callers can do:
    from lowdisc.utils import vdc, vdc_batch, get_grid_tables
"""

from .radix import vdc, vdc_batch, halton_batch  # noqa: F401
from .tables import (  # noqa: F401
    GRID_POINTS,
    HALF_PI,
    TWO_PI,
    GridTables,
    get_grid_tables,
)

__all__ = [
    "vdc",
    "vdc_batch",
    "halton_batch",
    "GRID_POINTS",
    "HALF_PI",
    "TWO_PI",
    "GridTables",
    "get_grid_tables",
]
