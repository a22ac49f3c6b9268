from __future__ import annotations

"""Recursive generators for spheres and cylinders of arbitrary dimension.

A generator with ``m`` bases owns exactly one generator built from the
remaining ``m - 1`` bases, scales the child's point by ``sin(xi)`` and
appends ``cos(xi)``. For spheres ``xi`` is drawn by inverting a tabulated
CDF of ``sin(x)**m`` on the shared grid; for cylinders ``cos(xi)`` is uniform
on [-1, 1] at every level.
"""

import math
from typing import Optional, Sequence, Tuple, Union

from .lds import Circle, SequenceGen, Sphere, VdCorput, _check_bases
from .utils.tables import GridTables, get_grid_tables


class Sphere3(SequenceGen):
    """Points on the unit 3-sphere drawn through a tabulated inverse CDF.

    ``bases[0]`` drives the polar angle, ``bases[1:3]`` the inner
    :class:`~lowdisc.lds.Sphere`. Surplus bases are ignored.
    """

    dim = 4

    def __init__(self, bases: Sequence[int], tables: Optional[GridTables] = None) -> None:
        b0, b1, b2 = _check_bases(bases, 3, "Sphere3")
        self.tables = get_grid_tables() if tables is None else tables
        self.vdc = VdCorput(b0)
        self.sphere2 = Sphere((b1, b2))
        self.tp_minus1 = self.tables.next_tp(self.tables.x, 2)
        self.tp = self.tables.next_tp(self.tables.neg_cosine, 3)

    def pop(self) -> Tuple[float, float, float, float]:
        xi = self.tables.invert(self.tp, self.vdc.pop())
        sinxi = math.sin(xi)
        s0, s1, s2 = self.sphere2.pop()
        return (sinxi * s0, sinxi * s1, sinxi * s2, math.cos(xi))

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)
        self.sphere2.reseed(seed)


class SphereN(SequenceGen):
    """Points on the unit m-sphere, ``m = len(bases) >= 4``.

    The owned child is a :class:`Sphere3` when ``m == 4`` and a
    ``SphereN`` with one base fewer otherwise. The table ``tp`` is built at
    construction from the child's ``tp_minus1`` and never changes.

    Returns
    -------
    tuple of float
        ``m + 1`` coordinates with unit Euclidean norm.
    """

    def __init__(self, bases: Sequence[int], tables: Optional[GridTables] = None) -> None:
        bases = _check_bases(bases, 4, "SphereN", keep_all=True)
        self.tables = get_grid_tables() if tables is None else tables
        m = len(bases)
        self.vdc = VdCorput(bases[0])
        self.s_gen: Union[Sphere3, SphereN]
        if m == 4:
            self.s_gen = Sphere3(bases[1:], self.tables)
        else:
            self.s_gen = SphereN(bases[1:], self.tables)
        self.dim = m + 1
        self.tp_minus1 = self.s_gen.tp
        self.tp = self.tables.next_tp(self.s_gen.tp_minus1, m)

    def pop(self) -> Tuple[float, ...]:
        xi = self.tables.invert(self.tp, self.vdc.pop())
        sinphi = math.sin(xi)
        return tuple(sinphi * c for c in self.s_gen.pop()) + (math.cos(xi),)

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)
        self.s_gen.reseed(seed)


class CylinN(SequenceGen):
    """Points on the unit m-sphere via the cylindrical construction.

    ``cos(phi)`` is uniform on [-1, 1] at every level; the innermost level
    is a :class:`~lowdisc.lds.Circle`. Needs ``len(bases) >= 2`` and returns
    ``len(bases) + 1`` coordinates.
    """

    def __init__(self, bases: Sequence[int]) -> None:
        bases = _check_bases(bases, 2, "CylinN", keep_all=True)
        self.vdc = VdCorput(bases[0])
        self.c_gen: Union[Circle, CylinN]
        if len(bases) == 2:
            self.c_gen = Circle(bases[1])
        else:
            self.c_gen = CylinN(bases[1:])
        self.dim = len(bases) + 1

    def pop(self) -> Tuple[float, ...]:
        cosphi = 2.0 * self.vdc.pop() - 1.0  # map to [-1, 1]
        sinphi = math.sqrt(1.0 - cosphi * cosphi)
        return tuple(sinphi * c for c in self.c_gen.pop()) + (cosphi,)

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)
        self.c_gen.reseed(seed)


__all__ = ["Sphere3", "SphereN", "CylinN"]
