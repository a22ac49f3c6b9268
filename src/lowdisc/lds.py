from __future__ import annotations

"""Closed-form low-discrepancy generators.

Every generator owns its own :class:`VdCorput` counters, so two generators
built from the same bases are independent streams. ``pop()`` returns the next
point, ``reseed(seed)`` moves every owned counter to ``seed``.
"""

import math
from typing import Sequence, Tuple

import numpy as np

from .utils.radix import vdc, vdc_batch, halton_batch
from .utils.tables import TWO_PI


def _check_base(base) -> int:
    if isinstance(base, bool) or not isinstance(base, (int, np.integer)):
        raise TypeError(f"base must be an integer (got {base!r})")
    base = int(base)
    if base < 2:
        raise ValueError(f"base must be an integer >= 2 (got {base})")
    return base


def _check_bases(
    bases: Sequence[int], needed: int, who: str, keep_all: bool = False
) -> Tuple[int, ...]:
    """Validate the leading ``needed`` bases; surplus entries are dropped unless ``keep_all``."""
    if isinstance(bases, (int, np.integer)):
        raise TypeError(f"{who} expects a sequence of bases (got {bases!r})")
    bases = tuple(bases)
    if len(bases) < needed:
        raise ValueError(f"{who} needs at least {needed} bases (got {len(bases)})")
    if not keep_all:
        bases = bases[:needed]
    return tuple(_check_base(b) for b in bases)


def _check_seed(seed) -> int:
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise TypeError(f"seed must be an integer (got {seed!r})")
    seed = int(seed)
    if seed < 0:
        raise ValueError(f"seed must be non-negative (got {seed})")
    return seed


def _check_num(num) -> int:
    num = int(num)
    if num < 0:
        raise ValueError(f"num must be non-negative (got {num})")
    return num


class SequenceGen:
    """Common surface of all point generators."""

    dim: int = 1

    def pop(self):
        raise NotImplementedError

    def advance(self):
        """Alias of :meth:`pop`."""
        return self.pop()

    def reseed(self, seed: int) -> None:
        raise NotImplementedError

    def pop_vec(self, num: int) -> np.ndarray:
        """Return the next ``num`` points stacked into a ``(num, dim)`` array."""
        num = _check_num(num)
        out = np.empty((num, self.dim), np.float64)
        for i in range(num):
            out[i] = self.pop()
        return out


class VdCorput(SequenceGen):
    """Van der Corput sequence generator.

    The k-th call returns the base-``base`` digit reversal of k in [0, 1).
    """

    def __init__(self, base: int = 2) -> None:
        self.base = _check_base(base)
        self.count = 0

    def pop(self) -> float:
        self.count += 1
        return vdc(self.count, self.base)

    def reseed(self, seed: int) -> None:
        self.count = _check_seed(seed)

    def pop_vec(self, num: int) -> np.ndarray:
        """Return the next ``num`` values as a flat array."""
        num = _check_num(num)
        out = vdc_batch(self.count, num, self.base)
        self.count += num
        return out


class Halton(SequenceGen):
    """2-D Halton sequence: one van der Corput stream per base."""

    dim = 2

    def __init__(self, bases: Sequence[int]) -> None:
        b0, b1 = _check_bases(bases, 2, "Halton")
        self.vdc0 = VdCorput(b0)
        self.vdc1 = VdCorput(b1)

    def pop(self) -> Tuple[float, float]:
        return (self.vdc0.pop(), self.vdc1.pop())

    def reseed(self, seed: int) -> None:
        self.vdc0.reseed(seed)
        self.vdc1.reseed(seed)


class HaltonN(SequenceGen):
    """n-D Halton sequence, ``n = len(bases)``."""

    def __init__(self, bases: Sequence[int]) -> None:
        bases = _check_bases(bases, 1, "HaltonN", keep_all=True)
        self.vdcs = [VdCorput(b) for b in bases]
        self.dim = len(self.vdcs)

    def pop(self) -> Tuple[float, ...]:
        return tuple(gen.pop() for gen in self.vdcs)

    def reseed(self, seed: int) -> None:
        for gen in self.vdcs:
            gen.reseed(seed)

    def pop_vec(self, num: int) -> np.ndarray:
        num = _check_num(num)
        counts = {gen.count for gen in self.vdcs}
        if len(counts) != 1:
            return super().pop_vec(num)
        bases = np.array([gen.base for gen in self.vdcs], np.int64)
        out = halton_batch(counts.pop(), num, bases)
        for gen in self.vdcs:
            gen.count += num
        return out


class Circle(SequenceGen):
    """Points on the unit circle, returned as ``(sin(theta), cos(theta))``."""

    dim = 2

    def __init__(self, base: int = 2) -> None:
        self.vdc = VdCorput(base)

    def pop(self) -> Tuple[float, float]:
        theta = self.vdc.pop() * TWO_PI  # map to [0, 2*pi]
        return (math.sin(theta), math.cos(theta))

    def reseed(self, seed: int) -> None:
        self.vdc.reseed(seed)


class Sphere(SequenceGen):
    """Points on the unit 2-sphere.

    ``cos(phi)`` is drawn uniformly on [-1, 1] and scales a :class:`Circle`
    point; it is appended as the third coordinate.
    """

    dim = 3

    def __init__(self, bases: Sequence[int]) -> None:
        b0, b1 = _check_bases(bases, 2, "Sphere")
        self.vdc = VdCorput(b0)
        self.cirgen = Circle(b1)

    def pop(self) -> Tuple[float, float, float]:
        cosphi = 2.0 * self.vdc.pop() - 1.0  # map to [-1, 1]
        sinphi = math.sqrt(1.0 - cosphi * cosphi)
        c0, c1 = self.cirgen.pop()
        return (sinphi * c0, sinphi * c1, cosphi)

    def reseed(self, seed: int) -> None:
        self.cirgen.reseed(seed)
        self.vdc.reseed(seed)


class Sphere3Hopf(SequenceGen):
    """Points on the unit 3-sphere via the Hopf fibration.

    Two angles ``phi`` and ``psy`` are uniform on [0, 2*pi]; ``cos(eta)`` is
    the square root of a uniform value.
    """

    dim = 4

    def __init__(self, bases: Sequence[int]) -> None:
        b0, b1, b2 = _check_bases(bases, 3, "Sphere3Hopf")
        self.vdc0 = VdCorput(b0)
        self.vdc1 = VdCorput(b1)
        self.vdc2 = VdCorput(b2)

    def pop(self) -> Tuple[float, float, float, float]:
        phi = self.vdc0.pop() * TWO_PI  # map to [0, 2*pi]
        psy = self.vdc1.pop() * TWO_PI
        vd = self.vdc2.pop()
        cos_eta = math.sqrt(vd)
        sin_eta = math.sqrt(1.0 - vd)
        return (
            cos_eta * math.cos(psy),
            cos_eta * math.sin(psy),
            sin_eta * math.cos(phi + psy),
            sin_eta * math.sin(phi + psy),
        )

    def reseed(self, seed: int) -> None:
        self.vdc0.reseed(seed)
        self.vdc1.reseed(seed)
        self.vdc2.reseed(seed)


__all__ = [
    "SequenceGen",
    "VdCorput",
    "Halton",
    "HaltonN",
    "Circle",
    "Sphere",
    "Sphere3Hopf",
]
