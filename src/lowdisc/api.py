from __future__ import annotations
import time
from typing import Callable, Dict, Sequence

import numpy as np

from .lds import Circle, Halton, HaltonN, SequenceGen, Sphere, Sphere3Hopf, VdCorput
from .lds_n import CylinN, Sphere3, SphereN


def _log(msg: str) -> None:
    print(msg)


def _single_base(ctor):
    def build(bases: Sequence[int]):
        if isinstance(bases, (int, np.integer)):
            return ctor(bases)
        bases = list(bases)
        if not bases:
            raise ValueError("at least one base is required")
        return ctor(bases[0])
    return build


GENERATORS: Dict[str, Callable[[Sequence[int]], SequenceGen]] = {
    "vdcorput": _single_base(VdCorput),
    "halton": Halton,
    "circle": _single_base(Circle),
    "sphere": Sphere,
    "sphere3hopf": Sphere3Hopf,
    "halton_n": HaltonN,
    "sphere3": Sphere3,
    "sphere_n": SphereN,
    "cylin_n": CylinN,
}


def make_generator(kind: str, bases: Sequence[int]) -> SequenceGen:
    """Build a fresh generator of the given kind."""
    key = (kind or "").lower()
    if key not in GENERATORS:
        raise ValueError(
            f"kind must be one of {', '.join(sorted(GENERATORS))} (got {kind!r})"
        )
    return GENERATORS[key](bases)


def sample_points(
    kind: str,
    bases: Sequence[int],
    num: int,
    seed: int = 0,
    verbose: bool = False,
) -> np.ndarray:
    """Draw ``num`` consecutive points after reseeding to ``seed``.

    Returns
    -------
    numpy.ndarray
        Shape ``(num,)`` for ``"vdcorput"``, ``(num, dim)`` otherwise.
    """
    gen = make_generator(kind, bases)
    gen.reseed(seed)
    t0 = time.time()
    pts = gen.pop_vec(num)
    if verbose:
        _log(f"{kind}: {num:,d} points (dim {gen.dim}) in {time.time() - t0:.3f}s")
    return pts


__all__ = ["GENERATORS", "make_generator", "sample_points"]
