from __future__ import annotations
import numpy as np
import numba as nb


@nb.njit(inline="always", cache=True)
def vdc(k: int, base: int = 2) -> float:
    """Return the k-th value of the van der Corput sequence in the given base."""
    f = 1.0
    r = 0.0
    while k:
        f /= base
        r += f * (k % base)
        k //= base
    return r


@nb.njit(cache=True)
def vdc_batch(start: int, num: int, base: int):
    """Pre-compute the van der Corput values for indices start+1 .. start+num."""
    out = np.empty(num, np.float64)
    for i in range(num):
        out[i] = vdc(start + i + 1, base)
    return out


@nb.njit(cache=True)
def halton_batch(start: int, num: int, bases):
    """Pre-compute ``num`` points of a len(bases)-D Halton sequence."""
    dim = bases.shape[0]
    out = np.empty((num, dim), np.float64)
    for i in range(num):
        for d in range(dim):
            out[i, d] = vdc(start + i + 1, bases[d])
    return out


__all__ = ["vdc", "vdc_batch", "halton_batch"]
