#!/usr/bin/env python3
"""
ex01_sphere_points

Draws low-discrepancy points on S^2, S^3 and S^4 and reports how evenly the
last coordinate covers [-1, 1]. Points are saved to sphere_points.npz in this
folder.
"""
import sys
from pathlib import Path

import numpy as np


def ensure_repo_on_path():
    here = Path(__file__).resolve().parent
    src = here.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def main():
    ensure_repo_on_path()
    from lowdisc import SamplerParams, sample_points

    runs = [
        SamplerParams(kind="sphere", bases=[2, 3], num=4096, verbose=True),
        SamplerParams(kind="sphere3hopf", bases=[2, 3, 5], num=4096, verbose=True),
        SamplerParams(kind="sphere_n", bases=[2, 3, 5, 7], num=4096, verbose=True),
    ]

    out = {}
    for params in runs:
        pts = sample_points(**params.as_dict())
        hist, _ = np.histogram(pts[:, -1], bins=8, range=(-1.0, 1.0))
        print(f"  max |norm - 1| = {np.max(np.abs(np.linalg.norm(pts, axis=1) - 1.0)):.2e}")
        print(f"  last-coordinate histogram: {hist.tolist()}")
        out[params.kind] = pts

    here = Path(__file__).resolve().parent
    save_path = here / "sphere_points.npz"
    np.savez(save_path, **out)
    print(f"Saved points to: {save_path}")


if __name__ == "__main__":
    main()
