import math

import numpy as np
import pytest

from lowdisc import Circle, CylinN, Sphere, Sphere3, SphereN
from lowdisc.utils.tables import get_grid_tables

N_DRAWS = 1000


def test_sphere3():
    sp3gen = Sphere3([2, 3, 5, 7])
    x1, x2, x3, x4 = sp3gen.pop()
    assert x1 == pytest.approx(0.8966646826, rel=1e-5)


def test_sphere_n():
    spgen = SphereN([2, 3, 5, 7])
    res = spgen.pop()
    assert len(res) == 5
    assert res[0] == pytest.approx(0.6092711237, rel=1e-5)


def test_cylin_n():
    cygen = CylinN([2, 3, 5, 7])
    res = cygen.pop()
    assert len(res) == 5
    assert res[0] == pytest.approx(0.5896942325)


@pytest.mark.parametrize("m", [4, 5, 6, 8])
def test_sphere_n_dimension(m):
    bases = [2, 3, 5, 7, 11, 13, 17, 19][:m]
    assert len(SphereN(bases).pop()) == m + 1
    assert SphereN(bases).dim == m + 1


@pytest.mark.parametrize("m", [2, 3, 4, 6])
def test_cylin_n_dimension(m):
    bases = [2, 3, 5, 7, 11, 13][:m]
    assert len(CylinN(bases).pop()) == m + 1


def test_sphere_n_ownership_chain():
    sgen = SphereN([2, 3, 5, 7, 11, 13])
    levels = []
    gen = sgen
    while isinstance(gen, SphereN):
        levels.append(gen.vdc.base)
        gen = gen.s_gen
    assert levels == [2, 3, 5]
    assert isinstance(gen, Sphere3)
    assert isinstance(gen.sphere2, Sphere)


def test_cylin_n_ownership_chain():
    cgen = CylinN([2, 3, 5])
    assert isinstance(cgen.c_gen, CylinN)
    assert isinstance(cgen.c_gen.c_gen, Circle)


@pytest.mark.parametrize(
    "gen",
    [Sphere3([2, 3, 5]), SphereN([2, 3, 5, 7]), SphereN([3, 5, 7, 11, 13, 17])],
    ids=["sphere3", "sphere4", "sphere6"],
)
def test_sphere_points_on_unit_sphere(gen):
    for _ in range(N_DRAWS):
        pt = gen.pop()
        assert math.sqrt(sum(c * c for c in pt)) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("bases", [[2, 3], [2, 3, 5, 7], [2, 3, 5, 7, 11]])
def test_cylinder_identity(bases):
    cgen = CylinN(bases)
    for _ in range(N_DRAWS):
        *head, last = cgen.pop()
        assert sum(c * c for c in head) + last * last == pytest.approx(1.0, abs=1e-9)
        assert -1.0 <= last < 1.0


@pytest.mark.parametrize(
    "ctor",
    [
        lambda: Sphere3([2, 3, 5]),
        lambda: SphereN([2, 3, 5, 7]),
        lambda: SphereN([2, 3, 5, 7, 11, 13, 17]),
        lambda: CylinN([2, 3, 5, 7, 11]),
    ],
)
def test_reseed_reaches_every_level(ctor):
    gen = ctor()
    first = gen.pop()
    for _ in range(31):
        gen.pop()
    gen.reseed(0)
    assert gen.pop() == first

    gen.reseed(9)
    fresh = ctor()
    for _ in range(10):
        ref = fresh.pop()
    assert gen.pop() == ref


def test_reseed_leaves_tables_alone():
    sgen = SphereN([2, 3, 5, 7, 11])
    tp = sgen.tp
    sgen.pop()
    sgen.reseed(3)
    assert sgen.tp is tp


def test_sphere_n_shares_grid():
    tables = get_grid_tables()
    sgen = SphereN([2, 3, 5, 7, 11])
    assert sgen.tables is tables
    assert sgen.s_gen.tables is tables
    assert sgen.s_gen.s_gen.tables is tables


def test_sphere_n_tables_chain():
    sgen = SphereN([2, 3, 5, 7, 11])
    assert sgen.tp_minus1 is sgen.s_gen.tp
    assert np.allclose(sgen.s_gen.tp_minus1, sgen.s_gen.s_gen.tp)


def test_independent_instances():
    a = SphereN([2, 3, 5, 7])
    b = SphereN([2, 3, 5, 7])
    a.pop_vec(5)
    assert b.pop() == SphereN([2, 3, 5, 7]).pop()


def test_pop_vec_shape_and_state():
    a = CylinN([2, 3, 5])
    b = CylinN([2, 3, 5])
    pts = a.pop_vec(12)
    assert pts.shape == (12, 4)
    assert np.allclose(pts, [b.pop() for _ in range(12)])
    assert a.pop() == b.pop()


def test_too_few_bases_rejected():
    with pytest.raises(ValueError):
        SphereN([2, 3, 5])
    with pytest.raises(ValueError):
        Sphere3([2, 3])
    with pytest.raises(ValueError):
        CylinN([2])


def test_degenerate_base_rejected_deep_in_chain():
    with pytest.raises(ValueError):
        SphereN([2, 3, 5, 7, 1])
    with pytest.raises(ValueError):
        CylinN([2, 3, 0])
