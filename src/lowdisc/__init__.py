from .lds import (
    SequenceGen,
    VdCorput,
    Halton,
    HaltonN,
    Circle,
    Sphere,
    Sphere3Hopf,
)
from .lds_n import Sphere3, SphereN, CylinN
from .api import make_generator, sample_points
from .params import SamplerParams
from .utils.radix import vdc

__all__ = [
    "SequenceGen",
    "VdCorput",
    "Halton",
    "HaltonN",
    "Circle",
    "Sphere",
    "Sphere3Hopf",
    "Sphere3",
    "SphereN",
    "CylinN",
    "make_generator",
    "sample_points",
    "SamplerParams",
    "vdc",
]
