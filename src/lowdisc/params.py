from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass
class SamplerParams:
    """Configuration for batch point sampling.

    Parameters
    ----------
    kind : str
        Generator kind, see :data:`lowdisc.api.GENERATORS`.
    bases : list of int
        One base per radix dimension, ideally pairwise coprime.
    num : int
        Number of points to draw.
    seed : int
        Counter value every owned van der Corput stream is reseeded to.
    verbose : bool
        Print the elapsed time of the draw.
    """
    kind: str = "sphere"
    bases: List[int] = field(default_factory=lambda: [2, 3])
    num: int = 1024
    seed: int = 0
    verbose: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["SamplerParams"]
