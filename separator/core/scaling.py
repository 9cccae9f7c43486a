"""Scale-in / decompose / scale-out pipeline.

The absolute tolerance used by the predicates is only meaningful relative
to the size of the polygon. ``separate`` therefore multiplies the caller's
coordinates by ``config.scale`` before decomposing and divides the pieces by
``config.scale * config.pixels_per_unit`` on the way out, which leaves them
in the units a physics body expects. Building engine shapes from the pieces
is left to the caller.
"""
from __future__ import annotations

from typing import List, Optional

import numpy as np

from .config import SeparatorConfig
from .decomposition import decompose
from .geometry import as_polygon
from .stats import DecompositionStats

__all__ = ['scale_polygon', 'separate']


def scale_polygon(poly, factor: float) -> np.ndarray:
    return np.asarray(poly, dtype=np.float64) * float(factor)


def separate(vertices, config: Optional[SeparatorConfig] = None,
             stats: Optional[DecompositionStats] = None) -> List[np.ndarray]:
    """Decompose ``vertices`` (clockwise) and return pieces in output units.

    Raises ValueError / DecompositionFailure like :func:`decompose`.
    """
    cfg = config or SeparatorConfig()
    scaled = scale_polygon(as_polygon(vertices), cfg.scale)
    pieces = decompose(scaled, eps=cfg.eps, stats=stats, max_splits=cfg.max_splits)
    divisor = cfg.output_divisor
    return [piece / divisor for piece in pieces]
