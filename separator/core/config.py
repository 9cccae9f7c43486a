"""Configuration object for the scale / decompose / rescale pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Any, Dict

from .constants import EPS_MATCH, DEFAULT_SCALE, DEFAULT_PIXELS_PER_UNIT


@dataclass
class SeparatorConfig:
    """Parameters for :func:`separator.core.scaling.separate`.

    Attributes
    ----------
    eps : float
        Absolute tolerance handed to the predicates, in *scaled* units.
    scale : float
        Factor applied to input coordinates before decomposing. The bigger
        the scale, the smaller ``eps`` is relative to the polygon.
    pixels_per_unit : float
        Extra divisor applied on the way out (output = scaled / (scale * ppu)).
    max_splits : int, optional
        Upper bound on splits for one decomposition; ``None`` lets the
        decomposer derive it from the vertex count.
    extras : dict
        Free-form dictionary for caller-side extensions.
    """
    eps: float = EPS_MATCH
    scale: float = DEFAULT_SCALE
    pixels_per_unit: float = DEFAULT_PIXELS_PER_UNIT
    max_splits: Optional[int] = None
    extras: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.eps <= 0:
            raise ValueError(f"eps must be positive, got {self.eps!r}")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale!r}")
        if self.pixels_per_unit <= 0:
            raise ValueError(f"pixels_per_unit must be positive, got {self.pixels_per_unit!r}")

    @property
    def output_divisor(self) -> float:
        return self.scale * self.pixels_per_unit


__all__ = ['SeparatorConfig']
