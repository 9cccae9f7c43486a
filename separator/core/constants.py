"""Central numerical tolerances and scale defaults.

The separator works in caller-scaled coordinates; the absolute tolerance
below only makes sense relative to that scale, so keep both here and
reference them instead of scattering literals.
"""
from __future__ import annotations

# Geometry tolerances (absolute, in input coordinate units)
EPS_MATCH: float = 0.1            # point coincidence / on-segment / collinearity margin

# Relative tolerance used when comparing the area of a decomposition with its input
EPS_AREA_REL: float = 1e-6

# Scale defaults for the scale-in / scale-out pipeline
DEFAULT_SCALE: float = 30.0       # multiply input coordinates before decomposing
DEFAULT_PIXELS_PER_UNIT: float = 1.0

# Lower bound on the split budget of a single decomposition
MIN_SPLIT_BUDGET: int = 16

__all__ = [
    'EPS_MATCH',
    'EPS_AREA_REL',
    'DEFAULT_SCALE',
    'DEFAULT_PIXELS_PER_UNIT',
    'MIN_SPLIT_BUDGET',
]
