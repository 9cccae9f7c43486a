"""Diagnostics for a finished decomposition.

``check_decomposition`` re-verifies what the decomposer promises: every
piece convex and clockwise, and the pieces together covering the input's
area. Convexity is checked twice, by the local turn test and against the
piece's scipy convex hull.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from .constants import EPS_AREA_REL
from .geometry import as_polygon, polygon_area, is_clockwise, reflex_vertices
from .logging_utils import get_logger

logger = get_logger('separator.diagnostics')

__all__ = ['hull_deficit', 'check_decomposition']


def hull_deficit(piece) -> float:
    """Area of the convex hull of ``piece`` not covered by the piece itself.

    Zero (up to rounding) for a convex piece. Raises ValueError when the
    points are degenerate (collinear or coincident).
    """
    pts = np.asarray(piece, dtype=np.float64)
    try:
        hull = ConvexHull(pts)
    except QhullError as exc:
        raise ValueError(f"degenerate piece, cannot build convex hull: {exc}") from exc
    # In 2D ConvexHull.volume is the enclosed area
    return float(hull.volume) - polygon_area(pts)


def check_decomposition(polygon, pieces: Sequence, rel_tol: float = EPS_AREA_REL) -> Tuple[bool, List[str]]:
    """Return (ok, messages) describing every problem found with ``pieces``."""
    src = as_polygon(polygon)
    msgs: List[str] = []
    if len(pieces) == 0:
        return False, ['decomposition produced no pieces']

    total = 0.0
    for idx, piece in enumerate(pieces):
        pts = np.asarray(piece, dtype=np.float64)
        if pts.ndim != 2 or pts.shape[0] < 3:
            msgs.append(f'piece {idx}: fewer than 3 vertices')
            continue
        area = polygon_area(pts)
        total += area
        reflex = reflex_vertices(pts)
        if reflex:
            msgs.append(f'piece {idx}: reflex vertices {reflex}')
        if not is_clockwise(pts):
            msgs.append(f'piece {idx}: not clockwise')
        try:
            deficit = hull_deficit(pts)
        except ValueError as exc:
            msgs.append(f'piece {idx}: {exc}')
            continue
        if deficit > rel_tol * max(area, 1.0):
            msgs.append(f'piece {idx}: hull deficit {deficit:.6e}')

    expected = polygon_area(src)
    if abs(total - expected) > rel_tol * max(expected, 1.0):
        msgs.append(f'area not preserved: input={expected:.6e} pieces={total:.6e}')
    if msgs:
        logger.debug('decomposition check failed: %s', msgs)
    return (not msgs), msgs
