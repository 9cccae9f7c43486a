"""Tolerance-aware geometric predicates and small polygon helpers.

Conventions
-----------
Coordinates are taken in a y-up frame and polygons are listed clockwise,
e.g. ``(0, 0), (0, 10), (10, 10), (10, 0)``. :func:`orientation` is signed
so that a clockwise turn is positive; for a clockwise polygon a consecutive
vertex triple with a negative orientation therefore marks a reflex vertex.

All ``eps`` parameters are absolute margins in input units and default to
:data:`~separator.core.constants.EPS_MATCH`.
"""
from __future__ import annotations

from typing import Optional, List

import numpy as np

from .constants import EPS_MATCH

__all__ = [
    'as_polygon', 'orientation', 'point_on_line', 'point_on_segment', 'points_match',
    'segment_intersection', 'ray_hit', 'polygon_signed_area', 'polygon_area',
    'is_clockwise', 'reflex_vertices', 'is_convex',
]


def as_polygon(vertices) -> np.ndarray:
    """Return ``vertices`` as a fresh (N,2) float64 array.

    Raises ValueError when the input is not a list of at least three finite
    2D points.
    """
    try:
        pts = np.array(vertices, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"vertices are not numeric 2D points: {exc}") from exc
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) array of points, got shape {pts.shape}")
    if pts.shape[0] < 3:
        raise ValueError(f"a polygon needs at least 3 vertices, got {pts.shape[0]}")
    if not np.all(np.isfinite(pts)):
        raise ValueError("vertices contain NaN or infinite coordinates")
    return pts


def orientation(a, b, c) -> float:
    """Twice the signed area of triangle (a, b, c).

    Positive when a -> b -> c turns clockwise, negative when it turns
    counter-clockwise and zero when the points are collinear.
    """
    return float((c[0] - a[0]) * (b[1] - a[1]) - (b[0] - a[0]) * (c[1] - a[1]))


def point_on_line(p, a, b, eps: float = EPS_MATCH) -> bool:
    """True if ``p`` lies within ``eps`` of the line through ``a`` and ``b``.

    The deviation is measured along y for segments wider than ``eps`` and
    along x for (near) vertical ones.
    """
    dx = b[0] - a[0]
    if abs(dx) > eps:
        slope = (b[1] - a[1]) / dx
        expected_y = slope * (p[0] - a[0]) + a[1]
        return abs(expected_y - p[1]) < eps
    return abs(p[0] - a[0]) < eps


def point_on_segment(p, a, b, eps: float = EPS_MATCH) -> bool:
    """Bounding-box containment within ``eps`` on both axes plus collinearity."""
    in_x = min(a[0], b[0]) - eps <= p[0] <= max(a[0], b[0]) + eps
    in_y = min(a[1], b[1]) - eps <= p[1] <= max(a[1], b[1]) + eps
    return in_x and in_y and point_on_line(p, a, b, eps)


def points_match(p, q, eps: float = EPS_MATCH) -> bool:
    return abs(q[0] - p[0]) < eps and abs(q[1] - p[1]) < eps


def _line_hit(p1, p2, p3, p4) -> Optional[np.ndarray]:
    """Intersection of the infinite lines p1-p2 and p3-p4, None when parallel."""
    dx1 = p2[0] - p1[0]; dy1 = p2[1] - p1[1]
    dx2 = p4[0] - p3[0]; dy2 = p4[1] - p3[1]
    det = dy1 * dx2 - dx1 * dy2
    if det == 0:
        return None
    a = (dx2 * (p3[1] - p1[1]) - dy2 * (p3[0] - p1[0])) / det
    return np.array([p1[0] + a * dx1, p1[1] + a * dy1], dtype=np.float64)


def segment_intersection(p1, p2, p3, p4, eps: float = EPS_MATCH) -> Optional[np.ndarray]:
    """Return the intersection point of segments p1-p2 and p3-p4, or None.

    The point of the supporting lines is accepted only if it lies on both
    segments within ``eps`` (see :func:`point_on_segment`). Parallel and
    collinear pairs yield None.
    """
    hit = _line_hit(p1, p2, p3, p4)
    if hit is None:
        return None
    if point_on_segment(hit, p1, p2, eps) and point_on_segment(hit, p3, p4, eps):
        return hit
    return None


def ray_hit(p1, p2, p3, p4, eps: float = EPS_MATCH) -> Optional[np.ndarray]:
    """Cast the ray p1 -> p2 past p2 and intersect it with segment p3-p4.

    A hit is reported only when p2 lies between p1 and the hit point (so the
    hit is at or beyond p2) and the hit lies on segment p3-p4.
    """
    hit = _line_hit(p1, p2, p3, p4)
    if hit is None:
        return None
    if point_on_segment(p2, p1, hit, eps) and point_on_segment(hit, p3, p4, eps):
        return hit
    return None


def polygon_signed_area(poly) -> float:
    """Shoelace area; positive for counter-clockwise, negative for clockwise rings."""
    pts = np.asarray(poly, dtype=np.float64)
    if pts.shape[0] < 3:
        return 0.0
    x = pts[:, 0]; y = pts[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def polygon_area(poly) -> float:
    return abs(polygon_signed_area(poly))


def is_clockwise(poly) -> bool:
    return polygon_signed_area(poly) < 0.0


def reflex_vertices(poly) -> List[int]:
    """Indices of the vertices of a clockwise polygon whose turn is counter-clockwise."""
    pts = np.asarray(poly, dtype=np.float64)
    n = pts.shape[0]
    out = []
    for i in range(n):
        if orientation(pts[i - 1], pts[i], pts[(i + 1) % n]) < 0:
            out.append(i)
    return out


def is_convex(poly) -> bool:
    return not reflex_vertices(poly)
