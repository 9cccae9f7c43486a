"""Greedy convex decomposition of a simple clockwise polygon.

A piece that still has a reflex vertex is cut along the extension of the
edge entering that vertex, up to the closest boundary edge the extension
hits. Pieces waiting for a cut are kept in a worklist of independently
owned arrays and the loop is iterative, so stack depth does not grow with
the polygon.

The input must be simple, clockwise (see :mod:`separator.core.geometry`)
and free of zero-area ears. Nothing is repaired: malformed input raises
:class:`DecompositionFailure`, use :func:`separator.core.validation.validate`
to find out why.
"""
from __future__ import annotations

import time
from collections import deque
from typing import List, Optional, Tuple

import numpy as np

from .constants import EPS_MATCH, MIN_SPLIT_BUDGET
from .geometry import as_polygon, orientation, point_on_segment, points_match, polygon_area, ray_hit
from .logging_utils import get_logger
from .stats import DecompositionStats

logger = get_logger('separator.decomposition')

__all__ = ['DecompositionFailure', 'decompose', 'decompose_with_stats', 'split_budget']


class DecompositionFailure(RuntimeError):
    """Raised when a piece cannot be split.

    Attributes
    ----------
    polygon : ndarray or None
        The piece being processed when the failure occurred.
    vertex : int or None
        Index (within ``polygon``) of the reflex vertex being resolved.
    """

    def __init__(self, message: str, polygon: Optional[np.ndarray] = None, vertex: Optional[int] = None):
        super().__init__(message)
        self.polygon = polygon
        self.vertex = vertex


def split_budget(n_vertices: int) -> int:
    """Default upper bound on the number of splits for an n-vertex polygon."""
    return max(MIN_SPLIT_BUDGET, n_vertices * n_vertices)


def _first_reflex(pts: np.ndarray) -> Optional[int]:
    """Index of the predecessor of the first reflex vertex, or None if convex."""
    n = pts.shape[0]
    for i in range(n):
        if orientation(pts[i], pts[(i + 1) % n], pts[(i + 2) % n]) < 0:
            return i
    return None


def _closest_cut(pts: np.ndarray, i1: int, i2: int, eps: float) -> Optional[Tuple[int, int, np.ndarray]]:
    """Closest edge hit by the ray pts[i1] -> pts[i2].

    Edges starting at i1, i2 or i1-1 touch the ray origin and are skipped.
    Returns (h, k, cut) with h, k the edge endpoints, first minimum wins.
    """
    n = pts.shape[0]
    p1 = pts[i1]; p2 = pts[i2]
    skip = {i1, i2, (i1 - 1) % n}
    best = None
    best_d = np.inf
    for j in range(n):
        if j in skip:
            continue
        k = (j + 1) % n
        hit = ray_hit(p1, p2, pts[j], pts[k], eps)
        if hit is None:
            continue
        dx = p2[0] - hit[0]; dy = p2[1] - hit[1]
        d = dx * dx + dy * dy
        if d < best_d:
            best = (j, k, hit)
            best_d = d
    return best


def _split(pts: np.ndarray, i1: int, i2: int, h: int, k: int, cut: np.ndarray, eps: float):
    """Cut ``pts`` along p1 -> cut into two new clockwise arrays.

    The end vertex of each walk is dropped only when it sits on the segment
    joining its two neighbours in the new piece.
    """
    n = pts.shape[0]
    p1 = pts[i1]; p2 = pts[i2]

    # Side A: k .. i1 then the cut point (p2 falls on the closing edge)
    side_a = []
    end = p1
    if not points_match(cut, pts[k], eps):
        side_a.append(cut)
        end = cut
    idx = i1
    prev = i1
    while idx != k:
        side_a.append(pts[idx])
        prev = idx
        idx = (idx - 1) % n
    if not point_on_segment(pts[k], pts[prev], end, eps):
        side_a.append(pts[k])
    side_a.reverse()

    # Side B: cut point then i2 .. h
    side_b = []
    end = p2
    if not points_match(cut, pts[h], eps):
        side_b.append(cut)
        end = cut
    idx = i2
    prev = i2
    while idx != h:
        side_b.append(pts[idx])
        prev = idx
        idx = (idx + 1) % n
    if not point_on_segment(pts[h], pts[prev], end, eps):
        side_b.append(pts[h])

    return np.array(side_a, dtype=np.float64), np.array(side_b, dtype=np.float64)


def decompose(polygon, eps: float = EPS_MATCH, stats: Optional[DecompositionStats] = None,
              max_splits: Optional[int] = None) -> List[np.ndarray]:
    """Decompose a simple clockwise polygon into convex clockwise pieces.

    Parameters
    ----------
    polygon : (N,2) array-like
        Vertices in clockwise order, typically pre-scaled so that ``eps`` is
        a small fraction of an edge.
    eps : float
        Absolute tolerance for the predicates.
    stats : DecompositionStats, optional
        Filled in place when given.
    max_splits : int, optional
        Split budget; defaults to :func:`split_budget` of the vertex count.

    Returns
    -------
    list of (K,2) float64 arrays
        Convex pieces. A convex input comes back as a single, unmodified copy.

    Raises
    ------
    ValueError
        If ``polygon`` is not an array of at least three finite 2D points.
    DecompositionFailure
        If a reflex vertex has no cut edge, a split degenerates, a piece has
        no area (e.g. an all-collinear outline) or the split budget is
        exhausted. No partial result is returned.
    """
    t0 = time.perf_counter()
    source = as_polygon(polygon)
    budget = split_budget(source.shape[0]) if max_splits is None else int(max_splits)
    worklist = deque([source])
    pieces: List[np.ndarray] = []
    splits = 0
    max_worklist = 1

    while worklist:
        pts = worklist.popleft()
        i1 = _first_reflex(pts)
        if i1 is None:
            if polygon_area(pts) <= eps * eps:
                logger.debug("zero-area piece of %d vertices", pts.shape[0])
                raise DecompositionFailure(
                    "a piece has no area; the outline is probably collinear or folds back on itself. "
                    "Use validate() to see where the problem is.", polygon=pts)
            pieces.append(pts)
            continue
        n = pts.shape[0]
        i2 = (i1 + 1) % n
        if splits >= budget:
            logger.debug("split budget %d exhausted with %d pieces pending", budget, len(worklist) + 1)
            raise DecompositionFailure(
                f"split budget of {budget} exhausted; the polygon is probably not simple. "
                "Use validate() to see where the problem is.", polygon=pts, vertex=i2)
        found = _closest_cut(pts, i1, i2, eps)
        if found is None:
            logger.debug("no cut edge for reflex vertex %d of a %d-vertex piece", i2, n)
            raise DecompositionFailure(
                f"no cut edge found for reflex vertex {i2} at ({pts[i2][0]:.6g}, {pts[i2][1]:.6g}). "
                "Use validate() to see where the problem is.", polygon=pts, vertex=i2)
        h, k, cut = found
        side_a, side_b = _split(pts, i1, i2, h, k, cut, eps)
        if side_a.shape[0] < 3 or side_b.shape[0] < 3:
            logger.debug("degenerate split at vertex %d: sizes %d and %d", i2, side_a.shape[0], side_b.shape[0])
            raise DecompositionFailure(
                f"splitting at reflex vertex {i2} produced a piece with fewer than 3 vertices. "
                "Use validate() to see where the problem is.", polygon=pts, vertex=i2)
        splits += 1
        logger.debug("split %d: reflex %d of %d vertices, cut edge (%d,%d) at (%.4f, %.4f) -> %d + %d",
                     splits, i2, n, h, k, cut[0], cut[1], side_a.shape[0], side_b.shape[0])
        worklist.append(side_a)
        worklist.append(side_b)
        max_worklist = max(max_worklist, len(worklist))

    elapsed = time.perf_counter() - t0
    if stats is not None:
        stats.splits = splits
        stats.pieces = len(pieces)
        stats.max_worklist = max_worklist
        stats.input_vertices = int(source.shape[0])
        stats.output_vertices = int(sum(p.shape[0] for p in pieces))
        stats.time_total = elapsed
    logger.debug("decomposed %d vertices into %d convex pieces with %d splits in %.3f ms",
                 source.shape[0], len(pieces), splits, elapsed * 1000.0)
    return pieces


def decompose_with_stats(polygon, eps: float = EPS_MATCH,
                         max_splits: Optional[int] = None) -> Tuple[List[np.ndarray], DecompositionStats]:
    stats = DecompositionStats()
    pieces = decompose(polygon, eps=eps, stats=stats, max_splits=max_splits)
    return pieces, stats
