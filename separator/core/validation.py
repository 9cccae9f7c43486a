"""Pre-flight validation of polygons handed to the decomposer.

``validate`` classifies a polygon as OK, having overlapping (crossing)
edges, being wound the wrong way, or both. It is O(n^2) and intended for
development and debugging; the decomposer never calls it.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import EPS_MATCH
from .geometry import as_polygon, orientation, segment_intersection

__all__ = ['ValidationStatus', 'ValidationReport', 'validate', 'validation_report', 'describe']


class ValidationStatus(enum.IntFlag):
    OK = 0
    OVERLAPPING_SEGMENTS = 1
    WRONG_WINDING = 2
    BOTH = 3


_DESCRIPTIONS = {
    ValidationStatus.OK: "polygon can be decomposed",
    ValidationStatus.OVERLAPPING_SEGMENTS: "polygon has overlapping segments",
    ValidationStatus.WRONG_WINDING: "polygon is not in clockwise order (or is degenerate)",
    ValidationStatus.BOTH: "polygon has overlapping segments and is not in clockwise order",
}


def describe(status: ValidationStatus) -> str:
    return _DESCRIPTIONS[ValidationStatus(int(status))]


@dataclass
class ValidationReport:
    """Detailed result of :func:`validation_report`.

    Attributes
    ----------
    status : ValidationStatus
    overlapping_edges : list of (i, j)
        Pairs of edge start indices (i < j) whose segments intersect.
    wrong_winding_edges : list of int
        Start indices of edges with no vertex on their clockwise side.
    """
    status: ValidationStatus = ValidationStatus.OK
    overlapping_edges: List[Tuple[int, int]] = field(default_factory=list)
    wrong_winding_edges: List[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == ValidationStatus.OK

    def messages(self) -> List[str]:
        msgs = []
        for i in self.wrong_winding_edges:
            msgs.append(f"edge {i} has no vertex on its inner (clockwise) side")
        for i, j in self.overlapping_edges:
            msgs.append(f"edges {i} and {j} overlap")
        return msgs


def validation_report(polygon, eps: float = EPS_MATCH) -> ValidationReport:
    pts = as_polygon(polygon)
    n = pts.shape[0]
    overlaps = set()
    wrong = []
    for i in range(n):
        i2 = (i + 1) % n
        i3 = (i - 1) % n
        inner = False
        for j in range(n):
            if j == i or j == i2:
                continue
            if not inner and orientation(pts[i], pts[i2], pts[j]) > 0:
                inner = True
            if j != i3:
                j2 = (j + 1) % n
                if segment_intersection(pts[i], pts[i2], pts[j], pts[j2], eps) is not None:
                    overlaps.add((min(i, j), max(i, j)))
        if not inner:
            wrong.append(i)

    status = ValidationStatus.OK
    if overlaps:
        status |= ValidationStatus.OVERLAPPING_SEGMENTS
    if wrong:
        status |= ValidationStatus.WRONG_WINDING
    return ValidationReport(status=ValidationStatus(int(status)),
                            overlapping_edges=sorted(overlaps),
                            wrong_winding_edges=wrong)


def validate(polygon, eps: float = EPS_MATCH) -> ValidationStatus:
    """Classify ``polygon``; see :class:`ValidationStatus`.

    WRONG_WINDING is reported when some edge has no other vertex strictly on
    its clockwise side, OVERLAPPING_SEGMENTS when two non-adjacent edges
    intersect within ``eps``.
    """
    return validation_report(polygon, eps).status
