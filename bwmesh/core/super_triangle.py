"""Seed triangle enclosing the input bounding box."""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .constants import COORD_DTYPE, SUPER_TRIANGLE_FACTOR, WIDE_DTYPE
from .geometry import Point, point_max, point_min
from .triangle import Triangle

__all__ = ['SuperTriangleBuilder']

_BIG = np.finfo(COORD_DTYPE).max


class SuperTriangleBuilder:
    """Build an oversized triangle around a point set.

    The bounding box of ``points`` is reduced to a center and a radius
    (the larger distance from the center to the box corners), and the
    three corners are pushed out from the center by ``factor * radius``::

        A = (cx, cy + r*f)
        B = (cx - r*f + r, cy - 2r)
        C = (cx + r*f - r, cy - 2r)

    This is not a minimal enclosing triangle. The default factor is pi;
    larger factors give a roomier triangle. For a single input point the
    radius is zero and the triangle collapses onto that point, and with no
    points the corners are non-finite. The mesh driver discards it
    afterwards like any other super-linked triangle.

    The corners are computed in double precision and only rounded to
    coordinate precision when stored.
    """

    def __init__(self, points: Sequence[Point], factor=SUPER_TRIANGLE_FACTOR):
        self.factor = WIDE_DTYPE(factor)
        lo = Point(_BIG, _BIG)
        hi = Point(-_BIG, -_BIG)
        for p in points:
            lo = point_min(lo, p)
            hi = point_max(hi, p)
        self.bbox_min = lo
        self.bbox_max = hi
        self.enclosing_triangle = self._build(lo, hi)

    def _build(self, lo: Point, hi: Point) -> Triangle:
        f = self.factor
        lo_x, lo_y, hi_x, hi_y = (WIDE_DTYPE(v) for v in (lo.x, lo.y, hi.x, hi.y))
        with np.errstate(over='ignore', invalid='ignore'):
            cx = (lo_x + hi_x) / 2
            cy = (lo_y + hi_y) / 2
            radius = max(_norm(lo_x - cx, lo_y - cy), _norm(hi_x - cx, hi_y - cy))
            vertex_a = Point(cx, cy + radius * f)
            vertex_b = Point(cx - radius * f + radius, cy - radius * 2)
            vertex_c = Point(cx + radius * f - radius, cy - radius * 2)
        return Triangle(vertex_a, vertex_b, vertex_c)


def _norm(dx, dy):
    return np.sqrt(dx * dx + dy * dy)
