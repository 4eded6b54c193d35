"""Triangle with circumcircle queries for the Bowyer-Watson in-circle test.

The identity of a triangle is the unordered set of its three corners;
construction order only affects the order of :meth:`Triangle.edges` and
:attr:`Triangle.corners`.

Derived quantities are evaluated in double precision from the stored
single-precision corners, so inputs mixing very small and very large
coordinates keep a usable circumcircle. For three collinear corners the
circumcenter denominator is zero; the division is left to IEEE semantics
(inf/nan) and :meth:`contains` returns whatever the resulting comparison
yields (always False once a NaN is involved). numpy's floating-point
warnings are silenced for that path.
"""
from __future__ import annotations

from typing import FrozenSet, List, Tuple

import numpy as np

from .constants import WIDE_DTYPE
from .edge import Edge
from .geometry import Point

__all__ = ['Triangle']


class Triangle:
    __slots__ = ('a', 'b', 'c')

    def __init__(self, a: Point, b: Point, c: Point):
        self.a = a
        self.b = b
        self.c = c

    @property
    def corners(self) -> Tuple[Point, Point, Point]:
        """Corners in construction order."""
        return (self.a, self.b, self.c)

    @property
    def circumcenter(self) -> Point:
        """Circumcenter rounded to coordinate precision.

        :attr:`circumradius` and :meth:`contains` use the unrounded center.
        """
        ux, uy = self._center()
        with np.errstate(over='ignore', invalid='ignore'):
            return Point(ux, uy)

    @property
    def circumradius(self):
        """Largest corner distance to the circumcenter."""
        return self._circumradius(self._center())

    def _center(self) -> Tuple[np.floating, np.floating]:
        (ax, ay), (bx, by), (cx, cy) = [(WIDE_DTYPE(p.x), WIDE_DTYPE(p.y)) for p in self.corners]
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            denominator = 2 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
            a2 = ax * ax + ay * ay
            b2 = bx * bx + by * by
            c2 = cx * cx + cy * cy
            ux = (a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / denominator
            uy = (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / denominator
        return ux, uy

    def _circumradius(self, center):
        return _max3(_dist(self.a, center), _dist(self.b, center), _dist(self.c, center))

    def contains(self, point: Point) -> bool:
        """True if ``point`` lies inside or on the circumcircle."""
        center = self._center()
        return bool(_dist(point, center) <= self._circumradius(center))

    def edges(self) -> List[Edge]:
        return [Edge(self.a, self.b), Edge(self.b, self.c), Edge(self.c, self.a)]

    def vertices(self) -> FrozenSet[Point]:
        return frozenset(self.corners)

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.vertices() == other.vertices()

    def __hash__(self):
        return hash(self.vertices())

    def __repr__(self):
        return f'Triangle({self.a!r}, {self.b!r}, {self.c!r})'


def _dist(p: Point, center):
    ux, uy = center
    with np.errstate(invalid='ignore', over='ignore'):
        dx = WIDE_DTYPE(p.x) - ux
        dy = WIDE_DTYPE(p.y) - uy
        return np.sqrt(dx * dx + dy * dy)


def _max3(x, y, z):
    # Left-biased: a NaN in the first operand wins, a NaN later is skipped.
    m = y if y >= x else x
    return z if z >= m else m
