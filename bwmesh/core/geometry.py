"""2D point primitive and the small set of vector helpers the core needs.

Coordinates are held as single-precision floats. Component-wise helpers stay
in single precision; :func:`distance` widens to double precision. Equality
is exact component-wise float equality (no tolerance): vertices are only
ever compared as given, never recombined and then re-compared.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union

import numpy as np

from .constants import COORD_DTYPE, WIDE_DTYPE

__all__ = [
    'Point', 'point_min', 'point_max', 'distance',
    'as_points', 'points_to_array',
]


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', COORD_DTYPE(self.x))
        object.__setattr__(self, 'y', COORD_DTYPE(self.y))

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __truediv__(self, k) -> 'Point':
        k = COORD_DTYPE(k)
        return Point(self.x / k, self.y / k)

    def __repr__(self) -> str:
        return f'Point({float(self.x)!r}, {float(self.y)!r})'


def point_min(a: Point, b: Point) -> Point:
    """Component-wise minimum."""
    return Point(min(a.x, b.x), min(a.y, b.y))


def point_max(a: Point, b: Point) -> Point:
    """Component-wise maximum."""
    return Point(max(a.x, b.x), max(a.y, b.y))


def distance(a: Point, b: Point):
    """Euclidean distance, evaluated in double precision."""
    dx = WIDE_DTYPE(a.x) - WIDE_DTYPE(b.x)
    dy = WIDE_DTYPE(a.y) - WIDE_DTYPE(b.y)
    return np.sqrt(dx * dx + dy * dy)


def as_points(points: Union[np.ndarray, Iterable]) -> List[Point]:
    """Coerce ``points`` into a list of :class:`Point`.

    Accepts a sequence of Points, a sequence of ``(x, y)`` pairs or an
    ``(N, 2)`` array. Order is preserved and duplicates are kept.
    """
    if isinstance(points, np.ndarray):
        arr = points
    else:
        points = list(points)
        if all(isinstance(p, Point) for p in points):
            return points
        arr = np.asarray([tuple(p) for p in points], dtype=np.float64)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) array of points, got shape {arr.shape}")
    return [Point(x, y) for x, y in arr.astype(COORD_DTYPE, copy=False)]


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """Return an ``(N, 2)`` single-precision array of ``points``."""
    if not points:
        return np.zeros((0, 2), dtype=COORD_DTYPE)
    return np.array([(p.x, p.y) for p in points], dtype=COORD_DTYPE)
