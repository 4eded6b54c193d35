"""Unordered point pair used to find the shared sides of cavity triangles."""
from __future__ import annotations

from typing import FrozenSet

from .geometry import Point

__all__ = ['Edge']


class Edge:
    """Segment between two points; ``Edge(a, b) == Edge(b, a)``.

    Equality and hashing go through the vertex set, so the orientation the
    edge was discovered with never matters. A zero-length edge (``a == b``)
    is representable and equals only another zero-length edge on the same
    point.
    """
    __slots__ = ('a', 'b')

    def __init__(self, a: Point, b: Point):
        self.a = a
        self.b = b

    def vertices(self) -> FrozenSet[Point]:
        return frozenset((self.a, self.b))

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.vertices() == other.vertices()

    def __hash__(self):
        return hash(self.vertices())

    def __repr__(self):
        return f'Edge({self.a!r}, {self.b!r})'
