"""Bowyer-Watson Delaunay triangulation driver.

A :class:`TriangleMesh` is built once from an ordered point sequence and is
read-only afterwards. Points are inserted one at a time, in input order,
into a working triangle list seeded with a super-triangle:

1. every triangle whose circumcircle contains the point (inclusive) is bad;
2. edges of bad triangles not shared with another bad triangle bound the
   cavity;
3. bad triangles are removed and the cavity is fanned from the new point.

Triangles still touching a super-triangle corner are dropped at the end and
the survivors are mapped back to positions in the input sequence.
"""
from __future__ import annotations

import time
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import MeshConfig
from .edge import Edge
from .geometry import Point, as_points, points_to_array
from .logging_utils import get_logger
from .stats import InsertionStats
from .super_triangle import SuperTriangleBuilder
from .triangle import Triangle

__all__ = ['TriangleMesh', 'triangulate', 'find_bad_triangles', 'find_boundary_edges', 'fan_cavity']


class TriangleMesh:
    """Delaunay triangulation of a 2D point set.

    Parameters
    ----------
    points : sequence of Point, sequence of (x, y) pairs, or (N, 2) array
        Input vertices. Order is preserved; duplicates are passed through.
    config : MeshConfig, optional
        Run options; defaults use the canonical super-triangle.

    Attributes
    ----------
    vertices : tuple of Point
        The input points, same order and values.
    indices : tuple of int
        Flat index buffer; each consecutive triple names one surviving
        triangle by positions into ``vertices``. Winding is unspecified.
    triangles : tuple of Triangle
        Surviving triangles in discovery order.
    stats : InsertionStats or None
        Counters for the run when ``config.collect_stats`` is set.
    """

    def __init__(self, points, config: Optional[MeshConfig] = None):
        self.config = config if config is not None else MeshConfig()
        self._log = get_logger('bwmesh.mesh', self.config.log_level)
        self.stats: Optional[InsertionStats] = InsertionStats() if self.config.collect_stats else None

        vertices = as_points(points)
        t0 = time.perf_counter()
        triangles = self._triangulate(vertices)
        self.vertices: Tuple[Point, ...] = tuple(vertices)
        self.triangles: Tuple[Triangle, ...] = tuple(triangles)
        self.indices: Tuple[int, ...] = tuple(self._index_buffer(vertices, triangles))
        if self.stats is not None:
            self.stats.time_total = time.perf_counter() - t0
        self._log.info("triangulated %d points into %d triangles", len(self.vertices), len(self.triangles))

    # ------------------------------------------------------------------
    # Bowyer-Watson
    # ------------------------------------------------------------------
    def _triangulate(self, vertices: Sequence[Point]) -> List[Triangle]:
        super_triangle = SuperTriangleBuilder(vertices, self.config.super_triangle_factor).enclosing_triangle
        super_vertices = super_triangle.vertices()
        triangles: List[Triangle] = [super_triangle]

        for point in vertices:
            bad = find_bad_triangles(triangles, point)
            created, n_duplicates = fan_cavity(point, bad)

            bad_set = set(bad)
            triangles = [t for t in triangles if t not in bad_set]
            triangles.extend(created)

            if self.stats is not None:
                self.stats.record_insertion(len(bad), len(created) + n_duplicates, n_duplicates)
            self._log.debug("insert %r: bad=%d boundary=%d live=%d", point, len(bad), len(created), len(triangles))

        kept = [t for t in triangles if super_vertices.isdisjoint(t.vertices())]
        if self.stats is not None:
            self.stats.super_triangles_discarded = len(triangles) - len(kept)
        return kept

    def _index_buffer(self, vertices: Sequence[Point], triangles: Iterable[Triangle]) -> List[int]:
        first_index: Dict[Point, int] = {}
        for i, p in enumerate(vertices):
            first_index.setdefault(p, i)
        indices: List[int] = []
        for tri in triangles:
            # one entry per distinct corner, corners with no input match are omitted
            for corner in dict.fromkeys(tri.corners):
                idx = first_index.get(corner)
                if idx is None:
                    if self.stats is not None:
                        self.stats.index_misses += 1
                    self._log.warning("vertex %r of %r not found in input; index omitted", corner, tri)
                    continue
                indices.append(idx)
        return indices

    # ------------------------------------------------------------------
    # Array views
    # ------------------------------------------------------------------
    def points_array(self) -> np.ndarray:
        """Input vertices as an ``(N, 2)`` float32 array."""
        return points_to_array(self.vertices)

    def triangles_array(self) -> np.ndarray:
        """Index buffer reshaped to ``(M, 3)``.

        Raises ValueError if the buffer length is not a multiple of three
        (some corner could not be mapped back to an input point).
        """
        if len(self.indices) % 3 != 0:
            raise ValueError(f"index buffer of length {len(self.indices)} does not describe whole triangles")
        return np.asarray(self.indices, dtype=np.int64).reshape(-1, 3)

    def __repr__(self) -> str:
        return f'TriangleMesh(vertices={len(self.vertices)}, triangles={len(self.triangles)})'


def find_bad_triangles(triangles: Iterable[Triangle], point: Point) -> List[Triangle]:
    """Triangles whose circumcircle contains ``point``, in list order."""
    return [t for t in triangles if t.contains(point)]


def find_boundary_edges(bad_triangles: Sequence[Triangle]) -> List[Edge]:
    """Edges of the cavity left by removing ``bad_triangles``.

    An edge is on the boundary when no *other* bad triangle (by position,
    not by equality) has an equal edge. The result may hold duplicates
    when a degenerate triangle with a repeated corner lists the same edge
    twice.
    """
    edges: List[Edge] = []
    edge_lists = [t.edges() for t in bad_triangles]
    for i, own_edges in enumerate(edge_lists):
        for edge in own_edges:
            shared = any(edge in other for j, other in enumerate(edge_lists) if j != i)
            if not shared:
                edges.append(edge)
    return edges


def fan_cavity(point: Point, bad_triangles: Sequence[Triangle]) -> Tuple[List[Triangle], int]:
    """Triangles joining ``point`` to each distinct boundary edge of the cavity.

    Boundary edges are de-duplicated in discovery order. Returns the new
    triangles and the number of repeated edges that were skipped.
    """
    edges = find_boundary_edges(bad_triangles)
    unique_edges = list(dict.fromkeys(edges))
    return [Triangle(point, e.a, e.b) for e in unique_edges], len(edges) - len(unique_edges)


def triangulate(points, config: Optional[MeshConfig] = None) -> TriangleMesh:
    """Functional shorthand for ``TriangleMesh(points, config)``."""
    return TriangleMesh(points, config)
