"""Read-only structural and Delaunay checks over index-based triangle meshes.

These operate on plain arrays (``points`` of shape (N, 2), ``triangles`` of
shape (M, 3)) so they can validate a :class:`TriangleMesh` via
``points_array()`` / ``triangles_array()`` or any other triangulation.
All arithmetic here is float64 and tolerance based, unlike the core.
"""
from __future__ import annotations

from typing import Dict, List, Set, Tuple

import numpy as np

from .constants import EPS_AREA, EPS_INCIRCLE

__all__ = [
    'build_edge_to_tri_map', 'boundary_edges_from_map',
    'triangles_signed_areas', 'circumcircles',
    'check_mesh_conformity', 'check_delaunay',
]


def build_edge_to_tri_map(triangles) -> Dict[Tuple[int, int], Set[int]]:
    edge_map: Dict[Tuple[int, int], Set[int]] = {}
    for t_idx, tri in enumerate(np.asarray(triangles, dtype=np.int64).reshape(-1, 3)):
        for i in range(3):
            a = int(tri[i]); b = int(tri[(i + 1) % 3])
            key = (a, b) if a <= b else (b, a)
            edge_map.setdefault(key, set()).add(t_idx)
    return edge_map


def boundary_edges_from_map(edge_map):
    return {e for e, s in edge_map.items() if len(s) == 1}


def triangles_signed_areas(points, triangles) -> np.ndarray:
    """Signed areas of all triangles (positive for counter-clockwise)."""
    pts = np.asarray(points, dtype=np.float64)
    tris = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    p0 = pts[tris[:, 0]]; p1 = pts[tris[:, 1]]; p2 = pts[tris[:, 2]]
    return 0.5 * ((p1[:, 0] - p0[:, 0]) * (p2[:, 1] - p0[:, 1]) - (p1[:, 1] - p0[:, 1]) * (p2[:, 0] - p0[:, 0]))


def circumcircles(points, triangles) -> Tuple[np.ndarray, np.ndarray]:
    """Vectorized float64 circumcenters (M, 2) and radii (M,).

    Degenerate triangles yield non-finite entries.
    """
    pts = np.asarray(points, dtype=np.float64)
    tris = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    a = pts[tris[:, 0]]; b = pts[tris[:, 1]]; c = pts[tris[:, 2]]
    with np.errstate(divide='ignore', invalid='ignore'):
        d = 2.0 * (a[:, 0] * (b[:, 1] - c[:, 1]) + b[:, 0] * (c[:, 1] - a[:, 1]) + c[:, 0] * (a[:, 1] - b[:, 1]))
        a2 = np.sum(a * a, axis=1); b2 = np.sum(b * b, axis=1); c2 = np.sum(c * c, axis=1)
        ux = (a2 * (b[:, 1] - c[:, 1]) + b2 * (c[:, 1] - a[:, 1]) + c2 * (a[:, 1] - b[:, 1])) / d
        uy = (a2 * (c[:, 0] - b[:, 0]) + b2 * (a[:, 0] - c[:, 0]) + c2 * (b[:, 0] - a[:, 0])) / d
        centers = np.column_stack((ux, uy))
        radii = np.linalg.norm(a - centers, axis=1)
    return centers, radii


def check_mesh_conformity(points, triangles, area_tol: float = EPS_AREA) -> Tuple[bool, List[str]]:
    """Structural sanity checks.

    Flags: empty mesh, out-of-range indices, near-zero-area triangles,
    duplicate triangles and non-manifold edges (shared by more than two
    triangles). Returns ``(ok, messages)``.
    """
    tris = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    pts = np.asarray(points, dtype=np.float64)
    msgs: List[str] = []
    if tris.size == 0:
        return False, ["No triangles."]
    if tris.min() < 0 or tris.max() >= len(pts):
        return False, ["Triangle indices out of range."]
    ok = True
    abs_areas = np.abs(triangles_signed_areas(pts, tris))
    for ti in np.nonzero(abs_areas < area_tol)[0][:50]:
        msgs.append(f"Triangle {int(ti)} has near-zero area ({abs_areas[ti]:.3e}).")
        ok = False
    _, counts = np.unique(np.sort(tris, axis=1), axis=0, return_counts=True)
    if np.any(counts > 1):
        msgs.append("Duplicate triangles detected.")
        ok = False
    edge_map = build_edge_to_tri_map(tris)
    non_manifold = [e for e, s in edge_map.items() if len(s) > 2]
    if non_manifold:
        msgs.append(f"Non-manifold edges detected: {sorted(non_manifold)[:20]}")
        ok = False
    return ok, msgs


def check_delaunay(points, triangles, rel_tol: float = EPS_INCIRCLE) -> Tuple[bool, List[str]]:
    """Empty-circumcircle check against every input point.

    A point violates a triangle when its distance to the circumcenter is
    below ``radius * (1 - rel_tol)``. The triangle's own corners are never
    reported. Returns ``(ok, messages)``.
    """
    tris = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    pts = np.asarray(points, dtype=np.float64)
    if tris.size == 0:
        return True, []
    centers, radii = circumcircles(pts, tris)
    msgs: List[str] = []
    for ti, (center, radius) in enumerate(zip(centers, radii)):
        if not np.isfinite(radius):
            msgs.append(f"Triangle {ti} is degenerate (no finite circumcircle).")
            continue
        dist = np.linalg.norm(pts - center, axis=1)
        inside = np.nonzero(dist < radius * (1.0 - rel_tol))[0]
        inside = [int(i) for i in inside if i not in tris[ti]]
        if inside:
            msgs.append(f"Triangle {ti} {tris[ti].tolist()} circumcircle contains points {inside[:10]}")
    return not msgs, msgs
