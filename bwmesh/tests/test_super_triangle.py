"""Tests for the bounding-box based super-triangle."""
import numpy as np
import pytest

from bwmesh.core.constants import SUPER_TRIANGLE_FACTOR
from bwmesh.core.geometry import Point, as_points
from bwmesh.core.super_triangle import SuperTriangleBuilder


def _encloses(tri, pts):
    """Strict point-in-triangle test in float64 via orientation signs."""
    a, b, c = [np.array([float(p.x), float(p.y)]) for p in tri.corners]

    def orient(p, q, r):
        return (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])

    sign = np.sign(orient(a, b, c))
    for p in pts:
        xy = np.array([float(p.x), float(p.y)])
        if not (np.sign(orient(a, b, xy)) == sign and np.sign(orient(b, c, xy)) == sign
                and np.sign(orient(c, a, xy)) == sign):
            return False
    return True


def test_bounding_box():
    pts = as_points([(0, 1), (2, -1), (1, 3)])
    builder = SuperTriangleBuilder(pts)
    assert builder.bbox_min == Point(0, -1)
    assert builder.bbox_max == Point(2, 3)


def test_corner_formula():
    pts = as_points([(0, 0), (2, 2)])
    tri = SuperTriangleBuilder(pts).enclosing_triangle
    r = np.sqrt(2.0)
    f = float(SUPER_TRIANGLE_FACTOR)
    one = 1.0
    assert tri.corners[0] == Point(one, one + r * f)
    assert tri.corners[1] == Point(one - r * f + r, one - r * 2)
    assert tri.corners[2] == Point(one + r * f - r, one - r * 2)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_encloses_random_points(seed):
    rng = np.random.default_rng(seed)
    pts = as_points(rng.uniform(-50.0, 50.0, size=(60, 2)))
    tri = SuperTriangleBuilder(pts).enclosing_triangle
    assert _encloses(tri, pts)


def test_larger_factor_still_encloses():
    pts = as_points([(0, 0), (1, 0), (0.5, 0.866), (1.5, 0.866)])
    tri = SuperTriangleBuilder(pts, factor=10.0).enclosing_triangle
    assert _encloses(tri, pts)


def test_single_point_collapses():
    p = Point(3.0, -2.0)
    tri = SuperTriangleBuilder([p]).enclosing_triangle
    assert all(corner == p for corner in tri.corners)
    assert tri.vertices() == {p}


def test_no_points_does_not_raise():
    import warnings
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        tri = SuperTriangleBuilder([]).enclosing_triangle
    assert len(tri.corners) == 3


def test_mixed_magnitudes_enclosed():
    pts = as_points([(1e-7, 1e-7), (1e7, 1e7), (0.5, 0.866), (1.5, 0.866), (1.5, 0.466)])
    tri = SuperTriangleBuilder(pts).enclosing_triangle
    assert _encloses(tri, pts)
