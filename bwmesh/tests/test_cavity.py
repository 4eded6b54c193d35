"""Cavity boundary and refill rules of the insertion step."""
from bwmesh.core.edge import Edge
from bwmesh.core.geometry import Point
from bwmesh.core.mesh import fan_cavity, find_bad_triangles, find_boundary_edges
from bwmesh.core.stats import InsertionStats
from bwmesh.core.triangle import Triangle


A, B, C, D = Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)


class TestBoundaryEdges:

    def test_single_triangle_keeps_all_edges(self):
        assert find_boundary_edges([Triangle(A, B, C)]) == [Edge(A, B), Edge(B, C), Edge(C, A)]

    def test_shared_edge_is_dropped(self):
        edges = find_boundary_edges([Triangle(A, B, C), Triangle(B, D, C)])
        assert len(edges) == 4
        assert edges == [Edge(A, B), Edge(C, A), Edge(B, D), Edge(D, C)]
        assert Edge(B, C) not in edges

    def test_fan_drops_interior_edges(self):
        o, p1, p2, p3 = Point(0, 0), Point(1, 0), Point(0, 1), Point(-1, -1)
        fan = [Triangle(o, p1, p2), Triangle(o, p2, p3), Triangle(o, p3, p1)]
        edges = find_boundary_edges(fan)
        assert edges == [Edge(p1, p2), Edge(p2, p3), Edge(p3, p1)]
        assert all(o not in e.vertices() for e in edges)

    def test_sharing_is_by_position(self):
        # an equal triangle listed twice shares every edge with its twin
        assert find_boundary_edges([Triangle(A, B, C), Triangle(C, A, B)]) == []

    def test_repeated_corner_repeats_an_edge(self):
        edges = find_boundary_edges([Triangle(A, A, B)])
        assert edges == [Edge(A, A), Edge(A, B), Edge(B, A)]
        assert list(dict.fromkeys(edges)) == [Edge(A, A), Edge(A, B)]

    def test_no_bad_triangles(self):
        assert find_boundary_edges([]) == []


class TestFanCavity:

    def test_fans_from_new_point(self):
        p = Point(0.4, 0.4)
        created, n_dup = fan_cavity(p, [Triangle(A, B, C), Triangle(B, D, C)])
        assert n_dup == 0
        assert created == [Triangle(p, A, B), Triangle(p, C, A), Triangle(p, B, D), Triangle(p, D, C)]
        assert all(t.corners[0] == p for t in created)

    def test_repeated_edge_is_filled_once(self):
        p = Point(2, 2)
        created, n_dup = fan_cavity(p, [Triangle(A, A, B)])
        assert n_dup == 1
        assert created == [Triangle(p, A, A), Triangle(p, A, B)]

    def test_duplicates_reach_stats(self):
        stats = InsertionStats()
        bad = [Triangle(A, A, B)]
        created, n_dup = fan_cavity(Point(2, 2), bad)
        stats.record_insertion(len(bad), len(created) + n_dup, n_dup)
        assert stats.boundary_edges == 3
        assert stats.duplicate_boundary_edges == 1
        assert stats.triangles_created == len(created) == 2


def test_bad_triangles_keep_list_order():
    tris = [Triangle(A, B, C), Triangle(B, D, C), Triangle(Point(5, 5), Point(6, 5), Point(5, 6))]
    assert find_bad_triangles(tris, Point(0.5, 0.5)) == tris[:2]
    assert find_bad_triangles(tris, Point(-5, -5)) == []
