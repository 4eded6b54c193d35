"""
bwmesh Example: Basic Triangulation

This example demonstrates the basic usage of bwmesh:
1. Triangulate a random point cloud
2. Inspect the vertex and index buffers
3. Validate the result and print insertion statistics
4. Render the mesh

Perfect for: First-time users, quick start guide
"""

import numpy as np
import matplotlib.pyplot as plt

from bwmesh import (
    TriangleMesh, MeshConfig, check_delaunay, check_mesh_conformity,
    configure_logging, format_stats_table, plot_mesh,
)


def main():
    print("=" * 60)
    print("bwmesh Example: Basic Triangulation")
    print("=" * 60)
    configure_logging('INFO')

    # Step 1: Triangulate
    print("\n[1] Triangulating 200 random points...")
    rng = np.random.default_rng(0)
    points = rng.random((200, 2))
    mesh = TriangleMesh(points, MeshConfig())

    # Step 2: Buffers
    print("\n[2] Output buffers...")
    print(f"  vertices: {len(mesh.vertices)}")
    print(f"  indices:  {len(mesh.indices)} ({len(mesh.indices) // 3} triangles)")

    # Step 3: Validation and stats
    print("\n[3] Checking the mesh...")
    pts, tris = mesh.points_array(), mesh.triangles_array()
    ok_conf, msgs = check_mesh_conformity(pts, tris)
    ok_del, del_msgs = check_delaunay(pts, tris)
    print(f"  conforming: {ok_conf} {msgs if msgs else ''}")
    print(f"  delaunay:   {ok_del} {del_msgs[:3] if del_msgs else ''}")
    print()
    print(format_stats_table(mesh.stats.to_dict()))

    # Step 4: Render
    print("\n[4] Rendering...")
    ax = plot_mesh(mesh, title=f"{len(mesh.triangles)} triangles")
    plt.show()
    plt.close(ax.figure)


if __name__ == "__main__":
    main()
