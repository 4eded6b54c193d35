"""Matplotlib rendering helper for triangle meshes."""
from __future__ import annotations

import os as _os

import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from .logging_utils import get_logger

logger = get_logger('bwmesh.viz')

__all__ = ['plot_mesh']


def plot_mesh(mesh, ax=None, show_points: bool = True, title=None):
    """Draw ``mesh`` with ``triplot`` and return the Axes.

    Args:
        mesh: TriangleMesh-like exposing ``points_array()`` and ``triangles_array()``
        ax: Axes to draw into; a new figure is created when None
        show_points: scatter all input vertices, including ones no triangle uses
        title: optional Axes title
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))
    pts = np.asarray(mesh.points_array(), dtype=np.float64)
    tris = mesh.triangles_array()
    if len(tris):
        ax.triplot(pts[:, 0], pts[:, 1], tris, lw=0.6)
    else:
        logger.info("plot_mesh: no triangles to draw (%d vertices)", len(pts))
    if show_points and len(pts):
        # scale markers by vertex count
        s = max(0.6, min(12.0, 200.0 / float(len(pts))))
        ax.scatter(pts[:, 0], pts[:, 1], s=s, color='black')
    ax.set_aspect('equal')
    if title:
        ax.set_title(title)
    return ax
