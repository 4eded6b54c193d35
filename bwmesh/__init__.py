"""Public package API for bwmesh, a Bowyer-Watson Delaunay triangulator.

This facade provides a flat import surface on top of the implementation
package ``bwmesh.core``. The plotting helper is loaded lazily so that
``import bwmesh`` does not import matplotlib.

Example
-------
    from bwmesh import TriangleMesh

    mesh = TriangleMesh([(0, 0), (1, 0), (0.5, 0.866)])
    mesh.indices  # e.g. (0, 1, 2)
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _PNF
    __version__ = _pkg_version("bwmesh")
except _PNF:  # pragma: no cover - source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.constants import COORD_DTYPE, WIDE_DTYPE, SUPER_TRIANGLE_FACTOR, EPS_AREA, EPS_INCIRCLE
from .core.geometry import Point, as_points, points_to_array
from .core.edge import Edge
from .core.triangle import Triangle
from .core.super_triangle import SuperTriangleBuilder
from .core.config import MeshConfig
from .core.stats import InsertionStats, format_stats_table
from .core.logging_utils import configure_logging, get_logger
from .core.mesh import TriangleMesh, triangulate
from .core.conformity import check_mesh_conformity, check_delaunay


def plot_mesh(*args, **kwargs):
    """Lazy proxy for :func:`bwmesh.core.visualization.plot_mesh`."""
    return _imp('bwmesh.core.visualization').plot_mesh(*args, **kwargs)


__all__ = [
    '__version__',
    # primitives
    'Point', 'Edge', 'Triangle', 'as_points', 'points_to_array',
    # triangulation
    'SuperTriangleBuilder', 'TriangleMesh', 'triangulate', 'MeshConfig',
    # stats / diagnostics
    'InsertionStats', 'format_stats_table', 'check_mesh_conformity', 'check_delaunay',
    # logging
    'configure_logging', 'get_logger',
    # rendering
    'plot_mesh',
    # constants
    'COORD_DTYPE', 'WIDE_DTYPE', 'SUPER_TRIANGLE_FACTOR', 'EPS_AREA', 'EPS_INCIRCLE',
]
