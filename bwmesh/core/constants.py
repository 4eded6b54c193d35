"""Central numeric constants for the triangulation core and its diagnostics.

Coordinates are stored in single precision. Circumcircles, distances and the
super-triangle are evaluated in double precision from those stored values;
the diagnostic tolerances below are only used by ``conformity`` checks,
never by the Bowyer-Watson loop itself (which compares exactly).
"""
from __future__ import annotations

import numpy as np

# Coordinate storage precision
COORD_DTYPE = np.float32
# Working precision for derived geometry
WIDE_DTYPE = np.float64

# Super-triangle expansion multiplier
SUPER_TRIANGLE_FACTOR = WIDE_DTYPE(np.pi)

# Diagnostic tolerances
EPS_AREA: float = 1e-12        # minimum positive (absolute) triangle area
EPS_INCIRCLE: float = 1e-4     # relative slack for empty-circumcircle checks

__all__ = [
    'COORD_DTYPE',
    'WIDE_DTYPE',
    'SUPER_TRIANGLE_FACTOR',
    'EPS_AREA',
    'EPS_INCIRCLE',
]
