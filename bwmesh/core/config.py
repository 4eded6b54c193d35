"""Configuration object for a triangulation run."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from .constants import SUPER_TRIANGLE_FACTOR


@dataclass
class MeshConfig:
    """Options for :class:`bwmesh.core.mesh.TriangleMesh`.

    Attributes
    ----------
    super_triangle_factor : float
        Expansion multiplier of the seed super-triangle. The default (pi)
        is the canonical multiplier the triangulation fixtures rely on.
    collect_stats : bool
        Record :class:`InsertionStats` while inserting points.
    log_level : str or int, optional
        Level for the mesh logger; None inherits from the ``bwmesh`` logger.
    """
    super_triangle_factor: float = SUPER_TRIANGLE_FACTOR
    collect_stats: bool = True
    log_level: Optional[Union[str, int]] = None

    def __post_init__(self):
        factor = float(self.super_triangle_factor)
        if not math.isfinite(factor) or factor <= 0.0:
            raise ValueError(f"super_triangle_factor must be positive and finite, got {self.super_triangle_factor!r}")


__all__ = ['MeshConfig']
