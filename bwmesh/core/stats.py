"""Insertion statistics for a triangulation run and a small text formatter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class InsertionStats:
    points_inserted: int = 0
    bad_triangles_removed: int = 0
    boundary_edges: int = 0
    # boundary edges dropped by de-duplication before re-filling the cavity
    duplicate_boundary_edges: int = 0
    triangles_created: int = 0
    super_triangles_discarded: int = 0
    index_misses: int = 0
    max_cavity_size: int = 0
    # Timing (seconds)
    time_total: float = 0.0

    def record_insertion(self, n_bad: int, n_boundary: int, n_duplicates: int) -> None:
        self.points_inserted += 1
        self.bad_triangles_removed += n_bad
        self.boundary_edges += n_boundary
        self.duplicate_boundary_edges += n_duplicates
        self.triangles_created += n_boundary - n_duplicates
        if n_bad > self.max_cavity_size:
            self.max_cavity_size = n_bad

    def to_dict(self) -> Dict[str, Any]:
        return {
            'points_inserted': self.points_inserted,
            'bad_triangles_removed': self.bad_triangles_removed,
            'boundary_edges': self.boundary_edges,
            'duplicate_boundary_edges': self.duplicate_boundary_edges,
            'triangles_created': self.triangles_created,
            'super_triangles_discarded': self.super_triangles_discarded,
            'index_misses': self.index_misses,
            'max_cavity_size': self.max_cavity_size,
            'mean_cavity_size': (self.bad_triangles_removed / self.points_inserted) if self.points_inserted else 0.0,
            'time_total': self.time_total,
        }


def format_stats_table(stats_dict) -> str:
    """Return a human readable two-column table of a ``to_dict()`` mapping."""
    if not stats_dict:
        return "<no stats>"
    rows = []
    for key, value in stats_dict.items():
        if isinstance(value, float):
            text = f"{value:.6g}"
        else:
            text = str(value)
        rows.append((key, text))
    key_w = max(len("stat"), max(len(k) for k, _ in rows))
    val_w = max(len("value"), max(len(v) for _, v in rows))
    lines = ["stat".ljust(key_w) + " " + "value".rjust(val_w), "-" * (key_w + val_w + 1)]
    lines += [k.ljust(key_w) + " " + v.rjust(val_w) for k, v in rows]
    return "\n".join(lines)


__all__ = ['InsertionStats', 'format_stats_table']
