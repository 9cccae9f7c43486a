"""Decomposition statistics data structure and presentation helper."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class DecompositionStats:
    splits: int = 0
    pieces: int = 0
    max_worklist: int = 0
    input_vertices: int = 0
    output_vertices: int = 0
    # Timing (seconds)
    time_total: float = 0.0

    def reset(self) -> None:
        self.splits = 0
        self.pieces = 0
        self.max_worklist = 0
        self.input_vertices = 0
        self.output_vertices = 0
        self.time_total = 0.0

    def to_dict(self) -> Dict[str, Any]:  # pragma: no cover - simple mapping
        return {
            'splits': self.splits,
            'pieces': self.pieces,
            'max_worklist': self.max_worklist,
            'input_vertices': self.input_vertices,
            'output_vertices': self.output_vertices,
            'time_total': self.time_total,
            'vertices_per_piece': (self.output_vertices / self.pieces) if self.pieces else 0.0,
        }


def format_stats(stats: DecompositionStats) -> str:
    """Return a one-line human readable summary."""
    d = stats.to_dict()
    return (
        f"pieces={d['pieces']} splits={d['splits']} max_worklist={d['max_worklist']} "
        f"vertices={d['input_vertices']}->{d['output_vertices']} "
        f"time_ms={d['time_total'] * 1000.0:.3f}"
    )


__all__ = ['DecompositionStats', 'format_stats']
