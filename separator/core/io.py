"""Lightweight polygon file I/O.

Provides a reader for polygon outlines and a writer for decomposition
results without heavy dependencies:
- read_polygon: JSON (``[[x, y], ...]`` or ``{"vertices": [...]}``) or plain
  text with one ``x y`` pair per line and an optional leading count line
- write_pieces: JSON ``{"pieces": [[[x, y], ...], ...]}``

All functions use the package's canonical polygon format, an (N, 2)
float64 array.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence, Union

import numpy as np

from .geometry import as_polygon

__all__ = ['read_polygon', 'parse_polygon_text', 'write_pieces', 'read_pieces']

PathLike = Union[str, Path]


def parse_polygon_text(text: str) -> np.ndarray:
    """Parse whitespace separated ``x y`` lines.

    Blank lines and ``#`` comments are ignored. A first line holding a single
    integer is taken as the vertex count and checked against the data.
    """
    rows = []
    expected = None
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split('#', 1)[0].strip()
        if not line:
            continue
        parts = line.replace(',', ' ').split()
        if not rows and expected is None and len(parts) == 1:
            try:
                expected = int(parts[0])
            except ValueError:
                raise ValueError(f"line {lineno}: expected a vertex count, got {line!r}") from None
            continue
        if len(parts) != 2:
            raise ValueError(f"line {lineno}: expected 'x y', got {line!r}")
        try:
            rows.append((float(parts[0]), float(parts[1])))
        except ValueError:
            raise ValueError(f"line {lineno}: non-numeric coordinates {line!r}") from None
    if expected is not None and expected != len(rows):
        raise ValueError(f"header announces {expected} vertices but {len(rows)} were read")
    return as_polygon(rows)


def read_polygon(filepath: PathLike) -> np.ndarray:
    """Read a polygon outline from ``filepath``.

    Files ending in ``.json`` are parsed as JSON, anything else as text.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist
    ValueError
        If the content is not a valid polygon
    """
    path = Path(filepath)
    text = path.read_text(encoding='utf-8')
    if path.suffix.lower() != '.json':
        return parse_polygon_text(text)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path}: invalid JSON: {exc}") from exc
    if isinstance(data, dict):
        if 'vertices' not in data:
            raise ValueError(f"{path}: JSON object has no 'vertices' key")
        data = data['vertices']
    return as_polygon(data)


def write_pieces(filepath: PathLike, pieces: Sequence) -> Path:
    """Write convex pieces to a JSON file and return its path."""
    path = Path(filepath)
    payload = {'pieces': [np.asarray(p, dtype=np.float64).tolist() for p in pieces]}
    path.write_text(json.dumps(payload, indent=2), encoding='utf-8')
    return path


def read_pieces(filepath: PathLike) -> List[np.ndarray]:
    """Read pieces written by :func:`write_pieces`."""
    path = Path(filepath)
    data = json.loads(path.read_text(encoding='utf-8'))
    if not isinstance(data, dict) or 'pieces' not in data:
        raise ValueError(f"{path}: expected an object with a 'pieces' key")
    return [as_polygon(p) for p in data['pieces']]
