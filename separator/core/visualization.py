"""Plot helpers for inspecting a decomposition.

Kept out of the core modules so that importing the decomposer never pulls
in matplotlib.
"""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .geometry import as_polygon, reflex_vertices
from .logging_utils import get_logger

logger = get_logger('separator.viz')

__all__ = ['plot_decomposition']


def plot_decomposition(polygon, pieces, outname="decomposition.png", title=None,
                       mark_reflex: bool = True, label_pieces: bool = False):
    """Draw the input outline and the convex pieces into an image file.

    Args:
        polygon: (N,2) input outline
        pieces: iterable of (K,2) convex pieces
        outname: output image path
        title: optional plot title; defaults to a piece count summary
        mark_reflex: if True, mark the reflex vertices of the input in red
        label_pieces: if True, write each piece's index at its centroid
    """
    src = as_polygon(polygon)
    pieces = [np.asarray(p, dtype=np.float64) for p in pieces]
    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        _draw(ax, src, pieces, title, mark_reflex, label_pieces)
        fig.savefig(outname, dpi=150)
    finally:
        plt.close(fig)
    logger.debug('wrote decomposition plot to %s', outname)
    return outname


def _draw(ax, src, pieces, title, mark_reflex, label_pieces):
    cmap = plt.get_cmap('tab20')
    for idx, piece in enumerate(pieces):
        ax.fill(piece[:, 0], piece[:, 1], color=cmap(idx % 20), alpha=0.45, linewidth=0)
        xs = list(piece[:, 0]) + [piece[0, 0]]
        ys = list(piece[:, 1]) + [piece[0, 1]]
        ax.plot(xs, ys, color='0.3', linewidth=0.8)
        if label_pieces:
            c = piece.mean(axis=0)
            ax.text(c[0], c[1], str(idx), ha='center', va='center', fontsize=8)
    xs = list(src[:, 0]) + [src[0, 0]]
    ys = list(src[:, 1]) + [src[0, 1]]
    ax.plot(xs, ys, color=(0.85, 0.2, 0.2), linewidth=1.8)
    # Scale marker size down for dense outlines so points don't dominate
    s = max(0.6, min(12.0, 200.0 / float(max(1, src.shape[0]))))
    ax.scatter(src[:, 0], src[:, 1], s=s, color='black', zorder=3)
    if mark_reflex:
        reflex = reflex_vertices(src)
        if reflex:
            ax.scatter(src[reflex, 0], src[reflex, 1], s=4 * s, color='red', zorder=4)
    ax.set_title(title or f'{len(pieces)} convex pieces')
    ax.set_aspect('equal')
