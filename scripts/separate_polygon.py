#!/usr/bin/env python3
"""Decompose a polygon file into convex pieces.

Reads a clockwise outline (JSON or ``x y`` text), validates it, decomposes
it and reports the pieces.

Examples:
  python scripts/separate_polygon.py shape.json
  python scripts/separate_polygon.py shape.txt --scale 30 --out pieces.json
  python scripts/separate_polygon.py shape.json --plot pieces.png --log-level DEBUG
"""
from __future__ import annotations

import argparse
import sys

from separator import (
    DecompositionFailure, SeparatorConfig, ValidationStatus, check_decomposition,
    configure_logging, read_polygon, separate, validation_report, write_pieces,
)
from separator.core.constants import EPS_MATCH, DEFAULT_SCALE, DEFAULT_PIXELS_PER_UNIT
from separator.core.stats import DecompositionStats, format_stats


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument('polygon', help='Polygon file (.json or whitespace separated text)')
    p.add_argument('--scale', type=float, default=DEFAULT_SCALE, help=f'Scale applied before decomposing (default: {DEFAULT_SCALE})')
    p.add_argument('--ppu', type=float, default=DEFAULT_PIXELS_PER_UNIT, help='Pixels per unit divisor applied to the output')
    p.add_argument('--eps', type=float, default=EPS_MATCH, help=f'Absolute tolerance in scaled units (default: {EPS_MATCH})')
    p.add_argument('--force', action='store_true', help='Decompose even if validation reports a problem')
    p.add_argument('--out', help='Write pieces to this JSON file')
    p.add_argument('--plot', help='Write a PNG of the decomposition')
    p.add_argument('--log-level', default='WARNING', help='Logging level for the separator logger')
    args = p.parse_args(argv)

    configure_logging(args.log_level)
    try:
        poly = read_polygon(args.polygon)
    except (OSError, ValueError) as e:
        print('[ERROR] could not read polygon:', e)
        return 2

    cfg = SeparatorConfig(eps=args.eps, scale=args.scale, pixels_per_unit=args.ppu)
    report = validation_report(poly * cfg.scale, eps=cfg.eps)
    if report.status != ValidationStatus.OK:
        print(f'[WARN] validation: {report.status.name}')
        for msg in report.messages():
            print('  -', msg)
        if not args.force:
            print('  Fix the outline or rerun with --force.')
            return 2

    stats = DecompositionStats()
    try:
        pieces = separate(poly, cfg, stats=stats)
    except DecompositionFailure as e:
        print('[ERROR] decomposition failed:', e)
        return 1

    print(f'[OK] {format_stats(stats)}')
    for idx, piece in enumerate(pieces):
        print(f'  piece {idx}: {piece.shape[0]} vertices')
    ok, msgs = check_decomposition(poly / cfg.pixels_per_unit, pieces)
    if not ok:
        print('[WARN] decomposition check:')
        for msg in msgs:
            print('  -', msg)

    if args.out:
        print('[OK] wrote', write_pieces(args.out, pieces))
    if args.plot:
        from separator import plot_decomposition
        print('[OK] wrote', plot_decomposition(poly / cfg.pixels_per_unit, pieces, args.plot))
    return 0


if __name__ == '__main__':
    sys.exit(main())
