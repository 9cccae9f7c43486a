"""
Separator Example 1: Basic Separation

This example demonstrates the most basic usage of the separator:
1. Describe a concave outline in clockwise order
2. Validate it
3. Decompose it into convex pieces
4. Check and visualize the result

Perfect for: First-time users, quick start guide
"""

from separator import (
    ValidationStatus, check_decomposition, decompose_with_stats, plot_decomposition, validate,
)
from separator.core.stats import format_stats


def main():
    print("=" * 60)
    print("Separator Example 1: Basic Separation")
    print("=" * 60)

    # Step 1: An L-shaped outline, clockwise with the y axis pointing up
    print("\n[1] Creating outline...")
    outline = [
        (0.0, 0.0),    # Bottom-left
        (0.0, 10.0),   # Top-left
        (5.0, 10.0),   # Top of the vertical bar
        (5.0, 5.0),    # Inner (reflex) corner
        (10.0, 5.0),   # Right end of the foot
        (10.0, 0.0),   # Bottom-right
    ]
    print(f"  Outline: {len(outline)} vertices")

    # Step 2: Validate before decomposing
    print("\n[2] Validating...")
    status = validate(outline)
    print(f"  Status: {status.name}")
    if status != ValidationStatus.OK:
        print("  Outline is not usable, stopping.")
        return

    # Step 3: Decompose
    print("\n[3] Decomposing...")
    pieces, stats = decompose_with_stats(outline)
    print(f"  {format_stats(stats)}")
    for idx, piece in enumerate(pieces):
        print(f"  piece {idx}: {piece.tolist()}")

    # Step 4: Check and plot
    print("\n[4] Checking result...")
    ok, msgs = check_decomposition(outline, pieces)
    print(f"  Check passed: {ok}")
    for msg in msgs:
        print(f"  - {msg}")
    out = plot_decomposition(outline, pieces, outname="basic_separation.png")
    print(f"  Plot written to {out}")


if __name__ == "__main__":
    main()
