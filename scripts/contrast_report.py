#!/usr/bin/env python3
"""
CLI: WCAG contrast of the palette against the editor background, plus the nearest palette
color for any extra colors given on the command line.
Usage:
  python scripts/contrast_report.py
  python scripts/contrast_report.py --background "#1A0A1F" --matrix
  python scripts/contrast_report.py --match "#FF0000" "#00FF00"
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse

from kiroween.color import (
    DARKEST,
    MIN_CONTRAST_RATIO,
    PALETTE,
    InvalidColor,
    contrast_matrix,
    contrast_report,
    nearest_palette_color,
    normalize_hex,
)


def main() -> int:
    parser = argparse.ArgumentParser(description="Palette contrast report (WCAG AA).")
    parser.add_argument(
        "--background",
        default=PALETTE[DARKEST],
        help=f"Editor background color (default: {DARKEST} {PALETTE[DARKEST]}).",
    )
    parser.add_argument("--matrix", action="store_true", help="Also print the pairwise contrast matrix.")
    parser.add_argument("--match", nargs="*", default=[], help="Colors to match to the nearest palette entry.")
    args = parser.parse_args()

    try:
        background = normalize_hex(args.background)
        entries = contrast_report(background)
    except InvalidColor as e:
        print(f"✗ {e}")
        return 1

    print(f"Contrast against {background} (minimum {MIN_CONTRAST_RATIO}:1)")
    for entry in entries:
        mark = "✓" if entry.passes else "✗"
        print(f"  {entry.name:<13} {entry.color}  {entry.ratio:5.2f}:1 {mark}")

    if args.matrix:
        names = list(PALETTE)
        matrix = contrast_matrix()
        print("\nPairwise contrast")
        print(" " * 14 + "".join(f"{n[:6]:>8}" for n in names))
        for name, row in zip(names, matrix):
            print(f"  {name:<12}" + "".join(f"{v:8.2f}" for v in row))

    status = 0
    for color in args.match:
        try:
            nearest = nearest_palette_color(color)
        except InvalidColor as e:
            print(f"✗ {e}")
            status = 1
            continue
        print(f"  {normalize_hex(color)} -> {nearest.name} ({nearest.color}), distance {nearest.distance:.2f}")
    return status


if __name__ == "__main__":
    sys.exit(main())
