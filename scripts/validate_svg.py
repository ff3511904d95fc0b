#!/usr/bin/env python3
"""
CLI: Lint an SVG (default: the generated background pattern) for duplicate attributes,
unclosed tags and a missing root/namespace/viewBox, and check its colors are from the palette.
Usage:
  python scripts/validate_svg.py
  python scripts/validate_svg.py path/to/file.svg --no-palette
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse

from kiroween.config import get_pattern_output, load_config
from kiroween.validation import lint_svg, validate_pattern_colors


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate an SVG file.")
    parser.add_argument("svg", type=Path, nargs="?", default=None, help="SVG to validate (default: generated pattern).")
    parser.add_argument("--no-palette", action="store_true", help="Skip the palette color check.")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML.")
    args = parser.parse_args()

    path = args.svg or get_pattern_output(load_config(args.config))
    if not path.exists():
        print(f"Error: {path} not found!")
        print("Run: python scripts/generate_pattern.py")
        return 1

    print(f"Validating: {path}")
    print("=" * 60)
    text = path.read_text(encoding="utf-8")
    report = lint_svg(text)
    if not args.no_palette:
        report.merge(validate_pattern_colors(text))
    for line in report.lines():
        print(f"  {line}")

    print("\n" + "=" * 60)
    if report.ok:
        print("✓ SVG validation passed!")
        return 0
    print("✗ SVG validation failed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
