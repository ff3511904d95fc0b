#!/usr/bin/env python3
"""
CLI: Remove XML comments from every SVG in a directory (in place).
Usage:
  python scripts/strip_svg_comments.py assets
  python scripts/strip_svg_comments.py assets --dry-run
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse

from kiroween.markup import strip_comments


def main() -> int:
    parser = argparse.ArgumentParser(description="Strip XML comments from SVG files.")
    parser.add_argument("directory", type=Path, help="Directory containing .svg files.")
    parser.add_argument("--dry-run", action="store_true", help="Report what would change; write nothing.")
    args = parser.parse_args()

    if not args.directory.is_dir():
        print(f"✗ Not a directory: {args.directory}")
        return 1
    files = sorted(args.directory.glob("*.svg"))
    print(f"Removing XML comments from {len(files)} SVG files...\n")
    for path in files:
        content = path.read_text(encoding="utf-8")
        cleaned = strip_comments(content)
        if not args.dry_run and cleaned != content:
            path.write_text(cleaned, encoding="utf-8")
        print(f"✓ {path.name} - Removed {len(content) - len(cleaned)} characters")
    print("\n✓ All SVG files cleaned!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
