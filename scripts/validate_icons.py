#!/usr/bin/env python3
"""
CLI: Check the icon assets against the asset contract (24x24 viewBox, currentColor stroke,
fill none, stroke-width 2, no gradients, no duplicate attributes).
Usage:
  python scripts/validate_icons.py
  python scripts/validate_icons.py --dir assets --quiet
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse

from kiroween.config import load_config, resolve_path
from kiroween.validation import validate_icon_directory


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate the icon SVG assets.")
    parser.add_argument("--dir", type=Path, default=None, help="Icon directory (default: from config).")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only print failures and the summary.")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML.")
    args = parser.parse_args()

    config = load_config(args.config)
    icons_cfg = config.get("icons", {})
    directory = args.dir or resolve_path(icons_cfg.get("dir", "assets"))

    print(f"\n=== Checking icons in {directory} ===")
    report = validate_icon_directory(directory, icons_cfg.get("required", []))
    for line in report.lines():
        if args.quiet and line.startswith("✓"):
            continue
        print(line)

    print("\n=== Validation Summary ===")
    print(report.summary())
    if report.ok:
        print("✓ All validations passed!")
        return 0
    print("✗ Some validations failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
