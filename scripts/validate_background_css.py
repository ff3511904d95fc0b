#!/usr/bin/env python3
"""
CLI: Verify the background stylesheet (tiling, opacity range, blend mode, selector,
relative pattern URL).
Usage:
  python scripts/validate_background_css.py
  python scripts/validate_background_css.py --css themes/kiroween-background.css
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse

from kiroween.config import get_css_path, get_pattern_output, load_config
from kiroween.validation import validate_background_css


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate the Kiroween background CSS.")
    parser.add_argument("--css", type=Path, default=None, help="Stylesheet path (default: from config).")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML.")
    args = parser.parse_args()

    config = load_config(args.config)
    css_path = args.css or get_css_path(config)
    if not css_path.exists():
        print(f"✗ Stylesheet not found: {css_path}")
        return 1

    print("Validating Kiroween Background CSS...\n")
    report = validate_background_css(
        css_path.read_text(encoding="utf-8"),
        pattern_name=get_pattern_output(config).name,
    )
    for line in report.lines():
        print(line)
    print("\n" + ("✓ All validations passed!" if report.ok else "✗ Some validations failed"))
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
