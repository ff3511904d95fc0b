#!/usr/bin/env python3
"""
CLI: Generate the background pattern tile from the icon assets.
Usage:
  python scripts/generate_pattern.py
  python scripts/generate_pattern.py --seed 42 --grid-size 5
  python scripts/generate_pattern.py --output /tmp/pattern.svg --css
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from kiroween.background.css import render_background_css
from kiroween.color import PALETTE
from kiroween.config import get_css_path, get_pattern_output, load_config, resolve_path
from kiroween.markup import MarkupShapeError
from kiroween.pattern import PatternError, generate_pattern, load_asset_library, write_pattern
from kiroween.validation import lint_svg, validate_pattern_colors

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Combine the icon assets into a seamless, palette-colored background tile."
    )
    parser.add_argument("--seed", type=int, default=None, help="Placement seed (default: from config, 12345).")
    parser.add_argument("--grid-size", type=int, default=None, help="Elements per row/column (default: 4).")
    parser.add_argument("--tile-size", type=int, default=None, help="Tile width/height (default: 400).")
    parser.add_argument("--output", "-o", type=Path, default=None, help="Output SVG path.")
    parser.add_argument(
        "--css",
        action="store_true",
        help="Also (re)write the background stylesheet with the configured opacity.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML.")
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(
        level=config.get("logging", {}).get("level", "INFO"),
        format="%(levelname)s: %(message)s",
    )
    pattern_cfg = config.get("pattern", {})
    seed = args.seed if args.seed is not None else int(pattern_cfg.get("seed", 12345))
    grid_size = args.grid_size if args.grid_size is not None else int(pattern_cfg.get("grid_size", 4))
    tile_size = args.tile_size if args.tile_size is not None else int(pattern_cfg.get("tile_size", 400))
    output = args.output or get_pattern_output(config)

    print("Generating background pattern...")
    try:
        assets = load_asset_library(resolve_path(pattern_cfg.get("asset_dir", "assets")), pattern_cfg.get("assets", []))
        document = generate_pattern(
            seed,
            assets,
            PALETTE,
            grid_size,
            tile_size,
            element_opacity=float(pattern_cfg.get("element_opacity", 0.15)),
        )
    except (PatternError, MarkupShapeError) as e:
        logger.error("Error generating pattern: %s", e)
        return 1

    svg = document.to_svg()
    lint = lint_svg(svg)
    colors = validate_pattern_colors(svg)
    for message in lint.failed + colors.failed:
        logger.error("%s", message)
    if not (lint.ok and colors.ok):
        return 1

    path = write_pattern(document, output)
    if args.css:
        bg = config.get("background", {})
        css_path = get_css_path(config)
        css_path.parent.mkdir(parents=True, exist_ok=True)
        css_path.write_text(
            render_background_css(
                tile_size=tile_size,
                opacity=float(bg.get("opacity", 0.05)),
                blend_mode=bg.get("blend_mode", "lighten"),
            ),
            encoding="utf-8",
        )
        print(f"  Stylesheet: {css_path}")

    print("Background pattern generated.")
    print(f"  Output: {path}")
    print(f"  Size: {tile_size}x{tile_size}")
    print(f"  Elements: {len(document.elements)} icons (seed {seed})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
