"""
Background pattern compositor: places recolored icons on a grid to build one seamless
tile. Pure over its inputs (asset markup, palette, seed); file I/O is limited to
write_pattern.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping

from ..color.palette import DARKEST, PALETTE
from ..color.utils import normalize_hex
from ..markup import extract_svg_content
from .lcg import cell_fractions

logger = logging.getLogger(__name__)

DEFAULT_SEED = 12345
DEFAULT_GRID_SIZE = 4
DEFAULT_TILE_SIZE = 400
ELEMENT_OPACITY = 0.15
JITTER = 15

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Primitive shapes that get explicit paint; circles are filled, the rest are outlines
_SHAPE_TAG = re.compile(r"<(path|circle|ellipse|rect|line|polyline|polygon)\b([^>]*?)(/?)>")
_PAINT_ATTR = re.compile(r'\s(?:stroke|fill)="[^"]*"')
_FILL_PLACEHOLDER = re.compile(r'\sfill="currentColor"')


class PatternError(Exception):
    """Tile generation cannot proceed with the given inputs."""


class MissingAssetError(PatternError):
    """An icon asset is missing, unreadable or empty."""
    def __init__(self, asset: str, reason: str = "not found"):
        super().__init__(f"Asset {reason}: {asset}")
        self.asset = asset


def format_number(value: float) -> str:
    """Stable text for transform values: integral floats drop the '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


@dataclass(frozen=True)
class ElementConfig:
    """One placed icon in the tile."""

    row: int
    col: int
    asset: str
    color: str
    x: float
    y: float
    rotation: int  # degrees, 0-359
    scale: float   # 0.4-0.7

    @property
    def transform(self) -> str:
        return (
            f"translate({format_number(self.x)}, {format_number(self.y)}) "
            f"rotate({self.rotation}) scale({format_number(self.scale)})"
        )


@dataclass
class TileDocument:
    """A generated tile: element placements plus their rendered groups."""

    seed: int
    grid_size: int
    tile_size: int
    elements: list[ElementConfig] = field(default_factory=list)
    groups: list[str] = field(default_factory=list)

    def to_svg(self) -> str:
        size = self.tile_size
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="{SVG_NAMESPACE}" viewBox="0 0 {size} {size}" width="{size}" height="{size}">',
            "  <defs>",
            "    <style>",
            "      * { shape-rendering: geometricPrecision; }",
            "    </style>",
            "  </defs>",
            f'  <rect width="{size}" height="{size}" fill="none"/>',
            *self.groups,
            "</svg>",
        ]
        return "\n".join(lines) + "\n"


def pattern_colors(palette: Mapping[str, str] = PALETTE, exclude: Iterable[str] = (DARKEST,)) -> list[str]:
    """Palette colors usable for elements, in palette order."""
    skip = set(exclude)
    return [normalize_hex(c) for name, c in palette.items() if name not in skip]


def apply_svg_color(content: str, color: str) -> str:
    """
    Recolor icon markup: give every primitive shape an explicit stroke and fill
    (replacing any it had, so attributes are never duplicated), then resolve the
    remaining currentColor placeholders. A shape filled with currentColor keeps a
    fill in the element color.
    """

    def _paint(match: re.Match) -> str:
        tag, attrs, close = match.groups()
        if _FILL_PLACEHOLDER.search(attrs):
            fill = color
        else:
            fill = color if tag == "circle" else "none"
        attrs = _PAINT_ATTR.sub("", attrs)
        return f'<{tag} stroke="{color}" fill="{fill}"{attrs}{close}>'

    colored = _SHAPE_TAG.sub(_paint, content)
    colored = colored.replace('stroke="currentColor"', f'stroke="{color}"')
    return colored.replace('fill="currentColor"', f'fill="{color}"')


def element_config(
    row: int,
    col: int,
    r: float,
    asset_names: list[str],
    colors: list[str],
    cell_size: float,
) -> ElementConfig:
    """Derive one element's asset, color, position, rotation and scale from its fraction r."""
    asset_index = math.floor(r * len(asset_names))
    color_index = math.floor((r * 7919) % len(colors))
    offset_x = ((r * 1000) % (2 * JITTER)) - JITTER
    offset_y = ((r * 2000) % (2 * JITTER)) - JITTER
    return ElementConfig(
        row=row,
        col=col,
        asset=asset_names[asset_index],
        color=colors[color_index],
        x=col * cell_size + cell_size / 2 + offset_x,
        y=row * cell_size + cell_size / 2 + offset_y,
        rotation=math.floor((r * 3000) % 360),
        scale=0.4 + ((r * 5000) % 30) / 100,
    )


def render_group(element: ElementConfig, content: str, opacity: float = ELEMENT_OPACITY) -> str:
    """Wrap recolored content in a positioned, faded <g>."""
    body = "\n".join("    " + line.strip() for line in content.splitlines() if line.strip())
    return (
        f'  <g transform="{element.transform}" opacity="{format_number(opacity)}">\n'
        f"{body}\n"
        "  </g>"
    )


def generate_pattern(
    seed: int,
    assets: Mapping[str, str],
    palette: Mapping[str, str] = PALETTE,
    grid_size: int = DEFAULT_GRID_SIZE,
    tile_size: int = DEFAULT_TILE_SIZE,
    *,
    element_opacity: float = ELEMENT_OPACITY,
    exclude: Iterable[str] = (DARKEST,),
) -> TileDocument:
    """
    Build the tile: for each cell (row-major) advance the seed, derive the element,
    recolor its icon and append the group. Same inputs give byte-identical output.
    """
    if not assets:
        raise PatternError("generate_pattern: asset library cannot be empty")
    if grid_size < 1:
        raise PatternError(f"generate_pattern: grid_size must be >= 1, got {grid_size}")
    if tile_size <= 0:
        raise PatternError(f"generate_pattern: tile_size must be > 0, got {tile_size}")
    colors = pattern_colors(palette, exclude)
    if not colors:
        raise PatternError("generate_pattern: palette has no usable colors")

    # Resolve every asset up front; a bad asset aborts the run even if it is never picked
    contents: dict[str, str] = {}
    for name, text in assets.items():
        if not text or not text.strip():
            raise MissingAssetError(name, "is empty")
        contents[name] = extract_svg_content(text)
    asset_names = list(contents)

    cell_size = tile_size / grid_size
    document = TileDocument(seed=seed, grid_size=grid_size, tile_size=tile_size)
    fractions = cell_fractions(seed, grid_size * grid_size)
    for row in range(grid_size):
        for col in range(grid_size):
            r = next(fractions)
            element = element_config(row, col, r, asset_names, colors, cell_size)
            colored = apply_svg_color(contents[element.asset], element.color)
            document.elements.append(element)
            document.groups.append(render_group(element, colored, element_opacity))
    logger.debug("Generated %d elements (seed=%s, grid=%d)", len(document.elements), seed, grid_size)
    return document


def write_pattern(document: TileDocument, output_path: Path) -> Path:
    """Write the tile SVG (UTF-8). Returns the path written."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document.to_svg(), encoding="utf-8")
    logger.info("Wrote background pattern: %s", path)
    return path
