"""
Background pattern: seeded placement of recolored icons on a seamless tile.
"""

from .lcg import cell_fraction, cell_fractions, next_seed
from .compositor import (
    ElementConfig,
    MissingAssetError,
    PatternError,
    TileDocument,
    apply_svg_color,
    element_config,
    generate_pattern,
    pattern_colors,
    write_pattern,
)
from .assets import load_asset_library

__all__ = [
    "cell_fraction",
    "cell_fractions",
    "next_seed",
    "ElementConfig",
    "MissingAssetError",
    "PatternError",
    "TileDocument",
    "apply_svg_color",
    "element_config",
    "generate_pattern",
    "pattern_colors",
    "write_pattern",
    "load_asset_library",
]
