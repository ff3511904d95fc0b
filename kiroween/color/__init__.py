"""
Color science: palette constants, WCAG contrast, palette matching, opacity bounds.
"""

from .palette import (
    DARKEST,
    MIN_CONTRAST_RATIO,
    OPACITY_MAX,
    OPACITY_MIN,
    PALETTE,
)
from .utils import (
    RGB,
    ContrastEntry,
    InvalidColor,
    InvalidOpacity,
    NearestColor,
    PaletteCheck,
    clamp_opacity,
    contrast_matrix,
    contrast_ratio,
    contrast_report,
    extract_color_tokens,
    extract_colors_from_svg,
    hex_to_rgb,
    is_in_palette,
    is_opacity_valid,
    meets_contrast,
    nearest_palette_color,
    normalize_hex,
    relative_luminance,
    validate_color_palette,
)

__all__ = [
    "DARKEST",
    "MIN_CONTRAST_RATIO",
    "OPACITY_MAX",
    "OPACITY_MIN",
    "PALETTE",
    "RGB",
    "ContrastEntry",
    "InvalidColor",
    "InvalidOpacity",
    "NearestColor",
    "PaletteCheck",
    "clamp_opacity",
    "contrast_matrix",
    "contrast_ratio",
    "contrast_report",
    "extract_color_tokens",
    "extract_colors_from_svg",
    "hex_to_rgb",
    "is_in_palette",
    "is_opacity_valid",
    "meets_contrast",
    "nearest_palette_color",
    "normalize_hex",
    "relative_luminance",
    "validate_color_palette",
]
