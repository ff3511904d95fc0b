"""
Validators for icon assets, generated SVG and the background stylesheet.
"""

from .report import ValidationReport
from .svg import lint_svg, validate_pattern_colors
from .icons import check_icon_markup, validate_icon_directory
from .css import validate_background_css

__all__ = [
    "ValidationReport",
    "lint_svg",
    "validate_pattern_colors",
    "check_icon_markup",
    "validate_icon_directory",
    "validate_background_css",
]
