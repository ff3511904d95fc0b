"""
Lint for SVG text: duplicate attributes on a line, unclosed tags, missing root,
namespace or viewBox. Also checks a generated tile only uses palette colors.
"""
import re
from typing import Mapping

from ..color.palette import PALETTE
from ..color.utils import extract_color_tokens, validate_color_palette
from .report import ValidationReport

_NAMESPACE_DECL = 'xmlns="http://www.w3.org/2000/svg"'
# Whole attribute names only: data-id or paint-fill do not count
_DUPLICATE_CHECKS = {
    "fill": re.compile(r"(?<![\w-])fill="),
    "stroke": re.compile(r"(?<![\w-])stroke="),
    "id": re.compile(r"(?<![\w-])id="),
}


def lint_svg(svg_text: str) -> ValidationReport:
    """Duplicate attributes and a missing <svg> root are failures; the rest are warnings."""
    report = ValidationReport()
    for line_num, line in enumerate(svg_text.split("\n"), start=1):
        for attr, pattern in _DUPLICATE_CHECKS.items():
            if len(pattern.findall(line)) > 1:
                report.failed.append(f"Line {line_num}: Duplicate '{attr}' attribute")
        if "<" in line and ">" not in line and not line.strip().startswith("<!--"):
            report.warn(f"Line {line_num}: Possibly unclosed tag")

    report.check("<svg" in svg_text, "Has <svg> root element", "Missing <svg> root element")
    if _NAMESPACE_DECL not in svg_text:
        report.warn("Missing SVG namespace declaration")
    if "viewBox" not in svg_text:
        report.warn("Missing viewBox attribute")
    return report


def validate_pattern_colors(svg_text: str, palette: Mapping[str, str] = PALETTE) -> ValidationReport:
    """Every explicit hex color in the tile must come from the palette."""
    report = ValidationReport()
    colors = extract_color_tokens(svg_text)
    result = validate_color_palette(colors, palette)
    report.check(
        result.valid,
        f"All {len(colors)} colors are from the palette",
        f"Colors outside the palette: {', '.join(result.invalid_colors)}",
    )
    return report
