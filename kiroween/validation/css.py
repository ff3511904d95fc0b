"""
Checks for the background stylesheet: tiling, overlay opacity, blend mode, target
selector and the relative reference to the pattern asset.
"""
import re

from ..color.utils import is_opacity_valid
from .report import ValidationReport

TARGET_SELECTOR = ".monaco-editor .view-lines"
_OPACITY = re.compile(r"opacity:\s*(\d*\.?\d+)")


def validate_background_css(css_text: str, pattern_name: str = "background-pattern.svg") -> ValidationReport:
    report = ValidationReport()
    report.check(
        "background-image:" in css_text and pattern_name in css_text,
        "Background image styling present",
        "Background image styling missing",
    )
    report.check(
        "background-repeat: repeat" in css_text and "background-size:" in css_text,
        "Seamless tiling configuration present",
        "Seamless tiling configuration missing",
    )

    match = _OPACITY.search(css_text)
    if match:
        opacity = float(match.group(1))
        report.check(
            is_opacity_valid(opacity),
            f"Opacity within valid range ({opacity})",
            f"Opacity out of range ({opacity}), should be 0.02-0.08",
        )
    else:
        report.failed.append("Opacity setting missing")

    report.check("mix-blend-mode:" in css_text, "Blend mode setting present", "Blend mode setting missing")
    report.check(
        TARGET_SELECTOR in css_text,
        f"Targets {TARGET_SELECTOR} element",
        f"Does not target {TARGET_SELECTOR} element",
    )
    relative = f"../assets/{pattern_name}"
    report.check(
        f"url('{relative}')" in css_text or f'url("{relative}")' in css_text,
        "Uses relative path for background asset",
        "Does not use relative path for background asset",
    )
    return report
