"""
Icon asset contract: 24x24 viewBox, stroke="currentColor", fill="none",
stroke-width="2", SVG namespace, no gradients and no duplicate attributes.
The compositor relies on the same contract when it recolors icons.
"""
from pathlib import Path
from typing import Iterable

from ..markup import root_svg_tag
from .report import ValidationReport
from .svg import lint_svg

ICON_VIEWBOX = 'viewBox="0 0 24 24"'
SVG_NAMESPACE_DECL = 'xmlns="http://www.w3.org/2000/svg"'


def check_icon_markup(name: str, svg_text: str) -> ValidationReport:
    """Check one icon's markup against the asset contract."""
    report = ValidationReport()
    root = root_svg_tag(svg_text)
    if not report.check(root is not None, f"{name} has an <svg> root", f"{name} has no <svg> root"):
        return report

    report.check(SVG_NAMESPACE_DECL in root, f"{name} uses the SVG namespace", f"{name} missing SVG namespace")
    report.check(ICON_VIEWBOX in root, f"{name} has {ICON_VIEWBOX}", f"{name} missing {ICON_VIEWBOX}")
    report.check(
        'stroke="currentColor"' in svg_text,
        f'{name} has stroke="currentColor"',
        f'{name} missing stroke="currentColor"',
    )
    report.check('fill="none"' in svg_text, f'{name} has fill="none"', f'{name} missing fill="none"')
    report.check(
        'stroke-width="2"' in svg_text,
        f'{name} has stroke-width="2"',
        f'{name} missing stroke-width="2"',
    )
    has_gradient = "<linearGradient" in svg_text or "<radialGradient" in svg_text
    report.check(not has_gradient, f"{name} has no gradients", f"{name} contains a gradient")

    lint = lint_svg(svg_text)
    for message in lint.failed:
        report.failed.append(f"{name}: {message}")
    return report


def validate_icon_directory(directory: Path, required: Iterable[str] | None = None) -> ValidationReport:
    """Required icons exist, and every icon SVG in the directory passes check_icon_markup."""
    directory = Path(directory)
    report = ValidationReport()
    for icon in required or ():
        report.check((directory / icon).is_file(), f"{icon} exists", f"{icon} is missing")

    for path in sorted(directory.glob("*.svg")):
        # Generated tile is not an icon
        if path.name == "background-pattern.svg":
            continue
        report.merge(check_icon_markup(path.name, path.read_text(encoding="utf-8")))
    return report
