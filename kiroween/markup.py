"""
Text-level SVG helpers. The icon library is small and under our control, so regex
transforms are enough; each one checks the shape it expects and raises when it is absent.
"""
import re

_SVG_ELEMENT = re.compile(r"<svg\b[^>]*>([\s\S]*)</svg>")
_SVG_OPEN_TAG = re.compile(r"<svg\b[^>]*>")
_COMMENT = re.compile(r"<!--[\s\S]*?-->")
_BLANK_LINES = re.compile(r"\n\s*\n")


class MarkupShapeError(ValueError):
    """Markup does not have the structure a transform requires."""


def root_svg_tag(svg_text: str) -> str | None:
    """The opening <svg ...> tag, or None."""
    match = _SVG_OPEN_TAG.search(svg_text)
    return match.group(0) if match else None


def extract_svg_content(svg_text: str) -> str:
    """Everything between the outer <svg> and </svg>, trimmed."""
    match = _SVG_ELEMENT.search(svg_text)
    if not match:
        raise MarkupShapeError("No <svg>...</svg> wrapper found in markup")
    return match.group(1).strip()


def strip_comments(svg_text: str) -> str:
    """Remove XML comments and collapse the blank lines they leave behind."""
    text = _COMMENT.sub("", svg_text)
    return _BLANK_LINES.sub("\n", text)
