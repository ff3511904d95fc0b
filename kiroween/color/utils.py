"""
Color and contrast utilities for the Kiroween theme.
Hex normalization, RGB parsing, WCAG luminance and contrast, palette membership and
nearest match, opacity clamping, and extraction of hex tokens from markup.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from numbers import Real
from pathlib import Path
from typing import Iterable, Mapping, NamedTuple, Union

import numpy as np

from .palette import MIN_CONTRAST_RATIO, OPACITY_MAX, OPACITY_MIN, PALETTE

_HEX6 = re.compile(r"^#([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})$")
# 6-digit alternative first so "#ABCDEF" is not read as "#ABC"
_HEX_TOKEN = re.compile(r"(?<![&\w])#([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})(?![0-9A-Fa-f])")


class InvalidColor(ValueError):
    """Hex color text could not be parsed."""
    def __init__(self, value: object):
        super().__init__(f"Invalid hex color: {value!r}")
        self.value = value


class InvalidOpacity(ValueError):
    """Opacity is not a finite number."""
    def __init__(self, value: object):
        super().__init__(f"Invalid opacity value: {value!r}")
        self.value = value


@dataclass(frozen=True)
class RGB:
    """8-bit RGB triple."""

    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


ColorLike = Union[RGB, str, tuple[int, int, int]]


class NearestColor(NamedTuple):
    name: str
    color: str
    distance: float


class PaletteCheck(NamedTuple):
    valid: bool
    invalid_colors: list[str]


class ContrastEntry(NamedTuple):
    name: str
    color: str
    ratio: float
    passes: bool


def normalize_hex(value: str) -> str:
    """
    Normalize hex text to '#RRGGBB' uppercase: strip one leading '#', expand 3-digit
    shorthand. Does not check the character set; hex_to_rgb does.
    """
    if not isinstance(value, str):
        raise InvalidColor(value)
    digits = value[1:] if value.startswith("#") else value
    digits = digits.upper()
    if len(digits) == 3:
        digits = "".join(c + c for c in digits)
    return "#" + digits


def hex_to_rgb(value: str) -> RGB:
    """Parse hex text ('#fff', 'FFB200', ...) into an RGB triple."""
    match = _HEX6.match(normalize_hex(value))
    if not match:
        raise InvalidColor(value)
    r, g, b = (int(part, 16) for part in match.groups())
    return RGB(r, g, b)


def _to_rgb(color: ColorLike) -> RGB:
    if isinstance(color, RGB):
        return color
    if isinstance(color, str):
        return hex_to_rgb(color)
    try:
        r, g, b = color
    except (TypeError, ValueError):
        raise InvalidColor(color) from None
    channels = (r, g, b)
    if not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in channels):
        raise InvalidColor(color)
    return RGB(r, g, b)


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    """WCAG relative luminance in [0, 1]."""
    rgb = _to_rgb(color)
    return 0.2126 * _linearize(rgb.r) + 0.7152 * _linearize(rgb.g) + 0.0722 * _linearize(rgb.b)


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    """WCAG contrast ratio in [1, 21]. Symmetric in its arguments."""
    lum_a = relative_luminance(a)
    lum_b = relative_luminance(b)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def meets_contrast(a: ColorLike, b: ColorLike, minimum: float = MIN_CONTRAST_RATIO) -> bool:
    return contrast_ratio(a, b) >= minimum


def is_in_palette(color: str, palette: Mapping[str, str] = PALETTE) -> bool:
    """Exact match of the normalized color against normalized palette entries."""
    try:
        normalized = normalize_hex(color)
    except InvalidColor:
        return False
    return any(normalize_hex(c) == normalized for c in palette.values())


def validate_color_palette(colors: Iterable[str], palette: Mapping[str, str] = PALETTE) -> PaletteCheck:
    """Check every color is from the palette; offenders are returned in input order."""
    invalid = [c for c in colors if not is_in_palette(c, palette)]
    return PaletteCheck(valid=not invalid, invalid_colors=invalid)


def nearest_palette_color(color: ColorLike, palette: Mapping[str, str] = PALETTE) -> NearestColor:
    """
    Closest palette entry by Euclidean distance in RGB space.
    Ties go to the entry that comes first in the palette.
    """
    if not palette:
        raise ValueError("nearest_palette_color: palette cannot be empty")
    target = np.array(_to_rgb(color).as_tuple(), dtype=np.float64)
    names = list(palette.keys())
    entries = np.array([hex_to_rgb(palette[n]).as_tuple() for n in names], dtype=np.float64)
    distances = np.sqrt(((entries - target) ** 2).sum(axis=1))
    # argmin returns the first index of the minimum
    idx = int(np.argmin(distances))
    return NearestColor(names[idx], palette[names[idx]], float(distances[idx]))


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def clamp_opacity(value: float) -> float:
    """Clamp into [OPACITY_MIN, OPACITY_MAX]. Raises InvalidOpacity for non-finite input."""
    if not _is_number(value) or not math.isfinite(value):
        raise InvalidOpacity(value)
    return float(max(OPACITY_MIN, min(OPACITY_MAX, value)))


def is_opacity_valid(value: float) -> bool:
    """Inclusive range check; never raises."""
    return _is_number(value) and OPACITY_MIN <= value <= OPACITY_MAX


def extract_color_tokens(text: str) -> list[str]:
    """
    Hex color tokens (#abc, #AABBCC) found in markup, normalized and deduplicated in
    first-seen order. Keywords like currentColor or none are not colors here: an empty
    result means the markup takes its color from context.
    """
    seen: dict[str, None] = {}
    for match in _HEX_TOKEN.finditer(text):
        seen.setdefault(normalize_hex(match.group(0)), None)
    return list(seen)


def extract_colors_from_svg(svg_path: Path) -> list[str]:
    """Read an SVG file and return its explicit hex colors."""
    path = Path(svg_path)
    if not path.exists():
        raise FileNotFoundError(f"SVG file not found: {path}")
    return extract_color_tokens(path.read_text(encoding="utf-8"))


def contrast_report(
    background: ColorLike,
    palette: Mapping[str, str] = PALETTE,
    *,
    minimum: float = MIN_CONTRAST_RATIO,
) -> list[ContrastEntry]:
    """Contrast of each palette color against the editor background."""
    entries = []
    for name, color in palette.items():
        ratio = contrast_ratio(color, background)
        entries.append(ContrastEntry(name, color, ratio, ratio >= minimum))
    return entries


def contrast_matrix(palette: Mapping[str, str] = PALETTE) -> np.ndarray:
    """Pairwise contrast ratios (N x N, diagonal = 1) in palette order."""
    lum = np.array([relative_luminance(c) for c in palette.values()], dtype=np.float64)
    lighter = np.maximum.outer(lum, lum)
    darker = np.minimum.outer(lum, lum)
    return (lighter + 0.05) / (darker + 0.05)
