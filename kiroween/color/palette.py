"""
Our data: the Kiroween palette and the opacity/contrast bounds. Used by the color
utilities, the pattern compositor and the background stylesheet.
"""
from types import MappingProxyType

# Insertion order matters: nearest-color ties resolve to the earliest entry
PALETTE = MappingProxyType({
    "goldenYellow": "#FFB200",
    "burntOrange": "#EB5B00",
    "hotPink": "#D91656",
    "deepPurple": "#640D5F",
    "darkPurple": "#3D0842",
    "veryDark": "#1A0A1F",
    "fogGrey": "#C6C6C6",
})

# Editor background; never used for pattern elements
DARKEST = "veryDark"

# Opacity domain for the background overlay
OPACITY_MIN = 0.02
OPACITY_MAX = 0.08

# WCAG AA minimum for normal text
MIN_CONTRAST_RATIO = 4.5
