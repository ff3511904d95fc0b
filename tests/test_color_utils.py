"""
Unit tests for palette constants and color utilities (WCAG luminance/contrast, palette
matching, opacity bounds, hex token extraction).
Run from project root: python -m pytest tests/ -v
Or: python -m unittest discover -s tests -p "test_*.py" -v
"""
import math
import sys
import tempfile
import unittest
from pathlib import Path

# Project root on path so "from kiroween. ..." works
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from kiroween.color import (
    MIN_CONTRAST_RATIO,
    OPACITY_MAX,
    OPACITY_MIN,
    PALETTE,
    RGB,
    InvalidColor,
    InvalidOpacity,
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


class TestPalette(unittest.TestCase):
    def test_palette_entries_and_order(self):
        self.assertEqual(
            list(PALETTE),
            ["goldenYellow", "burntOrange", "hotPink", "deepPurple", "darkPurple", "veryDark", "fogGrey"],
        )
        self.assertEqual(PALETTE["veryDark"], "#1A0A1F")
        for color in PALETTE.values():
            self.assertEqual(normalize_hex(color), color)
            hex_to_rgb(color)

    def test_palette_is_read_only(self):
        with self.assertRaises(TypeError):
            PALETTE["goldenYellow"] = "#000000"

    def test_bounds(self):
        self.assertEqual((OPACITY_MIN, OPACITY_MAX), (0.02, 0.08))
        self.assertEqual(MIN_CONTRAST_RATIO, 4.5)


class TestHexParsing(unittest.TestCase):
    def test_normalize(self):
        self.assertEqual(normalize_hex("#fff"), "#FFFFFF")
        self.assertEqual(normalize_hex("fff"), "#FFFFFF")
        self.assertEqual(normalize_hex("#FFFFFF"), "#FFFFFF")
        self.assertEqual(normalize_hex("eb5b00"), "#EB5B00")

    def test_normalize_is_idempotent(self):
        for value in ["#fff", "abc", "#a1B2c3", "FFB200", "#000"]:
            once = normalize_hex(value)
            self.assertEqual(normalize_hex(once), once)

    def test_normalize_does_not_validate_charset(self):
        self.assertEqual(normalize_hex("#xyz"), "#XXYYZZ")

    def test_hex_to_rgb(self):
        self.assertEqual(hex_to_rgb("#FFFFFF"), RGB(255, 255, 255))
        self.assertEqual(hex_to_rgb("#000000"), RGB(0, 0, 0))
        self.assertEqual(hex_to_rgb("#FFB200").as_tuple(), (255, 178, 0))
        self.assertEqual(hex_to_rgb("fff"), RGB(255, 255, 255))
        self.assertEqual(RGB(235, 91, 0).to_hex(), "#EB5B00")

    def test_hex_to_rgb_rejects_malformed(self):
        for bad in ["#GGGGGG", "#12345", "", "#1234567", "red"]:
            with self.assertRaises(InvalidColor) as ctx:
                hex_to_rgb(bad)
            self.assertEqual(ctx.exception.value, bad)
        with self.assertRaises(InvalidColor):
            hex_to_rgb(None)


class TestContrast(unittest.TestCase):
    def test_luminance_extremes(self):
        self.assertAlmostEqual(relative_luminance("#FFFFFF"), 1.0, places=12)
        self.assertEqual(relative_luminance("#000000"), 0.0)
        self.assertEqual(relative_luminance((0, 0, 0)), 0.0)

    def test_luminance_linear_segment(self):
        # 10/255 is below the 0.03928 threshold
        self.assertAlmostEqual(relative_luminance("#000A00"), 0.7152 * (10 / 255) / 12.92)

    def test_black_white_is_21(self):
        self.assertEqual(contrast_ratio("#FFFFFF", "#000000"), 21.0)

    def test_symmetry_and_identity(self):
        colors = list(PALETTE.values()) + ["#FFFFFF", "#000000", "#123456"]
        for a in colors:
            self.assertEqual(contrast_ratio(a, a), 1.0)
            for b in colors:
                self.assertEqual(contrast_ratio(a, b), contrast_ratio(b, a))
                self.assertGreaterEqual(contrast_ratio(a, b), 1.0)
                self.assertLessEqual(contrast_ratio(a, b), 21.0 + 1e-9)

    def test_theme_tokens_on_editor_background(self):
        background = PALETTE["veryDark"]
        self.assertTrue(meets_contrast(PALETTE["fogGrey"], background))
        self.assertTrue(meets_contrast(PALETTE["goldenYellow"], background))
        self.assertTrue(meets_contrast(PALETTE["burntOrange"], background))
        self.assertFalse(meets_contrast(PALETTE["hotPink"], background))

    def test_contrast_report(self):
        entries = contrast_report(PALETTE["veryDark"])
        self.assertEqual([e.name for e in entries], list(PALETTE))
        passing = {e.name for e in entries if e.passes}
        self.assertEqual(passing, {"goldenYellow", "burntOrange", "fogGrey"})

    def test_contrast_matrix(self):
        matrix = contrast_matrix()
        self.assertEqual(matrix.shape, (7, 7))
        for i in range(7):
            self.assertAlmostEqual(matrix[i, i], 1.0)
        self.assertTrue((matrix == matrix.T).all())
        self.assertAlmostEqual(matrix[0, 5], contrast_ratio(PALETTE["goldenYellow"], PALETTE["veryDark"]))


class TestPaletteMatching(unittest.TestCase):
    def test_is_in_palette(self):
        self.assertTrue(is_in_palette("#FFB200"))
        self.assertTrue(is_in_palette("#ffb200"))
        self.assertTrue(is_in_palette("ffb200"))
        self.assertFalse(is_in_palette("#000000"))
        self.assertFalse(is_in_palette("not a color"))

    def test_validate_color_palette(self):
        result = validate_color_palette(["#FFB200", "#EB5B00", "#000000"])
        self.assertFalse(result.valid)
        self.assertEqual(result.invalid_colors, ["#000000"])
        self.assertTrue(validate_color_palette([]).valid)

    def test_nearest_red(self):
        nearest = nearest_palette_color("#FF0000")
        # burntOrange: (20, 91, 0) away; hotPink: (38, 22, 86) away
        self.assertAlmostEqual(math.sqrt(20 ** 2 + 91 ** 2), 93.1718, places=3)
        self.assertAlmostEqual(math.sqrt(38 ** 2 + 22 ** 2 + 86 ** 2), 96.5609, places=3)
        self.assertEqual(nearest.name, "burntOrange")
        self.assertEqual(nearest.color, "#EB5B00")
        self.assertAlmostEqual(nearest.distance, math.sqrt(8681))

    def test_nearest_exact_match(self):
        nearest = nearest_palette_color("#c6c6c6")
        self.assertEqual(nearest.name, "fogGrey")
        self.assertEqual(nearest.distance, 0.0)

    def test_nearest_tie_goes_to_first_entry(self):
        palette = {"first": "#0A0000", "second": "#000A00"}
        self.assertEqual(nearest_palette_color("#000000", palette).name, "first")
        swapped = {"second": "#000A00", "first": "#0A0000"}
        self.assertEqual(nearest_palette_color("#000000", swapped).name, "second")

    def test_nearest_rejects_bad_input(self):
        with self.assertRaises(InvalidColor):
            nearest_palette_color("#nothex")
        with self.assertRaises(ValueError):
            nearest_palette_color("#000000", {})


class TestOpacity(unittest.TestCase):
    def test_clamp(self):
        self.assertEqual(clamp_opacity(0.01), 0.02)
        self.assertEqual(clamp_opacity(0.05), 0.05)
        self.assertEqual(clamp_opacity(0.10), 0.08)
        self.assertEqual(clamp_opacity(5), 0.08)
        self.assertEqual(clamp_opacity(-1), 0.02)

    def test_clamp_rejects_non_finite(self):
        for bad in [float("nan"), float("inf"), "0.05", None, True]:
            with self.assertRaises(InvalidOpacity):
                clamp_opacity(bad)

    def test_is_valid(self):
        self.assertTrue(is_opacity_valid(0.05))
        self.assertFalse(is_opacity_valid(0.10))
        self.assertTrue(is_opacity_valid(0.02))
        self.assertTrue(is_opacity_valid(0.08))
        self.assertFalse(is_opacity_valid(float("nan")))
        self.assertFalse(is_opacity_valid("0.05"))


class TestColorExtraction(unittest.TestCase):
    def test_extract_tokens(self):
        self.assertEqual(
            extract_color_tokens('fill="#fff" stroke="#ABCDEF"'),
            ["#FFFFFF", "#ABCDEF"],
        )

    def test_extract_dedupes_in_first_seen_order(self):
        text = '<a fill="#abcdef"/><b stroke="#fff"/><c fill="#FFFFFF"/><d fill="#ABCDEF"/>'
        self.assertEqual(extract_color_tokens(text), ["#ABCDEF", "#FFFFFF"])

    def test_extract_ignores_keywords_and_non_colors(self):
        text = 'stroke="currentColor" fill="none" color="red" x="#abcd" y="#ABCDEF1" z="&#123;"'
        self.assertEqual(extract_color_tokens(text), [])

    def test_extract_from_svg(self):
        # Icons use currentColor only
        self.assertEqual(extract_colors_from_svg(ROOT / "assets" / "pumpkin.svg"), [])
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "icon.svg"
            path.write_text('<svg><path stroke="#eb5b00"/></svg>', encoding="utf-8")
            self.assertEqual(extract_colors_from_svg(path), ["#EB5B00"])
            with self.assertRaises(FileNotFoundError):
                extract_colors_from_svg(Path(tmp) / "missing.svg")
