"""
Unit tests for YAML config loading and path helpers.
Run from project root: python -m pytest tests/ -v
"""
import importlib
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from kiroween.config import get_css_path, get_pattern_output, load_config, resolve_path


class TestConfig(unittest.TestCase):
    def test_default_file(self):
        config = load_config()
        self.assertEqual(config["pattern"]["seed"], 12345)
        self.assertEqual(config["pattern"]["grid_size"], 4)
        self.assertEqual(config["pattern"]["tile_size"], 400)
        self.assertEqual(config["theme"]["theme_id"], "KiroTheme")
        self.assertEqual(len(config["pattern"]["assets"]), 5)

    def test_missing_file_gives_defaults(self):
        config = load_config(Path("/nonexistent/kiroween.yaml"))
        self.assertEqual(config["background"]["opacity"], 0.05)
        self.assertEqual(config["icons"]["dir"], "assets")

    def test_partial_override_keeps_other_keys(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "custom.yaml"
            path.write_text("pattern:\n  seed: 7\nextra: true\n", encoding="utf-8")
            config = load_config(path)
        self.assertEqual(config["pattern"]["seed"], 7)
        self.assertEqual(config["pattern"]["grid_size"], 4)
        self.assertIs(config["extra"], True)

    def test_empty_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty.yaml"
            path.write_text("", encoding="utf-8")
            self.assertEqual(load_config(path)["pattern"]["seed"], 12345)

    def test_paths(self):
        config = load_config()
        self.assertEqual(get_pattern_output(config), ROOT / "assets" / "background-pattern.svg")
        self.assertEqual(get_css_path(config, Path("/ext")), Path("/ext/themes/kiroween-background.css"))
        self.assertEqual(resolve_path("/abs/file.svg"), Path("/abs/file.svg"))

    def test_packages_have_docstrings(self):
        for name in ("kiroween", "kiroween.color", "kiroween.pattern", "kiroween.validation", "kiroween.background"):
            module = importlib.import_module(name)
            self.assertTrue(module.__doc__ and module.__doc__.strip(), name)
