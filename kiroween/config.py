"""
Load and expose toolkit config (YAML). Used by the scripts to find assets, the pattern
output, the background stylesheet and the host settings keys.
"""
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    merged = _defaults()
    for section, values in data.items():
        # Sections merge one level deep so a file can override a single key
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged


def _defaults() -> dict[str, Any]:
    return {
        "pattern": {
            "seed": 12345,
            "grid_size": 4,
            "tile_size": 400,
            "element_opacity": 0.15,
            "asset_dir": "assets",
            "assets": ["ghost.svg", "pumpkin.svg", "skull.svg", "witch-hat.svg", "eyeball.svg"],
            "output": "assets/background-pattern.svg",
        },
        "background": {
            "css_file": "themes/kiroween-background.css",
            "opacity": 0.05,
            "blend_mode": "lighten",
        },
        "theme": {
            "theme_id": "KiroTheme",
            "theme_key": "workbench.colorTheme",
            "enabled_key": "kiroween.background.enabled",
            "imports_key": "vscode_custom_css.imports",
        },
        "icons": {
            "dir": "assets",
            "required": ["ghost.svg", "pumpkin.svg", "skull.svg", "witch-hat.svg", "eyeball.svg"],
        },
        "logging": {"level": "INFO"},
    }


def resolve_path(value: str | Path, root: Path | None = None) -> Path:
    """Resolve a config path (relative to project root, or to `root` if given)."""
    p = Path(value)
    if not p.is_absolute():
        p = (root or _project_root()) / p
    return p


def get_pattern_output(config: dict[str, Any], root: Path | None = None) -> Path:
    """Where the generated background tile is written."""
    out = config.get("pattern", {}).get("output", "assets/background-pattern.svg")
    return resolve_path(out, root)


def get_css_path(config: dict[str, Any], root: Path | None = None) -> Path:
    """Path to the background stylesheet that the host imports."""
    css = config.get("background", {}).get("css_file", "themes/kiroween-background.css")
    return resolve_path(css, root)
