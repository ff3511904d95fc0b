"""
Host editor settings (the user's settings.json): enable flag, active color theme and the
custom-CSS import list. Functions over a plain dict, plus load/save of the flat JSON file.
"""
import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_THEME_KEY = "workbench.colorTheme"
DEFAULT_THEME_ID = "KiroTheme"
DEFAULT_ENABLED_KEY = "kiroween.background.enabled"
DEFAULT_IMPORTS_KEY = "vscode_custom_css.imports"


class SettingsError(ValueError):
    """Settings file exists but is not a JSON object."""


def candidate_settings_paths(home: Path | None = None) -> list[Path]:
    """Usual locations of the editor's user settings.json (Windows, Linux, macOS)."""
    home = home or Path.home()
    return [
        home / "AppData" / "Roaming" / "Code" / "User" / "settings.json",
        home / "AppData" / "Roaming" / "Code - Insiders" / "User" / "settings.json",
        home / ".config" / "Code" / "User" / "settings.json",
        home / "Library" / "Application Support" / "Code" / "User" / "settings.json",
    ]


def find_settings_file(candidates: list[Path] | None = None) -> Path | None:
    """First existing settings file, or None."""
    for path in candidates if candidates is not None else candidate_settings_paths():
        if Path(path).is_file():
            return Path(path)
    return None


def load_settings(path: Path) -> dict[str, Any]:
    """Read settings; a missing file is empty settings."""
    path = Path(path)
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SettingsError(f"Could not parse settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} is not a JSON object")
    return data


def save_settings(path: Path, settings: dict[str, Any]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2, ensure_ascii=False)
        f.write("\n")
    return path


def css_uri(css_path: Path) -> str:
    """Absolute file:// URI for the stylesheet."""
    return Path(css_path).resolve().as_uri()


def is_theme_active(
    settings: dict[str, Any],
    theme_id: str = DEFAULT_THEME_ID,
    theme_key: str = DEFAULT_THEME_KEY,
) -> bool:
    return settings.get(theme_key) == theme_id


def is_background_enabled(settings: dict[str, Any], enabled_key: str = DEFAULT_ENABLED_KEY) -> bool:
    """Enabled unless explicitly set to false."""
    return bool(settings.get(enabled_key, True))


def set_background_enabled(
    settings: dict[str, Any],
    enabled: bool,
    enabled_key: str = DEFAULT_ENABLED_KEY,
) -> None:
    settings[enabled_key] = bool(enabled)


def get_css_imports(settings: dict[str, Any], imports_key: str = DEFAULT_IMPORTS_KEY) -> list[str]:
    """Current import list. A single string is one import; any other non-list value is an error."""
    imports = settings.get(imports_key, [])
    if isinstance(imports, str):
        logger.warning("%s is a single string; treating it as a one-item list", imports_key)
        return [imports]
    if not isinstance(imports, list):
        raise SettingsError(f"{imports_key} must be a list of CSS file URIs, got {type(imports).__name__}")
    return [str(x) for x in imports]


def add_css_import(settings: dict[str, Any], uri: str, imports_key: str = DEFAULT_IMPORTS_KEY) -> bool:
    """Append uri to the import list unless present. Returns True if settings changed."""
    imports = get_css_imports(settings, imports_key)
    if uri in imports:
        return False
    settings[imports_key] = imports + [uri]
    return True


def remove_css_imports(
    settings: dict[str, Any],
    marker: str = "kiroween-background.css",
    imports_key: str = DEFAULT_IMPORTS_KEY,
) -> bool:
    """Drop every import containing marker. Returns True if settings changed."""
    imports = get_css_imports(settings, imports_key)
    kept = [x for x in imports if marker not in x]
    if len(kept) == len(imports):
        return False
    settings[imports_key] = kept
    return True
