"""
Background activation: when the Kiroween color theme is active and the background is
enabled, add the stylesheet to the host's custom-CSS imports. Toggle flips the enable
flag and adds or removes the import to match.
"""
import enum
import logging
from pathlib import Path
from typing import Any

from ..config import get_css_path, get_pattern_output
from . import settings as host

logger = logging.getLogger(__name__)


class ActivationResult(enum.Enum):
    MISSING_ASSETS = "missing_assets"
    DISABLED = "disabled"
    THEME_INACTIVE = "theme_inactive"
    ALREADY_INJECTED = "already_injected"
    INJECTED = "injected"


def _theme_cfg(config: dict[str, Any]) -> dict[str, str]:
    theme = config.get("theme", {})
    return {
        "theme_id": theme.get("theme_id", host.DEFAULT_THEME_ID),
        "theme_key": theme.get("theme_key", host.DEFAULT_THEME_KEY),
        "enabled_key": theme.get("enabled_key", host.DEFAULT_ENABLED_KEY),
        "imports_key": theme.get("imports_key", host.DEFAULT_IMPORTS_KEY),
    }


def validate_assets(root: Path, config: dict[str, Any]) -> list[str]:
    """Stylesheet and generated pattern must exist. Returns the missing paths (relative to root)."""
    root = Path(root)
    missing = []
    for path in (get_css_path(config, root), get_pattern_output(config, root)):
        if not path.is_file():
            try:
                missing.append(path.relative_to(root).as_posix())
            except ValueError:
                missing.append(str(path))
    return missing


def inject(root: Path, settings: dict[str, Any], config: dict[str, Any]) -> bool:
    """Add the stylesheet import to settings. Returns True if settings changed."""
    cfg = _theme_cfg(config)
    uri = host.css_uri(get_css_path(config, Path(root)))
    changed = host.add_css_import(settings, uri, cfg["imports_key"])
    if changed:
        logger.info("Added CSS to custom CSS imports: %s", uri)
    return changed


def remove(settings: dict[str, Any], config: dict[str, Any]) -> bool:
    cfg = _theme_cfg(config)
    marker = get_css_path(config).name
    changed = host.remove_css_imports(settings, marker, cfg["imports_key"])
    if changed:
        logger.info("Removed %s from custom CSS imports", marker)
    return changed


def activate(root: Path, settings_path: Path, config: dict[str, Any]) -> ActivationResult:
    """
    Check assets, the enable flag and the active theme, then inject the stylesheet.
    The settings file is only written when it changes.
    """
    missing = validate_assets(root, config)
    if missing:
        logger.error("Missing required assets: %s", ", ".join(missing))
        return ActivationResult.MISSING_ASSETS

    cfg = _theme_cfg(config)
    settings = host.load_settings(settings_path)
    if not host.is_background_enabled(settings, cfg["enabled_key"]):
        logger.info("Background is disabled in configuration")
        return ActivationResult.DISABLED
    if not host.is_theme_active(settings, cfg["theme_id"], cfg["theme_key"]):
        logger.info("Theme %s is not active; nothing to inject", cfg["theme_id"])
        return ActivationResult.THEME_INACTIVE

    if not inject(root, settings, config):
        return ActivationResult.ALREADY_INJECTED
    host.save_settings(settings_path, settings)
    return ActivationResult.INJECTED


def toggle(root: Path, settings_path: Path, config: dict[str, Any]) -> bool:
    """Flip the background on or off. Returns the new enabled state."""
    cfg = _theme_cfg(config)
    settings = host.load_settings(settings_path)
    enabled = not host.is_background_enabled(settings, cfg["enabled_key"])
    if enabled:
        missing = validate_assets(root, config)
        if missing:
            logger.error("Cannot enable background, missing assets: %s", ", ".join(missing))
            return False
        inject(root, settings, config)
    else:
        remove(settings, config)
    host.set_background_enabled(settings, enabled, cfg["enabled_key"])
    host.save_settings(settings_path, settings)
    logger.info("Background %s. Restart the editor to apply changes.", "enabled" if enabled else "disabled")
    return enabled
