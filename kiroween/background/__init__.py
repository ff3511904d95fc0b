"""
Background overlay: stylesheet rendering and host settings injection.
"""

from .css import pattern_data_uri, render_background_css, render_inline_css
from .settings import (
    SettingsError,
    add_css_import,
    css_uri,
    find_settings_file,
    get_css_imports,
    is_background_enabled,
    is_theme_active,
    load_settings,
    remove_css_imports,
    save_settings,
)
from .activation import ActivationResult, activate, toggle, validate_assets

__all__ = [
    "pattern_data_uri",
    "render_background_css",
    "render_inline_css",
    "SettingsError",
    "add_css_import",
    "css_uri",
    "find_settings_file",
    "get_css_imports",
    "is_background_enabled",
    "is_theme_active",
    "load_settings",
    "remove_css_imports",
    "save_settings",
    "ActivationResult",
    "activate",
    "toggle",
    "validate_assets",
]
