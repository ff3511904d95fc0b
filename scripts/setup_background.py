#!/usr/bin/env python3
"""
CLI: Wire the background stylesheet into the editor's user settings.
Usage:
  python scripts/setup_background.py path          # print the stylesheet URI and settings snippet
  python scripts/setup_background.py activate      # inject if the Kiroween theme is active and enabled
  python scripts/setup_background.py toggle        # flip the background on/off
  python scripts/setup_background.py activate --settings ~/.config/Code/User/settings.json
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import logging

from kiroween.background import (
    ActivationResult,
    SettingsError,
    activate,
    css_uri,
    find_settings_file,
    get_css_imports,
    load_settings,
    toggle,
)
from kiroween.config import get_css_path, load_config

logger = logging.getLogger(__name__)


def _print_path(config: dict, settings_path: Path | None) -> int:
    uri = css_uri(get_css_path(config, PROJECT_ROOT))
    imports_key = config.get("theme", {}).get("imports_key", "vscode_custom_css.imports")
    print("Kiroween Background CSS Path:")
    print(uri)
    print("\nAdd this to your settings.json:")
    print(json.dumps({imports_key: [uri]}, indent=2))
    if settings_path is None:
        print("\n✗ Settings file not found in common locations")
        return 0
    print(f"\n✓ Found settings: {settings_path}")
    existing = get_css_imports(load_settings(settings_path), imports_key)
    if existing and uri in existing:
        print("✓ Kiroween CSS is already in your settings.")
    elif existing:
        print("→ Add the Kiroween CSS path to your existing imports:")
        print(json.dumps({imports_key: existing + [uri]}, indent=2))
    print('Then run "Enable Custom CSS and JS" and restart the editor.')
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Set up the Kiroween editor background.")
    parser.add_argument("command", choices=["path", "activate", "toggle"], help="What to do.")
    parser.add_argument("--settings", type=Path, default=None, help="Editor settings.json (default: auto-detect).")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML.")
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(
        level=config.get("logging", {}).get("level", "INFO"),
        format="%(levelname)s: %(message)s",
    )
    settings_path = args.settings or find_settings_file()

    try:
        if args.command == "path":
            return _print_path(config, settings_path)
        if settings_path is None:
            logger.error("No settings.json found; pass --settings")
            return 1
        if args.command == "activate":
            result = activate(PROJECT_ROOT, settings_path, config)
            print(f"Activation: {result.value}")
            if result is ActivationResult.INJECTED:
                print('Install "Custom CSS and JS Loader" and restart the editor to see the effect.')
            return 1 if result is ActivationResult.MISSING_ASSETS else 0
        enabled = toggle(PROJECT_ROOT, settings_path, config)
        print(f"Background {'enabled' if enabled else 'disabled'}. Restart the editor to apply changes.")
        return 0
    except SettingsError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
