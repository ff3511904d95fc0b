"""
Icon asset library for the compositor. Reads the icon SVGs in a fixed order; a missing
file stops generation rather than letting a degraded tile ship.
"""
import logging
from pathlib import Path
from typing import Iterable

from .compositor import MissingAssetError

logger = logging.getLogger(__name__)


def asset_filename(name: str) -> str:
    return name if name.endswith(".svg") else f"{name}.svg"


def load_asset_library(asset_dir: Path, names: Iterable[str]) -> dict[str, str]:
    """Read each named icon from asset_dir. Keys keep the given order."""
    asset_dir = Path(asset_dir)
    library: dict[str, str] = {}
    for name in names:
        filename = asset_filename(name)
        path = asset_dir / filename
        if not path.is_file():
            raise MissingAssetError(filename)
        try:
            library[filename] = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise MissingAssetError(filename, f"unreadable ({e})") from e
        logger.info("Loaded %s", filename)
    return library

