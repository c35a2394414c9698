"""Process-wide store of loaded spritesheets."""

from __future__ import annotations

from typing import Dict

from trexrunner.core.spritesheet import Spritesheet, SpritesheetFiles

_spritesheets: Dict[str, Spritesheet] = {}


class ResourceManagerError(RuntimeError):
    """Raised when a requested resource has not been loaded."""


def load_spritesheet(sheet_id: str, files: SpritesheetFiles) -> None:
    """Load a spritesheet under ``sheet_id``; an existing entry is kept."""
    sheet = Spritesheet(files)
    _spritesheets.setdefault(sheet_id, sheet)


def get_spritesheet(sheet_id: str) -> Spritesheet:
    """Return the spritesheet loaded under ``sheet_id``."""
    try:
        return _spritesheets[sheet_id]
    except KeyError:
        raise ResourceManagerError(f"Missing spritesheet with ID '{sheet_id}'") from None


def clear_spritesheets() -> None:
    """Forget every loaded spritesheet."""
    _spritesheets.clear()