"""Spritesheet: an image plus a JSON dictionary of named frames."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List

from trexrunner.core.image import Image
from trexrunner.core.types import Frame

_FRAME_FIELDS = ("x", "y", "width", "height")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class SpritesheetFiles:
    """Paths of a spritesheet's image and its JSON dictionary."""

    image: str
    dictionary: str


class SpritesheetError(RuntimeError):
    """Raised for unreadable dictionaries and missing or malformed frames."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and _INT_MIN <= value <= _INT_MAX


class Spritesheet:
    """Named frames of a single image."""

    def __init__(self, files: SpritesheetFiles) -> None:
        self.image = Image(files.image)
        try:
            with open(files.dictionary, "rb") as handle:
                content = handle.read()
        except OSError as exc:
            raise SpritesheetError(f"Unable to load JSON file {files.dictionary}") from exc
        try:
            self._document = json.loads(content)
        except ValueError as exc:
            raise SpritesheetError(f"Failed to parse JSON file {files.dictionary}") from exc

    def _entry(self, frame: str) -> dict:
        if not isinstance(self._document, dict) or frame not in self._document:
            raise SpritesheetError(f"Missing frame {frame} in spritesheet")
        entry = self._document[frame]
        if not isinstance(entry, dict):
            raise SpritesheetError(f"{frame} is an invalid frame")
        return entry

    @staticmethod
    def _to_frame(obj: Any) -> Frame:
        for field in _FRAME_FIELDS:
            if not isinstance(obj, dict) or not _is_int(obj.get(field)):
                raise SpritesheetError(f"The {field} field is missing for a given frame")
        return Frame(obj["x"], obj["y"], obj["width"], obj["height"])

    def get_frame(self, frame: str) -> Frame:
        """Return the source rectangle of ``frame``."""
        return self._to_frame(self._entry(frame))

    def get_collision_frames(self, frame: str) -> List[Frame]:
        """Return the collision rectangles of ``frame``, relative to the frame."""
        collision = self._entry(frame).get("collision")
        if not isinstance(collision, list):
            return []
        return [self._to_frame(entry) for entry in collision]