"""Basic geometry types: positions and rectangular frames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector2:
    """A point or offset in screen space."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Frame:
    """An axis-aligned rectangle in whole pixels."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def has_collision(self, other: Frame) -> bool:
        """Return True if this rectangle overlaps or touches ``other``."""
        if max(self.x, other.x) > min(self.x + self.width, other.x + other.width):
            return False
        if max(self.y, other.y) > min(self.y + self.height, other.y + other.height):
            return False
        return True