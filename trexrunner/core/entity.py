"""Game entity: a group of sprites that update and collide together."""

from __future__ import annotations

from typing import List, Optional

from trexrunner.core.resource_manager import get_spritesheet
from trexrunner.core.sprite import Sprite, SpriteAnimated
from trexrunner.core.types import Frame


class Entity:
    """Base class for everything placed on a stage.

    Slots in ``sprites`` may hold None for sprites that have been removed.
    """

    def __init__(self) -> None:
        self.sprites: List[Optional[Sprite]] = []

    def update(self, dt: float) -> None:
        """Advance the animation of every animated sprite."""
        for sprite in self.sprites:
            if isinstance(sprite, SpriteAnimated):
                sprite.update_frame()

    def collision_rects(self) -> List[Frame]:
        """Collision rectangles of all sprites, in screen coordinates."""
        rects = []
        for sprite in self.sprites:
            if sprite is None:
                continue
            sheet = get_spritesheet(sprite.spritesheet_id)
            for rect in sheet.get_collision_frames(sprite.frame_id):
                rects.append(
                    Frame(
                        rect.x + int(sprite.x),
                        rect.y + int(sprite.y),
                        rect.width,
                        rect.height,
                    )
                )
        return rects

    def has_collision(self, other: Entity) -> bool:
        """Return True if any collision rectangle touches one of ``other``'s."""
        other_rects = other.collision_rects()
        return any(
            rect.has_collision(other_rect)
            for rect in self.collision_rects()
            for other_rect in other_rects
        )