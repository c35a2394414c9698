"""Game-over overlay with the restart button and text."""

from __future__ import annotations

from trexrunner.core.entity import Entity
from trexrunner.core.sprite import Sprite
from trexrunner.core.types import Vector2
from trexrunner.game.shared import WINDOW_HEIGHT, WINDOW_WIDTH


class Restart(Entity):
    """Restart button and text, centred horizontally."""

    def __init__(self) -> None:
        super().__init__()
        button = Sprite("spritesheet", "restart_button", Vector2(0.0, float(WINDOW_HEIGHT >> 1)))
        text = Sprite(
            "spritesheet", "restart_text", Vector2(0.0, float((WINDOW_HEIGHT - 50) >> 1))
        )
        button.x = (WINDOW_WIDTH - button.width) >> 1
        text.x = (WINDOW_WIDTH - text.width) >> 1
        self.sprites.extend([button, text])