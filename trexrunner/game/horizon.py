"""Scrolling ground made of two alternating segments."""

from __future__ import annotations

from trexrunner.core.entity import Entity
from trexrunner.core.rng import Random
from trexrunner.core.sprite import Sprite
from trexrunner.core.types import Vector2
from trexrunner.game.shared import FPS, WINDOW_HEIGHT

BUMP_THRESHOLD = 5
GROUND_WIDTH = 600


class Horizon(Entity):
    """Two ground segments scrolled left and recycled to the right."""

    def __init__(self) -> None:
        super().__init__()
        self._rand = Random(0, 10)
        y_pos = float(WINDOW_HEIGHT - 23)
        self.sprites.append(Sprite("spritesheet", "ground_0", Vector2(0.0, y_pos)))
        self.sprites.append(
            Sprite("spritesheet", "ground_1", Vector2(float(GROUND_WIDTH), y_pos))
        )

    def update_with_speed(self, dt: float, speed: float) -> None:
        """Scroll both segments, moving the left one behind once it has passed."""
        front, back = self.sprites[0], self.sprites[-1]
        if back.x <= 0:
            back.x = 0
            front.x = GROUND_WIDTH
            front.set_frame("ground_1" if self._should_render_bumps() else "ground_0")
            self.sprites[0], self.sprites[-1] = back, front
        rate = speed * (FPS / 1000) * dt
        self.sprites[0].x -= rate
        self.sprites[-1].x -= rate

    def _should_render_bumps(self) -> bool:
        return self._rand() > BUMP_THRESHOLD