"""Clouds drifting slowly across the sky."""

from __future__ import annotations

import math
from typing import List

from trexrunner.core.entity import Entity
from trexrunner.core.rng import Random
from trexrunner.core.sprite import Sprite
from trexrunner.core.types import Vector2
from trexrunner.game.shared import WINDOW_WIDTH

CLOUD_WIDTH = 46
CLOUD_SPEED = 0.2


class Clouds(Entity):
    """Up to ``MAX_CLOUDS`` clouds in a ring of sprite slots."""

    MAX_CLOUDS = 6

    def __init__(self) -> None:
        super().__init__()
        self._cloud_count = 0
        self._last_cloud_idx = -1
        self._cloud_gaps: List[int] = [0] * self.MAX_CLOUDS
        self._rand_vertical = Random(30, 70)
        self._rand_gap = Random(100, 400)
        self._add_cloud()

    def _add_cloud(self) -> None:
        self._cloud_count += 1
        self._last_cloud_idx = (self._last_cloud_idx + 1) % self.MAX_CLOUDS
        cloud = Sprite(
            "spritesheet", "cloud", Vector2(float(WINDOW_WIDTH), float(self._rand_vertical()))
        )
        if self._last_cloud_idx >= len(self.sprites):
            self.sprites.append(cloud)
        else:
            self.sprites[self._last_cloud_idx] = cloud
        self._cloud_gaps[self._last_cloud_idx] = self._rand_gap()

    def update_with_speed(self, dt: float, speed: float) -> None:
        """Move clouds left, drop those off screen and add new ones."""
        rate = math.ceil(CLOUD_SPEED / 1000 * dt * speed)
        for index, sprite in enumerate(self.sprites):
            if sprite is None:
                continue
            sprite.x -= rate
            if sprite.x < -CLOUD_WIDTH:
                self.sprites[index] = None
                self._cloud_count -= 1
        if self._should_add_cloud():
            self._add_cloud()

    def _should_add_cloud(self) -> bool:
        if self._cloud_count == self.MAX_CLOUDS:
            return False
        last = self.sprites[self._last_cloud_idx]
        if last is None:
            return True
        return (WINDOW_WIDTH - last.x) > self._cloud_gaps[self._last_cloud_idx]