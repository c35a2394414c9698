"""Obstacles scrolling towards the runner."""

from __future__ import annotations

from typing import List

from trexrunner.core.entity import Entity
from trexrunner.core.rng import Random
from trexrunner.core.sprite import Sprite
from trexrunner.core.types import Vector2
from trexrunner.game.shared import FPS, WINDOW_HEIGHT, WINDOW_WIDTH

GROUND_POSITION = WINDOW_HEIGHT - 23
VERTICAL_OFFSET = 13
MIN_GAP = 120
MIN_GAP_COEFFICIENT = 0.6
MAX_GAP_COEFFICIENT = 1.5
MAX_OBSTACLES = 2

OBSTACLES = (
    "obstacle_small_0",
    "obstacle_small_1",
    "obstacle_small_2",
    "obstacle_large_0",
    "obstacle_large_1",
    "obstacle_large_2",
)


class Obstacles(Entity):
    """At most two obstacles on screen, each followed by a random gap."""

    def __init__(self) -> None:
        super().__init__()
        self._rand_type = Random(0, len(OBSTACLES) - 1)
        self._gaps: List[int] = [0] * MAX_OBSTACLES

    def update_with_speed(self, dt: float, speed: float) -> None:
        """Move obstacles left and add a new one when there is room."""
        rate = speed * (FPS / 1000) * dt
        for sprite in self.sprites:
            if sprite is not None:
                sprite.x -= rate
        if self._should_add_obstacle():
            self._add_obstacle(speed)

    def reset(self) -> None:
        """Remove every obstacle."""
        self.sprites.clear()

    def _add_obstacle(self, speed: float) -> None:
        obstacle = Sprite(
            "spritesheet",
            OBSTACLES[self._rand_type()],
            Vector2(float(WINDOW_WIDTH), 0.0),
        )
        obstacle.y = GROUND_POSITION - obstacle.height + VERTICAL_OFFSET
        gap = self._gap(obstacle.width, speed)
        if len(self.sprites) < MAX_OBSTACLES:
            self._gaps[len(self.sprites)] = gap
            self.sprites.append(obstacle)
        else:
            self.sprites[0] = obstacle
            self._gaps[0] = gap
            self.sprites[0], self.sprites[-1] = self.sprites[-1], self.sprites[0]
            self._gaps[0], self._gaps[-1] = self._gaps[-1], self._gaps[0]

    @staticmethod
    def _gap(width: int, speed: float) -> int:
        min_gap = width * speed + MIN_GAP * MIN_GAP_COEFFICIENT
        max_gap = min_gap * MAX_GAP_COEFFICIENT
        return Random(int(min_gap), int(max_gap))()

    def _should_add_obstacle(self) -> bool:
        if not self.sprites:
            return True
        front = self.sprites[0]
        # with two obstacles, wait for the first to leave the screen
        if len(self.sprites) > 1 and front.x > -front.width:
            return False
        last = self.sprites[-1]
        return last.x + last.width + self._gaps[len(self.sprites) - 1] < WINDOW_WIDTH