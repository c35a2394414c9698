"""Distance score, high score and achievement flashing."""

from __future__ import annotations

from dataclasses import dataclass

from trexrunner.core.entity import Entity
from trexrunner.core.events import get_events
from trexrunner.core.sprite import Sprite
from trexrunner.core.types import Vector2
from trexrunner.game.shared import FPS, WINDOW_WIDTH

DISTANCE_COEFFICIENT = 0.025
CHAR_OFFSET = 11
MIN_DIGITS = 5
ACHIEVEMENT_DISTANCE = 100
HIGH_SCORE_ALPHA = 208
FLASH_ITERATIONS = 3
FLASH_DURATION = 1000.0 / 4.0


@dataclass
class Achievement:
    """State of the flashing shown after reaching a score milestone."""

    has_achievement: bool = False
    last_achievement: int = 0
    flash_iterations: int = 0
    flash_timer: float = 0.0


class Score(Entity):
    """Score digits drawn at the top right, with the high score beside them."""

    def __init__(self) -> None:
        super().__init__()
        self.high_score = 0
        self.distance = 0.0
        self.achievement = Achievement()
        self._should_show_score = True

    @property
    def score(self) -> int:
        """Current score derived from the distance run."""
        return int(DISTANCE_COEFFICIENT * self.distance)

    def update_with_speed(self, dt: float, speed: float) -> None:
        """Advance the distance and rebuild the digit sprites."""
        self.distance += speed * (FPS / 1000) * dt
        self.sprites.clear()

        score = self.score
        if self.achievement.has_achievement:
            score = self.achievement.last_achievement
            self._score_flashing(dt)
        elif score > 0 and score % ACHIEVEMENT_DISTANCE == 0:
            get_events().publish("on_play_sound", "achievement")
            self.achievement.has_achievement = True
            self.achievement.flash_iterations = FLASH_ITERATIONS
            self.achievement.last_achievement = score

        alpha = 255 if self._should_show_score else 0
        offset = self._draw_score(score, WINDOW_WIDTH, alpha)
        if self.high_score > 0:
            offset = self._draw_score(self.high_score, offset, HIGH_SCORE_ALPHA)
            self._draw_character("i", offset - CHAR_OFFSET * 2, HIGH_SCORE_ALPHA)
            self._draw_character("h", offset - CHAR_OFFSET * 3, HIGH_SCORE_ALPHA)

    def update_high_score(self) -> None:
        """Keep the better of the high score and the current score."""
        self.high_score = max(self.high_score, self.score)

    def reset_score(self) -> None:
        """Start counting distance from zero."""
        self.distance = 0.0

    def _draw_score(self, score: int, x_offset: float, alpha: int) -> float:
        x_pos = 0.0
        for i in range(max(self._number_of_digits(score), MIN_DIGITS)):
            score, digit = divmod(score, 10)
            x_pos = float(x_offset - CHAR_OFFSET * (i + 2))
            self._draw_character(str(digit), x_pos, alpha)
        return x_pos

    def _draw_character(self, character: str, x_pos: float, alpha: int) -> None:
        sprite = Sprite("spritesheet", f"char_{character}", Vector2(x_pos, 10.0))
        sprite.alpha = alpha
        self.sprites.append(sprite)

    @staticmethod
    def _number_of_digits(n: int) -> int:
        return 0 if n == 0 else len(str(abs(n)))

    def _score_flashing(self, dt: float) -> None:
        self._should_show_score = True
        achievement = self.achievement
        if achievement.flash_iterations > 0:
            achievement.flash_timer += dt
            if achievement.flash_timer < FLASH_DURATION:
                self._should_show_score = False
            elif achievement.flash_timer > FLASH_DURATION * 2:
                achievement.flash_iterations -= 1
                achievement.flash_timer = 0.0
        else:
            achievement.has_achievement = False
            achievement.flash_timer = 0.0