"""The running, jumping and ducking dinosaur."""

from __future__ import annotations

import enum
import math
from typing import Callable

from trexrunner.core.entity import Entity
from trexrunner.core.events import get_events
from trexrunner.core.rng import Random
from trexrunner.core.sprite import SpriteAnimated
from trexrunner.core.types import Vector2
from trexrunner.game.shared import FPS, INTRO_DURATION

X_POS = 50.0
Y_POS = 93.0
INITIAL_JUMP_VELOCITY = -10.0
GRAVITY = 0.6
MIN_JUMP_POSITION = Y_POS - 35
DROP_COEFFICIENT = 3.0

KEY_SPACE = 32
KEY_DOWN = 81
KEY_UP = 82


class TRexState(enum.Enum):
    IDLE = enum.auto()
    RUNNING = enum.auto()
    JUMPING = enum.auto()
    DUCKING = enum.auto()
    CRASHED = enum.auto()


class TRex(Entity):
    """The player character, driven by the arrow and space keys."""

    def __init__(self) -> None:
        super().__init__()
        sprite = SpriteAnimated("spritesheet", Vector2(0.0, Y_POS), 12)
        sprite.add_animation("idle", ["trex_idle_0"])
        sprite.add_animation("blink", ["trex_blink_0"])
        sprite.add_animation("jumping", ["trex_idle_0"])
        sprite.add_animation("ducking", ["trex_ducking_0", "trex_ducking_1"])
        sprite.add_animation("running", ["trex_running_0", "trex_running_1"])
        sprite.add_animation("crashed", ["trex_crashed"])
        sprite.set_animation("idle")
        self.sprites.append(sprite)

        self._duck_key_down = False
        self._jump_key_down = False
        self._reached_min_height = False
        self._cancel_jump = False
        self._did_start_game = False
        self._vertical_velocity = 0.0
        self._start_callback: Callable[[], None] = lambda: None
        self._state = TRexState.IDLE
        self._prev_state = TRexState.RUNNING
        self._blink_rand = Random(1000, 7000)
        self._blink_time = self._blink_rand()

        events = get_events()
        events.add_event_listener("on_key_down", self._on_key_down)
        events.add_event_listener("on_key_up", self._on_key_up)

    @property
    def state(self) -> TRexState:
        return self._state

    def _on_key_down(self, key: int) -> None:
        if key == KEY_DOWN:
            self._duck_key_down = True
        if key in (KEY_UP, KEY_SPACE):
            self._jump_key_down = True

    def _on_key_up(self, key: int) -> None:
        if key == KEY_DOWN:
            self._duck_key_down = False
        if key in (KEY_UP, KEY_SPACE):
            self._jump_key_down = False

    def set_start_callback(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` when the first jump lands."""
        self._start_callback = callback

    def update(self, dt: float) -> None:
        super().update(dt)
        sprite = self.sprites[0]
        if not isinstance(sprite, SpriteAnimated):
            return
        if self._did_start_game and sprite.x < X_POS:
            # intro: move in from the left
            sprite.x += math.ceil(X_POS / INTRO_DURATION * dt)
        if self._state is TRexState.IDLE:
            self._blink(dt, sprite)
        if self._state is TRexState.JUMPING:
            self._update_jump(dt, sprite)
        self._update_animation(sprite)
        self._handle_controls()

    def _blink(self, dt: float, sprite: SpriteAnimated) -> None:
        self._blink_time -= int(dt)
        current = sprite.curr_animation
        if self._blink_time < 0:
            if current == "idle":
                sprite.set_animation("blink")
                self._blink_time = 100
            if current == "blink":
                sprite.set_animation("idle")
                self._blink_time = self._blink_rand()

    def _handle_controls(self) -> None:
        state = self._state
        if state is TRexState.CRASHED:
            return
        if self._state is TRexState.RUNNING and self._duck_key_down:
            self._state = TRexState.DUCKING
        if self._state is TRexState.DUCKING and not self._duck_key_down:
            self._state = TRexState.RUNNING
        if self._state in (TRexState.RUNNING, TRexState.IDLE) and self._jump_key_down:
            get_events().publish("on_play_sound", "jump")
            self._state = TRexState.JUMPING
            self._vertical_velocity = INITIAL_JUMP_VELOCITY
        if self._state is TRexState.JUMPING and not self._jump_key_down:
            self._shorten_jump()
        if self._state is TRexState.JUMPING and self._duck_key_down and not self._cancel_jump:
            self._cancel_jump = True
            self._vertical_velocity = 1.0

    def _update_jump(self, dt: float, sprite: SpriteAnimated) -> None:
        offset = dt / (1000.0 / FPS)
        if self._cancel_jump:
            sprite.y += self._vertical_velocity * DROP_COEFFICIENT * offset
        else:
            sprite.y += self._vertical_velocity * offset
        self._vertical_velocity += GRAVITY * offset
        if sprite.y <= MIN_JUMP_POSITION:
            self._reached_min_height = True
        if sprite.y >= Y_POS:
            if not self._did_start_game:
                self._start_callback()
                self._did_start_game = True
            self.reset()

    def _shorten_jump(self) -> None:
        # moving up faster than half the initial velocity: slow down so the
        # peak comes sooner and the descent starts earlier
        half = INITIAL_JUMP_VELOCITY / 2
        if self._reached_min_height and self._vertical_velocity < half:
            self._vertical_velocity = half

    def crash(self) -> None:
        self._state = TRexState.CRASHED

    def _update_animation(self, sprite: SpriteAnimated) -> None:
        if self._state is self._prev_state:
            return
        animation = {
            TRexState.RUNNING: "running",
            TRexState.JUMPING: "jumping",
            TRexState.DUCKING: "ducking",
            TRexState.CRASHED: "crashed",
        }.get(self._state)
        if animation is not None:
            sprite.set_animation(animation)
        self._prev_state = self._state

    def reset(self) -> None:
        """Put the dinosaur back on the ground, running."""
        self.sprites[0].y = Y_POS
        self._state = TRexState.RUNNING
        self._vertical_velocity = 0.0
        self._reached_min_height = False
        self._cancel_jump = False