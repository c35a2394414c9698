"""The game's only stage: intro, running and game over."""

from __future__ import annotations

import enum

from trexrunner.core.events import get_events
from trexrunner.core.stage import Stage
from trexrunner.core.types import Frame
from trexrunner.game.clouds import Clouds
from trexrunner.game.horizon import Horizon
from trexrunner.game.obstacles import Obstacles
from trexrunner.game.restart import Restart
from trexrunner.game.score import Score
from trexrunner.game.shared import INTRO_DURATION, WINDOW_WIDTH
from trexrunner.game.trex import TRex

DEFAULT_SPEED = 6.0
CLEAR_TIME = 3000.0
MAX_SPEED = 13.0

KEY_SPACE = 32
KEY_UP = 82


class RunnerState(enum.Enum):
    INTRO = enum.auto()
    RUNNING = enum.auto()
    GAME_OVER = enum.auto()


class MainStage(Stage):
    """Runs the dinosaur past obstacles until it crashes."""

    def __init__(self) -> None:
        super().__init__()
        self._running_time = 0.0
        self._speed = DEFAULT_SPEED
        self._state = RunnerState.INTRO
        self.clouds = Clouds()
        self.restart = Restart()
        self.horizon = Horizon()
        self.obstacles = Obstacles()
        self.trex = TRex()
        self.score = Score()

    @property
    def state(self) -> RunnerState:
        return self._state

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def running_time(self) -> float:
        return self._running_time

    def init(self) -> None:
        for entity in (self.clouds, self.horizon, self.obstacles, self.score, self.trex):
            self.add_entity(entity)
        self.clip_frame = Frame(0, 0, 45, 150)
        self.trex.set_start_callback(self._start_running)
        get_events().add_event_listener("on_key_up", self._on_key_up)

    def _start_running(self) -> None:
        self._state = RunnerState.RUNNING

    def _on_key_up(self, key: int) -> None:
        if key in (KEY_SPACE, KEY_UP) and self._state is RunnerState.GAME_OVER:
            self._reset_game()

    def update(self, dt: float) -> None:
        if self._state is RunnerState.INTRO:
            self.trex.update(dt)
        if self._state is RunnerState.RUNNING:
            self._update_running(dt)

    def _update_running(self, dt: float) -> None:
        if self._speed < MAX_SPEED:
            self._speed += 0.001
        self._running_time += dt
        self.trex.update(dt)

        if self.clip_frame.width < WINDOW_WIDTH:
            # intro transition: widen the view
            rate = WINDOW_WIDTH / INTRO_DURATION * dt * 2
            self.clip_frame.width += int(rate)
        else:
            self.horizon.update_with_speed(dt, self._speed)
            self.clouds.update_with_speed(dt, self._speed)
            self.score.update_with_speed(dt, self._speed)

        if self._running_time > CLEAR_TIME:
            self.obstacles.update_with_speed(dt, self._speed)
            if self.trex.has_collision(self.obstacles):
                get_events().publish("on_play_sound", "hit")
                self.trex.crash()
                self.trex.update(dt)
                self.score.update_high_score()
                self.add_entity(self.restart)
                self._state = RunnerState.GAME_OVER

    def _reset_game(self) -> None:
        self.remove_entity(self.restart)
        self.trex.reset()
        self.obstacles.reset()
        self.score.reset_score()
        self._speed = DEFAULT_SPEED
        self._running_time = 0.0
        self._state = RunnerState.RUNNING