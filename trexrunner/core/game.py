"""Game: owns the window and audio and runs the main loop of a stage."""

from __future__ import annotations

from typing import Optional

import pygame

from trexrunner.core import resource_manager
from trexrunner.core.audio import Audio
from trexrunner.core.events import get_events
from trexrunner.core.sprite import Sprite
from trexrunner.core.spritesheet import SpritesheetFiles
from trexrunner.core.stage import Stage
from trexrunner.core.timer import Timer
from trexrunner.core.types import Frame
from trexrunner.core.window import Window


class Game:
    """Runs a stage in a window until a quit event arrives."""

    FRAME_RATE = 60
    draw_collision_frames = False

    def __init__(self, title: str, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.window = Window(title, width, height)
        try:
            self.audio = Audio()
        except Exception:
            self.window.close()
            raise
        self._running = True
        self._stage: Optional[Stage] = None
        self._clock = pygame.time.Clock()
        events = get_events()
        events.add_event_listener("on_quit", self._on_quit)
        events.add_event_listener("on_play_sound", self._on_play_sound)

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _on_quit(self) -> None:
        self._running = False

    def _on_play_sound(self, sound: str) -> None:
        self.audio.play_audio(sound)

    def load_audio(self, path: str, sound_id: str) -> None:
        self.audio.load_audio(path, sound_id)

    def load_spritesheet(self, sheet_id: str, files: SpritesheetFiles) -> None:
        resource_manager.load_spritesheet(sheet_id, files)

    def start(self, stage: Stage) -> None:
        """Initialise ``stage`` and run the frame loop until quit."""
        self._stage = stage
        stage.init()
        frame_timer = Timer()
        while self._running:
            delta = float(frame_timer.milliseconds())
            frame_timer.reset()
            self.window.clear_screen()
            for entity in stage.entities:
                for sprite in entity.sprites:
                    if sprite is not None:
                        self._draw_sprite(sprite)
            stage.update(delta)
            self.window.draw_screen(stage.clip_frame)
            self._clock.tick(self.FRAME_RATE)

    def _draw_sprite(self, sprite: Sprite) -> None:
        sheet = resource_manager.get_spritesheet(sprite.spritesheet_id)
        frame_id = sprite.frame_id
        frame = sheet.get_frame(frame_id)
        dest = Frame(int(sprite.x), int(sprite.y), frame.width, frame.height)
        self.window.draw_image(sheet.image, frame, dest, sprite.alpha)
        if self.draw_collision_frames:
            for rect in sheet.get_collision_frames(frame_id):
                self.window.draw_rectangle(
                    Frame(rect.x + int(sprite.x), rect.y + int(sprite.y), rect.width, rect.height)
                )

    def close(self) -> None:
        self.window.close()