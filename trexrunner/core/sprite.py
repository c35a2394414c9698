"""Positioned sprites drawn from a spritesheet, static or animated."""

from __future__ import annotations

from typing import Dict, List, Sequence

from trexrunner.core.resource_manager import get_spritesheet
from trexrunner.core.timer import Timer
from trexrunner.core.types import Vector2


class Sprite:
    """A single spritesheet frame placed at a position."""

    def __init__(self, spritesheet_id: str, frame_id: str, pos: Vector2) -> None:
        self.x: float = pos.x
        self.y: float = pos.y
        self.width = 0
        self.height = 0
        self.alpha = 255
        self._spritesheet_id = spritesheet_id
        self._frame_id = frame_id
        if frame_id:
            frame = get_spritesheet(spritesheet_id).get_frame(frame_id)
            self.width = frame.width
            self.height = frame.height

    @property
    def spritesheet_id(self) -> str:
        return self._spritesheet_id

    @property
    def frame_id(self) -> str:
        return self._frame_id

    def set_frame(self, frame: str) -> None:
        """Show a different frame; the size is left unchanged."""
        self._frame_id = frame


class SpriteAnimatedError(RuntimeError):
    """Raised for undefined or duplicate animations."""


class SpriteAnimated(Sprite):
    """A sprite cycling through the frames of named animations."""

    def __init__(self, spritesheet_id: str, pos: Vector2, fps: int) -> None:
        super().__init__(spritesheet_id, "", pos)
        self.fps = fps
        self._curr_frame = 0
        self._curr_animation = ""
        self._animations: Dict[str, List[str]] = {}
        self.timer = Timer()

    @property
    def curr_animation(self) -> str:
        return self._curr_animation

    def _frames(self) -> List[str]:
        try:
            return self._animations[self._curr_animation]
        except KeyError:
            raise SpriteAnimatedError(
                f"Unable to get frame ID, the animation {self._curr_animation} is undefined"
            ) from None

    @property
    def frame_id(self) -> str:
        return self._frames()[self._curr_frame]

    def add_animation(self, name: str, frames: Sequence[str]) -> None:
        """Define animation ``name`` as the given sequence of frame IDs."""
        if name in self._animations:
            raise SpriteAnimatedError(f"An animation with the name {name} already exists")
        self._animations[name] = list(frames)

    def set_animation(self, name: str) -> None:
        """Switch to animation ``name`` from its first frame."""
        self._curr_animation = name
        self._curr_frame = 0
        frame = get_spritesheet(self.spritesheet_id).get_frame(self.frame_id)
        self.width = frame.width
        self.height = frame.height

    def update_frame(self) -> None:
        """Advance to the next frame once a frame's time has passed."""
        if self.timer.milliseconds() > 1000 // self.fps:
            self.timer.reset()
            frames = self._frames()
            self._curr_frame = (self._curr_frame + 1) % len(frames)