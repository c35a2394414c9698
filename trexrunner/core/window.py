"""Game window: drawing surface and input event source."""

from __future__ import annotations

import os
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from trexrunner.core.events import get_events  # noqa: E402
from trexrunner.core.image import Image  # noqa: E402
from trexrunner.core.types import Frame  # noqa: E402

BACKGROUND = (0xF7, 0xF7, 0xF7)
OUTLINE = (255, 0, 0)


class WindowError(RuntimeError):
    """Raised when the display cannot be set up; names the failing step."""

    def __init__(self, loc: str) -> None:
        super().__init__(f"SDL error ({loc}): {pygame.get_error()}")
        self.loc = loc


class Window:
    """A window with a drawing surface that forwards input as events."""

    def __init__(self, title: str, width: int, height: int) -> None:
        pygame.init()
        if not pygame.display.get_init():
            raise WindowError("SDL_Init")
        try:
            self.surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise WindowError("SDL_CreateWindow") from exc
        pygame.display.set_caption(title)
        self._open = True

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def clear_screen(self) -> None:
        """Fill the whole window with the background colour."""
        clip = self.surface.get_clip()
        self.surface.set_clip(None)
        self.surface.fill(BACKGROUND)
        self.surface.set_clip(clip)

    def draw_screen(self, clip_frame: Optional[Frame]) -> None:
        """Restrict later drawing to ``clip_frame``, handle input and present."""
        if clip_frame is not None:
            self.surface.set_clip(
                pygame.Rect(clip_frame.x, clip_frame.y, clip_frame.width, clip_frame.height)
            )
        self.poll_events()
        pygame.display.flip()

    def draw_image(self, image: Image, src: Frame, dest: Frame, alpha: int) -> None:
        """Copy the ``src`` area of ``image`` onto ``dest`` with the given opacity."""
        area = pygame.Rect(src.x, src.y, src.width, src.height).clip(image.surface.get_rect())
        if area.width <= 0 or area.height <= 0:
            return
        piece = image.surface.subsurface(area).copy()
        if (dest.width, dest.height) != (src.width, src.height):
            piece = pygame.transform.scale(piece, (max(dest.width, 0), max(dest.height, 0)))
        piece.set_alpha(alpha)
        self.surface.blit(piece, (dest.x, dest.y))

    def draw_rectangle(self, rect: Frame) -> None:
        """Draw the outline of ``rect`` in red."""
        pygame.draw.rect(
            self.surface, OUTLINE, pygame.Rect(rect.x, rect.y, rect.width, rect.height), 1
        )

    def poll_events(self) -> None:
        """Publish quit and key events; key codes are reduced to their low byte."""
        events = get_events()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events.publish("on_quit")
            elif event.type == pygame.KEYDOWN:
                events.publish("on_key_down", event.key & 0xFF)
            elif event.type == pygame.KEYUP:
                events.publish("on_key_up", event.key & 0xFF)

    def close(self) -> None:
        """Close the window and shut the media layer down."""
        if self._open:
            self._open = False
            pygame.quit()