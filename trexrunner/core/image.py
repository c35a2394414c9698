"""Raster image loaded from disk."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


class ImageError(RuntimeError):
    """Raised when an image file cannot be loaded."""


class Image:
    """Pixel data of an image file with its dimensions."""

    def __init__(self, filename: str) -> None:
        try:
            self.surface = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            raise ImageError(f"Unable to load image {filename}") from exc
        self.width, self.height = self.surface.get_size()
        self.bpp = self.surface.get_bytesize()