"""Sound effects loaded from WAV files and played by ID."""

from __future__ import annotations

import os
from typing import Dict, FrozenSet

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


class AudioError(RuntimeError):
    """Raised when audio cannot be initialised, loaded or played."""


class Audio:
    """A store of sounds that can be played by their ID."""

    def __init__(self) -> None:
        if not pygame.mixer.get_init():
            raise AudioError("The SDL audio subsystem was not initialized")
        self._store: Dict[str, pygame.mixer.Sound] = {}

    @property
    def sound_ids(self) -> FrozenSet[str]:
        """IDs of the sounds loaded so far."""
        return frozenset(self._store)

    def load_audio(self, path: str, sound_id: str) -> None:
        """Load the sound file at ``path`` under ``sound_id``."""
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            raise AudioError(f"Unable to load audio file {path}") from exc
        try:
            sound = pygame.mixer.Sound(path)
        except pygame.error as exc:
            raise AudioError(f"SDL failed to load audio file {path}") from exc
        self._store[sound_id] = sound

    def play_audio(self, sound_id: str) -> None:
        """Start playing the sound loaded under ``sound_id``."""
        try:
            sound = self._store[sound_id]
        except KeyError:
            raise AudioError(
                f"Failed to play audio, missing audio ID {sound_id}"
            ) from None
        sound.play()