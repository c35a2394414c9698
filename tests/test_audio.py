import os
import wave

os.environ["SDL_AUDIODRIVER"] = "dummy"
os.environ["SDL_VIDEODRIVER"] = "dummy"

import pygame
import pytest

from trexrunner.core.audio import Audio, AudioError


@pytest.fixture
def mixer():
    pygame.mixer.init()
    yield
    pygame.mixer.quit()


def _write_wav(path):
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(22050)
        out.writeframes(b"\x00\x00" * 2205)
    return str(path)


def test_requires_initialized_mixer():
    pygame.mixer.quit()
    with pytest.raises(AudioError, match="not initialized"):
        Audio()


def test_load_registers_sound(mixer, tmp_path):
    audio = Audio()
    audio.load_audio(_write_wav(tmp_path / "jump.wav"), "jump")
    assert audio.sound_ids == {"jump"}


def test_reload_same_id_keeps_one_entry(mixer, tmp_path):
    audio = Audio()
    path = _write_wav(tmp_path / "hit.wav")
    audio.load_audio(path, "hit")
    audio.load_audio(path, "hit")
    assert audio.sound_ids == {"hit"}


def test_missing_file_raises(mixer, tmp_path):
    audio = Audio()
    missing = str(tmp_path / "nope.wav")
    with pytest.raises(AudioError, match="Unable to load audio file"):
        audio.load_audio(missing, "nope")
    assert audio.sound_ids == frozenset()


def test_invalid_file_raises(mixer, tmp_path):
    audio = Audio()
    bad = tmp_path / "bad.wav"
    bad.write_bytes(b"not a sound at all")
    with pytest.raises(AudioError, match="SDL failed to load audio file"):
        audio.load_audio(str(bad), "bad")


def test_play_unknown_id_raises(mixer):
    audio = Audio()
    with pytest.raises(AudioError, match="missing audio ID achievement"):
        audio.play_audio("achievement")