import json

import pygame
import pytest

from trexrunner.core.events import get_events
from trexrunner.core.resource_manager import clear_spritesheets, load_spritesheet
from trexrunner.core.spritesheet import SpritesheetFiles
from trexrunner.game.trex import X_POS, Y_POS, TRex, TRexState

TREX_FRAMES = [
    "trex_idle_0",
    "trex_blink_0",
    "trex_ducking_0",
    "trex_ducking_1",
    "trex_running_0",
    "trex_running_1",
    "trex_crashed",
]


@pytest.fixture(autouse=True)
def sheet(tmp_path):
    clear_spritesheets()
    get_events().clear()
    image = tmp_path / "sheet.bmp"
    pygame.image.save(pygame.Surface((64, 64)), str(image))
    frames = {name: {"x": 0, "y": 0, "width": 44, "height": 47} for name in TREX_FRAMES}
    dictionary = tmp_path / "sheet.json"
    dictionary.write_text(json.dumps(frames))
    load_spritesheet("spritesheet", SpritesheetFiles(str(image), str(dictionary)))
    yield
    clear_spritesheets()
    get_events().clear()


def _jump_and_land(trex):
    get_events().publish("on_key_down", 32)
    trex.update(16)
    get_events().publish("on_key_up", 32)
    for _ in range(500):
        if trex.state is TRexState.RUNNING:
            break
        trex.update(16)


def test_starts_idle():
    trex = TRex()
    assert trex.state is TRexState.IDLE
    assert trex.sprites[0].frame_id == "trex_idle_0"
    assert trex.sprites[0].y == Y_POS


def test_jump_key_starts_jump_and_plays_sound():
    sounds = []
    get_events().add_event_listener("on_play_sound", lambda sound: sounds.append(sound))
    trex = TRex()
    get_events().publish("on_key_down", 32)
    trex.update(16)
    assert trex.state is TRexState.JUMPING
    assert sounds == ["jump"]


def test_jump_lands_and_calls_start_callback_once():
    calls = []
    trex = TRex()
    trex.set_start_callback(lambda: calls.append(True))
    _jump_and_land(trex)
    assert trex.state is TRexState.RUNNING
    assert trex.sprites[0].y == Y_POS
    assert calls == [True]
    _jump_and_land(trex)
    assert calls == [True]


def test_jump_goes_above_ground():
    trex = TRex()
    get_events().publish("on_key_down", 82)
    trex.update(16)
    trex.update(16)
    trex.update(16)
    assert trex.sprites[0].y < Y_POS


def test_intro_moves_in_to_x_position():
    trex = TRex()
    _jump_and_land(trex)
    for _ in range(500):
        trex.update(16)
    assert trex.sprites[0].x == X_POS


def test_duck_while_running():
    trex = TRex()
    trex.reset()
    get_events().publish("on_key_down", 81)
    trex.update(16)
    assert trex.state is TRexState.DUCKING
    trex.update(16)
    assert trex.sprites[0].frame_id in ("trex_ducking_0", "trex_ducking_1")
    get_events().publish("on_key_up", 81)
    trex.update(16)
    assert trex.state is TRexState.RUNNING


def test_crash_ignores_controls():
    trex = TRex()
    trex.crash()
    get_events().publish("on_key_down", 32)
    trex.update(16)
    assert trex.state is TRexState.CRASHED
    assert trex.sprites[0].frame_id == "trex_crashed"


def test_idle_blinks_and_returns():
    trex = TRex()
    trex.update(7001)
    assert trex.sprites[0].curr_animation == "blink"
    trex.update(101)
    assert trex.sprites[0].curr_animation == "idle"