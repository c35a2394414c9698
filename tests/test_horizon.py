import json
import os

os.environ["SDL_VIDEODRIVER"] = "dummy"

import pygame
import pytest

from trexrunner.core.resource_manager import clear_spritesheets, load_spritesheet
from trexrunner.core.spritesheet import SpritesheetFiles
from trexrunner.game.horizon import GROUND_WIDTH, Horizon
from trexrunner.game.shared import WINDOW_HEIGHT


@pytest.fixture
def sheet(tmp_path):
    image = tmp_path / "sheet.png"
    pygame.image.save(pygame.Surface((32, 32)), str(image))
    dictionary = tmp_path / "sheet.json"
    dictionary.write_text(
        json.dumps(
            {
                "ground_0": {"x": 0, "y": 0, "width": 600, "height": 12},
                "ground_1": {"x": 0, "y": 12, "width": 600, "height": 12},
            }
        )
    )
    clear_spritesheets()
    load_spritesheet("spritesheet", SpritesheetFiles(str(image), str(dictionary)))
    yield
    clear_spritesheets()


def test_initial_layout(sheet):
    horizon = Horizon()
    front, back = horizon.sprites
    assert (front.x, front.y) == (0, WINDOW_HEIGHT - 23)
    assert (back.x, back.y) == (GROUND_WIDTH, WINDOW_HEIGHT - 23)
    assert front.frame_id == "ground_0"
    assert back.frame_id == "ground_1"


def test_segments_stay_adjacent(sheet):
    horizon = Horizon()
    for _ in range(50):
        horizon.update_with_speed(100, 7)
        front, back = horizon.sprites
        assert back.x - front.x == pytest.approx(GROUND_WIDTH)
        assert front.x <= 0 < back.x + 1e-9


def test_segment_recycled_after_passing(sheet):
    horizon = Horizon()
    first, second = horizon.sprites
    horizon.update_with_speed(1000, 10)
    assert first.x == pytest.approx(-GROUND_WIDTH)
    assert second.x == pytest.approx(0)
    horizon.update_with_speed(1000, 10)
    assert horizon.sprites[0] is second
    assert horizon.sprites[1] is first
    assert second.frame_id == "ground_1"
    assert first.frame_id in ("ground_0", "ground_1")
    assert second.x == pytest.approx(-GROUND_WIDTH)
    assert first.x == pytest.approx(0)