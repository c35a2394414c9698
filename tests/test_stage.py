import pytest

from trexrunner.core.entity import Entity
from trexrunner.core.stage import Stage
from trexrunner.core.types import Frame


class DemoStage(Stage):
    def __init__(self):
        super().__init__()
        self.elapsed = 0.0

    def init(self):
        self.clip_frame = Frame(0, 0, 45, 150)

    def update(self, dt):
        self.elapsed += dt


def test_stage_is_abstract():
    with pytest.raises(TypeError):
        Stage()


def test_entities_kept_in_insertion_order():
    stage = DemoStage()
    a, b, c = Entity(), Entity(), Entity()
    for entity in (a, b, c):
        stage.add_entity(entity)
    assert stage.entities == [a, b, c]


def test_remove_entity():
    stage = DemoStage()
    a, b = Entity(), Entity()
    stage.add_entity(a)
    stage.add_entity(b)
    stage.remove_entity(a)
    assert stage.entities == [b]


def test_remove_missing_entity_raises():
    stage = DemoStage()
    with pytest.raises(ValueError):
        stage.remove_entity(Entity())


def test_entities_returns_copy():
    stage = DemoStage()
    stage.add_entity(Entity())
    stage.entities.clear()
    assert len(stage.entities) == 1


def test_clip_frame_defaults_to_none_until_init():
    stage = DemoStage()
    assert stage.clip_frame is None
    stage.init()
    assert stage.clip_frame == Frame(0, 0, 45, 150)