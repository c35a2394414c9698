import pytest

from trexrunner.core.types import Frame, Vector2


def test_vector2_holds_coordinates():
    v = Vector2(x=1.5, y=-2.0)
    assert (v.x, v.y) == (1.5, -2.0)


def test_frame_fields_are_mutable():
    frame = Frame(1, 2, 3, 4)
    frame.width += 10
    assert frame == Frame(1, 2, 13, 4)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Frame(0, 0, 10, 10), Frame(5, 5, 10, 10), True),
        (Frame(0, 0, 10, 10), Frame(10, 0, 5, 5), True),
        (Frame(0, 0, 10, 10), Frame(0, 10, 5, 5), True),
        (Frame(0, 0, 10, 10), Frame(11, 0, 5, 5), False),
        (Frame(0, 0, 10, 10), Frame(0, 11, 5, 5), False),
        (Frame(0, 0, 10, 10), Frame(2, 2, 2, 2), True),
        (Frame(-20, -20, 5, 5), Frame(0, 0, 5, 5), False),
    ],
)
def test_has_collision(a, b, expected):
    assert a.has_collision(b) is expected


@pytest.mark.parametrize(
    "a, b",
    [
        (Frame(0, 0, 10, 10), Frame(5, 5, 10, 10)),
        (Frame(0, 0, 10, 10), Frame(30, 30, 1, 1)),
        (Frame(3, 4, 1, 1), Frame(4, 5, 1, 1)),
    ],
)
def test_has_collision_is_symmetric(a, b):
    assert a.has_collision(b) == b.has_collision(a)


def test_frame_collides_with_itself():
    frame = Frame(7, 8, 9, 10)
    assert frame.has_collision(frame) is True