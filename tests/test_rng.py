import pytest

from trexrunner.core.rng import Random


def test_values_stay_within_inclusive_range():
    rng = Random(30, 70)
    values = [rng() for _ in range(500)]
    assert all(30 <= v <= 70 for v in values)


def test_both_endpoints_are_reachable():
    rng = Random(0, 1)
    values = {rng() for _ in range(300)}
    assert values == {0, 1}


def test_single_value_range():
    rng = Random(5, 5)
    assert [rng() for _ in range(10)] == [5] * 10


def test_inverted_range_is_rejected():
    with pytest.raises(ValueError):
        Random(10, 0)