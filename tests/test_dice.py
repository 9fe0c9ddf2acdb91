import pytest

from arenabattler.dice import roll


def test_roll_stays_in_range():
    results = {roll(1, 3) for _ in range(500)}
    assert results <= {1, 2, 3}


def test_roll_covers_whole_range():
    results = {roll(1, 3) for _ in range(1000)}
    assert results == {1, 2, 3}


def test_roll_single_value():
    assert roll(5, 5) == 5


def test_roll_zero_based_range():
    assert all(0 <= roll(0, 4) <= 4 for _ in range(200))


def test_roll_empty_range_raises():
    with pytest.raises(ValueError):
        roll(3, 1)