"""Tests for randomized pacing waits."""
import random

from browser_toolkit.page.pacing import random_wait_ms, DEFAULT_WAIT


def test_wait_within_bounds():
    random.seed(7)
    for _ in range(200):
        ms = random_wait_ms(3000, 7000)
        assert 3000 <= ms <= 7000
        assert isinstance(ms, int)


def test_bounds_are_inclusive():
    seen = {random_wait_ms(1, 2) for _ in range(200)}
    assert seen == {1, 2}


def test_equal_bounds():
    assert random_wait_ms(500, 500) == 500


def test_reversed_bounds_are_swapped():
    for _ in range(50):
        assert 100 <= random_wait_ms(200, 100) <= 200


def test_negative_bounds_clamped():
    assert random_wait_ms(-50, -10) == 0


def test_non_numeric_bounds_fall_back():
    ms = random_wait_ms(None, "abc")
    assert DEFAULT_WAIT[0] <= ms <= DEFAULT_WAIT[1]
