import numpy as np
import pytest

from lithophane.quantize import luminance, normalize_value, rgb_to_level, levels_from_rgb


def test_white_is_shortest_level():
    assert rgb_to_level(255, 255, 255) == 0


def test_black_is_tallest_level():
    assert rgb_to_level(0, 0, 0) == 15


def test_luminance_uses_luma_weights():
    assert luminance(255, 0, 0) == pytest.approx(0.2989 * 255)
    assert luminance(0, 255, 0) == pytest.approx(0.5870 * 255)
    assert luminance(0, 0, 255) == pytest.approx(0.1140 * 255)


def test_normalize_value_floors_at_level_boundaries():
    # each level covers 16 gray values with the defaults
    assert normalize_value(0) == 15
    assert normalize_value(15.99) == 15
    assert normalize_value(16) == 14
    assert normalize_value(255) == 0


def test_level_is_non_increasing_in_luminance():
    levels = [rgb_to_level(v, v, v) for v in range(256)]
    assert all(a >= b for a, b in zip(levels, levels[1:]))
    assert set(levels) == set(range(16))


def test_custom_level_count_and_range():
    assert rgb_to_level(0, 0, 0, levels=4) == 3
    assert rgb_to_level(255, 255, 255, levels=4) == 0
    assert normalize_value(50, from_range=100, to_levels=10) == 4


def test_vectorized_levels_match_scalar():
    rng = np.random.default_rng(7)
    rgb = rng.integers(0, 256, size=(6, 5, 3))
    levels = levels_from_rgb(rgb)
    assert levels.shape == (6, 5)
    for x in range(6):
        for y in range(5):
            assert levels[x, y] == rgb_to_level(*(int(c) for c in rgb[x, y]))
