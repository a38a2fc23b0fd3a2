import math

import numpy as np

from .config import LEVELS, INPUT_RANGE, RED_WEIGHT, GREEN_WEIGHT, BLUE_WEIGHT


def luminance(r, g, b):
    # Takes an RGB value and converts it to a single grayscale value
    return (r * RED_WEIGHT) + (g * GREEN_WEIGHT) + (b * BLUE_WEIGHT)


def normalize_value(value, from_range=INPUT_RANGE, to_levels=LEVELS):
    """
    Maps a grayscale value onto a discrete, inverted level.

    With the defaults, values from 0 to 255 become levels from 15 down to 0:
    dark pixels end up as the tallest (thickest) part of the print.

    Args:
        value (float): Grayscale value in [0, from_range).
        from_range (int): Size of the input range.
        to_levels (int): Number of physical layers.

    Returns:
        int: Level in [0, to_levels - 1].
    """
    # floor, not round: this decides which grays land on a level boundary
    return (to_levels - 1) - math.floor(value * to_levels / from_range)


def rgb_to_level(r, g, b, levels=LEVELS, input_range=INPUT_RANGE):
    return normalize_value(luminance(r, g, b), input_range, levels)


def levels_from_rgb(rgb, levels=LEVELS, input_range=INPUT_RANGE):
    """
    Vectorized rgb_to_level over the last axis of an array.

    Uses the same arithmetic in the same order as the scalar version, so both
    agree element for element.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    gray = luminance(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    return ((levels - 1) - np.floor(gray * levels / input_range)).astype(np.int64)
