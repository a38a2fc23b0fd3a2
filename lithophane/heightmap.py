import numpy as np

from .config import LEVELS, INPUT_RANGE
from .errors import UnsupportedPixelShape
from .quantize import levels_from_rgb


def build_heightmap(pixels, levels=LEVELS, input_range=INPUT_RANGE):
    """
    Converts a grid of pixels into a grid of quantized height levels.

    Args:
        pixels (array-like): Either a flat image of shape (width, height, channels)
            or a framed image of shape (frames, width, height, channels). Framed
            sources (animated GIFs) only contribute their first frame.
        levels (int): Number of physical layers.
        input_range (int): Size of the channel value range.

    Returns:
        numpy.ndarray: Integer array of shape (width, height), indexed [w, h].

    Raises:
        UnsupportedPixelShape: If the layout is not one of the two above, has
            fewer than 3 channels, or is empty.
    """
    pixels = np.asarray(pixels)

    if pixels.ndim == 4:
        # frames are ignored, only the first one is used
        if pixels.shape[0] == 0:
            raise UnsupportedPixelShape("Framed image has no frames.")
        pixels = pixels[0]
    elif pixels.ndim != 3:
        raise UnsupportedPixelShape(
            f"Expected a 3D [width, height, channels] or 4D [frames, width, height, channels] "
            f"pixel grid, got {pixels.ndim} dimensions with shape {pixels.shape}."
        )

    width, height, channels = pixels.shape
    if channels < 3:
        raise UnsupportedPixelShape(f"Expected at least 3 color channels, got {channels}.")
    if width == 0 or height == 0:
        raise UnsupportedPixelShape(f"Image has no pixels (width={width}, height={height}).")

    return levels_from_rgb(pixels[..., :3], levels, input_range)
