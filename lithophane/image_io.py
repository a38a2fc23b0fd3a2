import io
import os

import cv2
import numpy as np
from PIL import Image, ImageSequence, UnidentifiedImageError

from .errors import ImageUnreadable

# Pixel grids are indexed [x, y, channel] (or [frame, x, y, channel]), so
# row-major image arrays are transposed on the way in.


def _open_animated(source):
    """
    Returns the framed [frames, width, height, 3] grid of a multi-frame image,
    or None if the source is a still image or not something Pillow reads.
    """
    try:
        with Image.open(source) as img:
            if getattr(img, 'n_frames', 1) > 1:
                frames = [np.array(frame.convert('RGB')) for frame in ImageSequence.Iterator(img)]
                return np.stack(frames).transpose(0, 2, 1, 3)
    except (UnidentifiedImageError, OSError):
        pass
    return None


def _open_still(source, name):
    # Pillow fallback for still formats OpenCV was built without (e.g. GIF)
    try:
        with Image.open(source) as img:
            return np.array(img.convert('RGB')).transpose(1, 0, 2)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageUnreadable(f"Could not decode image: {name}") from e


def _from_bgr(img):
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB).transpose(1, 0, 2)


def load_pixels(input_path):
    """
    Loads an image file into a pixel grid.

    Args:
        input_path (str): Path to the image.

    Returns:
        numpy.ndarray: A [width, height, 3] grid for still images, or a
            [frames, width, height, 3] grid for animated ones.

    Raises:
        ImageUnreadable: If the path does not exist or is not a decodable image.
    """
    if not os.path.isfile(input_path):
        raise ImageUnreadable(f"Image not found at {input_path}")

    framed = _open_animated(input_path)
    if framed is not None:
        return framed

    img = cv2.imread(input_path, cv2.IMREAD_COLOR)
    if img is None:
        return _open_still(input_path, input_path)
    return _from_bgr(img)


def decode_pixels(data):
    """Same as load_pixels, for an image already held in memory as bytes."""
    if not data:
        raise ImageUnreadable("Empty image data.")

    framed = _open_animated(io.BytesIO(data))
    if framed is not None:
        return framed

    img = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_COLOR)
    if img is None:
        return _open_still(io.BytesIO(data), "<uploaded data>")
    return _from_bgr(img)
