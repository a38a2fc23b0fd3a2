import cv2
import numpy as np
import pytest

from lithophane.errors import ImageUnreadable
from lithophane.image_io import load_pixels, decode_pixels


def test_still_image_is_indexed_x_then_y(png_path):
    pixels = load_pixels(str(png_path))
    assert pixels.shape == (3, 2, 3)
    assert pixels[2, 0].tolist() == [255, 255, 255]
    assert pixels[0, 0].tolist() == [0, 0, 0]


def test_channels_come_out_as_rgb(tmp_path):
    img = np.zeros((1, 1, 3), dtype=np.uint8)
    img[0, 0] = (255, 0, 0)  # blue in OpenCV's BGR order
    path = tmp_path / "blue.png"
    cv2.imwrite(str(path), img)
    assert load_pixels(str(path))[0, 0].tolist() == [0, 0, 255]


def test_animated_image_is_framed(gif_path):
    pixels = load_pixels(str(gif_path))
    assert pixels.shape == (2, 3, 2, 3)
    assert (pixels[0] == 0).all()
    assert (pixels[1] == 255).all()


def test_missing_file_is_unreadable(tmp_path):
    with pytest.raises(ImageUnreadable):
        load_pixels(str(tmp_path / "missing.png"))


def test_non_image_is_unreadable(text_path):
    with pytest.raises(ImageUnreadable):
        load_pixels(str(text_path))


def test_unreadable_is_a_file_not_found_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_pixels(str(tmp_path / "missing.png"))


def test_decode_pixels_matches_load_pixels(png_path):
    data = png_path.read_bytes()
    assert (decode_pixels(data) == load_pixels(str(png_path))).all()


def test_decode_animated_bytes(gif_path):
    assert decode_pixels(gif_path.read_bytes()).shape == (2, 3, 2, 3)


@pytest.mark.parametrize("data", [b"", b"not an image at all"])
def test_decode_garbage_is_unreadable(data):
    with pytest.raises(ImageUnreadable):
        decode_pixels(data)
