import cv2
import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def png_path(tmp_path):
    # 3 pixels wide, 2 tall: black everywhere except a white top-right pixel
    img = np.zeros((2, 3, 3), dtype=np.uint8)
    img[0, 2] = 255
    path = tmp_path / "input.png"
    cv2.imwrite(str(path), img)
    return path


@pytest.fixture
def gif_path(tmp_path):
    frames = [Image.new('RGB', (3, 2), color) for color in ((0, 0, 0), (255, 255, 255))]
    path = tmp_path / "animated.gif"
    frames[0].save(path, save_all=True, append_images=frames[1:], duration=100, loop=0)
    return path


@pytest.fixture
def text_path(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("this is not an image")
    return path
