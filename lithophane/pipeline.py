import io

from .config import BASE, SCALE
from .errors import InvalidSettings
from .mesh import iter_areas
from .stl import write_ascii, write_binary
from .triangulate import iter_triangles


def check_settings(base=BASE, scale=SCALE, levels=None):
    # levels < 1 would put every cell below level 0
    if levels is not None and levels < 1:
        raise InvalidSettings(f"levels must be at least 1, got {levels}")
    if scale <= 0:
        raise InvalidSettings(f"scale must be positive, got {scale}")
    if base < 0:
        raise InvalidSettings(f"base must not be negative, got {base}")


def lithophane_triangles(heightmap, base=BASE, scale=SCALE):
    # levels -> areas -> triangles, one cell at a time
    return iter_triangles(iter_areas(heightmap, base, scale))


def write_stl(heightmap, stream, ascii=False, base=BASE, scale=SCALE):
    """
    Streams the lithophane for a heightmap into a seekable binary stream.

    Args:
        heightmap (numpy.ndarray): (width, height) grid of levels.
        stream: Writable, seekable binary file object.
        ascii (bool): Write ASCII STL instead of binary STL.
        base (float): Minimum thickness under the shortest point, in mm.
        scale (float): Layer height and pixel footprint, in mm.

    Returns:
        int: Number of triangles written.
    """
    triangles = lithophane_triangles(heightmap, base, scale)
    if not ascii:
        return write_binary(triangles, stream)

    text = io.TextIOWrapper(stream, encoding='ascii', newline='')
    try:
        count = write_ascii(triangles, text)
        text.flush()
    finally:
        # Hand the underlying stream back to the caller still open
        text.detach()
    return count
