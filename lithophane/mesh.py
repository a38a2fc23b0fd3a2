from decimal import Decimal, ROUND_HALF_UP

import numpy as np

from .config import BASE, SCALE


def cell_height(level, base=BASE, scale=SCALE):
    """
    Physical height (mm) of a cell at the given level.

    Rounded half away from zero to one decimal, so heights shared by
    neighbouring faces come out identical instead of drifting apart.
    """
    z = Decimal(base + (scale * int(level)))
    return float(z.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def iter_cell_areas(heightmap, w, h, base=BASE, scale=SCALE):
    """
    Yields the faces (areas) contributed by a single cell.

    For each pixel you would get a box as high as its level. Rather than make
    tens of thousands of boxes and union them, only the faces that end up on
    the surface are emitted: the bottom and top of the cell, full walls along
    the outer perimeter, and risers between neighbours of different height.
    """
    width, height = heightmap.shape
    level = heightmap[w, h]

    def split_height(nw, nh):
        # A shorter neighbour's wall ends partway up this cell's edge, so the
        # edge is split at its height. None if the neighbour is not shorter.
        if heightmap[nw, nh] < level:
            return cell_height(heightmap[nw, nh], base, scale)
        return None

    x0 = w * scale
    x1 = x0 + scale
    y0 = h * scale
    y1 = y0 + scale
    z0 = 0.0
    z1 = cell_height(level, base, scale)

    # Base face (bottom of the model)
    yield [(x0, y0, z0), (x1, y0, z0), (x1, y1, z0), (x0, y1, z0)]

    # Top face
    yield [(x0, y0, z1), (x0, y1, z1), (x1, y1, z1), (x1, y0, z1)]

    # Top border wall
    if h == 0:
        area = [(x1, y0, z0), (x0, y0, z0)]
        if w > 0:
            z = split_height(w - 1, h)
            if z is not None:
                area.append((x0, y0, z))
        area += [(x0, y0, z1), (x1, y0, z1)]
        if w < width - 1:
            z = split_height(w + 1, h)
            if z is not None:
                area.append((x1, y0, z))
        yield area

    # Left border wall
    if w == 0:
        area = [(x0, y1, z1), (x0, y0, z1)]
        if h > 0:
            z = split_height(w, h - 1)
            if z is not None:
                area.append((x0, y0, z))
        area += [(x0, y0, z0), (x0, y1, z0)]
        if h < height - 1:
            z = split_height(w, h + 1)
            if z is not None:
                area.append((x0, y1, z))
        yield area

    if h == height - 1:
        # Last row: bottom border wall
        area = [(x1, y1, z1), (x0, y1, z1)]
        if w > 0:
            z = split_height(w - 1, h)
            if z is not None:
                area.append((x0, y1, z))
        area += [(x0, y1, z0), (x1, y1, z0)]
        if w < width - 1:
            z = split_height(w + 1, h)
            if z is not None:
                area.append((x1, y1, z))
        yield area
    elif level != heightmap[w, h + 1]:
        # Riser connecting this cell to the next one in the row direction
        z2 = cell_height(heightmap[w, h + 1], base, scale)
        yield [(x1, y1, z1), (x0, y1, z1), (x0, y1, z2), (x1, y1, z2)]

    if w == width - 1:
        # Last column: right border wall
        area = [(x1, y1, z0), (x1, y0, z0)]
        if h > 0:
            z = split_height(w, h - 1)
            if z is not None:
                area.append((x1, y0, z))
        area += [(x1, y0, z1), (x1, y1, z1)]
        if h < height - 1:
            z = split_height(w, h + 1)
            if z is not None:
                area.append((x1, y1, z))
        yield area
    elif level != heightmap[w + 1, h]:
        # Riser connecting this cell to the next one in the column direction
        z2 = cell_height(heightmap[w + 1, h], base, scale)
        yield [(x1, y0, z1), (x1, y1, z1), (x1, y1, z2), (x1, y0, z2)]


def iter_areas(heightmap, base=BASE, scale=SCALE):
    # Cell-major order: w outer, h inner
    heightmap = np.asarray(heightmap)
    width, height = heightmap.shape
    for w in range(width):
        for h in range(height):
            yield from iter_cell_areas(heightmap, w, h, base, scale)


def generate_areas(heightmap, base=BASE, scale=SCALE):
    return list(iter_areas(heightmap, base, scale))
