"""
STL serialization.

Both writers consume any iterable of triangles (three (x, y, z) points each),
so a generator pipeline can stream straight into a file. Normals are always
written as zero vectors; slicers recompute them from the winding order.
"""
import io
import struct
from itertools import islice

import numpy as np

from .config import SOLID_NAME, BINARY_HEADER, BATCH_SIZE

HEADER_SIZE = 80
COUNT_FORMAT = '<I'

# One binary facet record, 50 bytes, little-endian
FACET_DTYPE = np.dtype([
    ('normal', '<f4', (3,)),
    ('v1', '<f4', (3,)),
    ('v2', '<f4', (3,)),
    ('v3', '<f4', (3,)),
    ('attr', '<u2'),
])

FACET_TEMPLATE = (
    "  facet normal 0.0 0.0 0.0\n"
    "    outer loop\n"
    "      vertex {} {} {}\n"
    "      vertex {} {} {}\n"
    "      vertex {} {} {}\n"
    "    endloop\n"
    "  endfacet\n"
)


def write_ascii(triangles, stream, solid_name=SOLID_NAME):
    """
    Writes triangles to a text stream in the ASCII STL format.

    Returns:
        int: Number of facets written.
    """
    stream.write(f"solid {solid_name}\n")
    count = 0
    for a, b, c in triangles:
        stream.write(FACET_TEMPLATE.format(*(repr(float(v)) for v in (*a, *b, *c))))
        count += 1
    # no trailing newline after endsolid
    stream.write("endsolid")
    return count


def write_binary(triangles, stream, header=BINARY_HEADER):
    """
    Writes triangles to a seekable binary stream in the binary STL format.

    The triangle count is not known up front when streaming, so a zero count
    is written first and patched once the triangles are exhausted.

    Returns:
        int: Number of facets written.
    """
    # The 80 header bytes are ignored by readers, anything can go in here
    start = stream.tell()
    stream.write(header[:HEADER_SIZE].ljust(HEADER_SIZE, b'\0'))
    stream.write(struct.pack(COUNT_FORMAT, 0))

    count = 0
    triangles = iter(triangles)
    while True:
        batch = list(islice(triangles, BATCH_SIZE))
        if not batch:
            break
        vertices = np.asarray(batch, dtype=np.float32).reshape(len(batch), 3, 3)
        records = np.zeros(len(batch), dtype=FACET_DTYPE)
        records['v1'] = vertices[:, 0]
        records['v2'] = vertices[:, 1]
        records['v3'] = vertices[:, 2]
        stream.write(records.tobytes())
        count += len(batch)

    end = stream.tell()
    stream.seek(start + HEADER_SIZE)
    stream.write(struct.pack(COUNT_FORMAT, count))
    stream.seek(end)
    return count


def encode_ascii(triangles, solid_name=SOLID_NAME):
    buf = io.StringIO()
    write_ascii(triangles, buf, solid_name)
    return buf.getvalue()


def encode_binary(triangles, header=BINARY_HEADER):
    buf = io.BytesIO()
    write_binary(triangles, buf, header)
    return buf.getvalue()
