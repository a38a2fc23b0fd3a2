import argparse
import os
import sys
import tempfile

from .config import BASE, SCALE, LEVELS, DEFAULT_OUTPUT, VERSION
from .errors import ImageUnreadable, UnsupportedPixelShape, InvalidSettings
from .heightmap import build_heightmap
from .image_io import load_pixels
from .pipeline import check_settings, write_stl


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='lithophane',
        description="Convert an image into a printable lithophane STL.",
    )
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {VERSION}')
    parser.add_argument('-i', '--image', required=True, metavar='PATH',
                        help="Path to image file (required)")
    parser.add_argument('-o', '--output-file', default=DEFAULT_OUTPUT, metavar='PATH',
                        help=f"STL output file (defaults to {DEFAULT_OUTPUT})")
    parser.add_argument('-a', '--ascii', action='store_true',
                        help="Export STL as ASCII instead of binary")
    parser.add_argument('--base', type=float, default=BASE, metavar='MM',
                        help=f"Solid base thickness under the shortest point (default {BASE})")
    parser.add_argument('--scale', type=float, default=SCALE, metavar='MM',
                        help=f"Layer height and pixel size (default {SCALE})")
    parser.add_argument('--levels', type=int, default=LEVELS, metavar='N',
                        help=f"Number of height levels (default {LEVELS})")
    args = parser.parse_args(argv)

    try:
        check_settings(args.base, args.scale, args.levels)
    except InvalidSettings as e:
        parser.error(str(e))
    return args


def _default_file_mode():
    # What open(..., 'wb') would have produced under the current umask
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def save_stl(heightmap, output_path, ascii=False, base=BASE, scale=SCALE):
    """
    Writes the STL next to output_path first and moves it into place once
    complete, so a failure never leaves a partial file behind.
    """
    out_dir = os.path.dirname(os.path.abspath(output_path))
    fd, tmp_path = tempfile.mkstemp(suffix='.stl.part', dir=out_dir)
    try:
        with os.fdopen(fd, 'w+b') as f:
            count = write_stl(heightmap, f, ascii=ascii, base=base, scale=scale)
        # mkstemp files are owner-only
        os.chmod(tmp_path, _default_file_mode())
        os.replace(tmp_path, output_path)
    except BaseException:
        os.remove(tmp_path)
        raise
    return count


def main(argv=None):
    args = parse_args(argv)

    try:
        pixels = load_pixels(args.image)
    except ImageUnreadable:
        print("Couldn't find that image.  Is the path correct?")
        return 1

    try:
        heightmap = build_heightmap(pixels, levels=args.levels)
    except UnsupportedPixelShape as e:
        print(f"Unsupported image layout: {e}")
        return 1

    width, height = heightmap.shape
    print(f"Heightmap built: {width}x{height} pixels, {args.levels} levels")

    try:
        count = save_stl(heightmap, args.output_file, ascii=args.ascii,
                         base=args.base, scale=args.scale)
    except OSError as e:
        print(f"Couldn't write {args.output_file}: {e.strerror or e}")
        return 1

    kind = "ASCII" if args.ascii else "binary"
    print(f"✅ {kind} STL with {count} triangles saved to: {args.output_file}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
