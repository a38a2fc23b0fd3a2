class LithophaneError(Exception):
    """Base class for errors raised while building a lithophane."""


class ImageUnreadable(LithophaneError, FileNotFoundError):
    """The input does not resolve to a decodable image."""


class UnsupportedPixelShape(LithophaneError, ValueError):
    """The pixel source is neither a flat nor a framed RGB(A) grid."""


class InvalidSettings(LithophaneError, ValueError):
    """Relief settings outside the range that yields a valid heightmap."""
