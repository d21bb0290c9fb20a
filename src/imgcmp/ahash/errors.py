"""Exceptions raised while fingerprinting and comparing images."""


class ImageComparisonError(Exception):
    """Base class for every error raised by imgcmp."""


class ImageReadError(ImageComparisonError, OSError):
    """Raised when the image source cannot be accessed."""


class ImageDecodeError(ImageComparisonError):
    """Raised when the image data cannot be identified or decoded."""


class LengthMismatchError(ImageComparisonError, ValueError):
    """Raised when two fingerprints of different bit length are compared."""
