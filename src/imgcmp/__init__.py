"""imgcmp - perceptual near-duplicate check for raster images."""

from .config import EQUALITY_THRESHOLD, GRID_SIZE, HASH_LENGTH, Settings
from .ahash import (
    ComparisonResult,
    Fingerprint,
    ImageComparisonError,
    ImageDecodeError,
    ImageReadError,
    LengthMismatchError,
    are_equal,
    average_hash,
    compare_images,
    extract,
    hamming_distance,
)

__version__ = "0.1.0"

__all__ = [
    "EQUALITY_THRESHOLD",
    "GRID_SIZE",
    "HASH_LENGTH",
    "Settings",
    "ComparisonResult",
    "Fingerprint",
    "ImageComparisonError",
    "ImageDecodeError",
    "ImageReadError",
    "LengthMismatchError",
    "are_equal",
    "average_hash",
    "compare_images",
    "extract",
    "hamming_distance",
]
