"""Average-hash perceptual comparison engine."""

from .errors import (
    ImageComparisonError,
    ImageDecodeError,
    ImageReadError,
    LengthMismatchError,
)
from .hash import Fingerprint, average_hash, extract, fingerprint_from_hex
from .distance import hamming_distance, is_within_threshold
from .compare import ComparisonResult, are_equal, compare_images

__all__ = [
    "ImageComparisonError",
    "ImageDecodeError",
    "ImageReadError",
    "LengthMismatchError",
    "Fingerprint",
    "average_hash",
    "extract",
    "fingerprint_from_hex",
    "hamming_distance",
    "is_within_threshold",
    "ComparisonResult",
    "are_equal",
    "compare_images",
]
