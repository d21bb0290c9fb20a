"""Distance metric and decision rule for fingerprint comparison."""

from ..config import EQUALITY_THRESHOLD
from .errors import LengthMismatchError
from .hash import Fingerprint


def hamming_distance(a: Fingerprint, b: Fingerprint) -> int:
    """
    Count the bit positions at which two fingerprints disagree.

    Args:
        a: First fingerprint
        b: Second fingerprint

    Returns:
        Hamming distance between 0 and the fingerprint length

    Raises:
        LengthMismatchError: If the fingerprints have different bit lengths
    """
    if a.hash.size != b.hash.size:
        raise LengthMismatchError(
            f"Cannot compute the Hamming distance of fingerprints with "
            f"{a.hash.size} and {b.hash.size} bits"
        )
    return int(a - b)


def is_within_threshold(distance: int, threshold: int = EQUALITY_THRESHOLD) -> bool:
    """Return True when ``distance`` is strictly below ``threshold``."""
    return distance < threshold
