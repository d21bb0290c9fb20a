"""Public API for deciding whether two images look the same."""

from dataclasses import dataclass

from ..config import EQUALITY_THRESHOLD
from ..logging import get_logger
from .distance import hamming_distance, is_within_threshold
from .hash import Fingerprint, ImageSource, extract

logger = get_logger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of comparing two images."""
    fingerprint_one: Fingerprint
    fingerprint_two: Fingerprint
    distance: int
    threshold: int

    @property
    def equal(self) -> bool:
        return is_within_threshold(self.distance, self.threshold)


def compare_images(
    image_1: ImageSource,
    image_2: ImageSource,
    threshold: int = EQUALITY_THRESHOLD,
) -> ComparisonResult:
    """
    Fingerprint both images and measure the distance between them.

    Args:
        image_1: First image path or file object
        image_2: Second image path or file object
        threshold: Distances below this value count as equal

    Returns:
        ComparisonResult with both fingerprints, the distance and the verdict
    """
    fingerprint_one = extract(image_1)
    fingerprint_two = extract(image_2)
    distance = hamming_distance(fingerprint_one, fingerprint_two)

    logger.debug(f"Distance between {image_1} and {image_2}: {distance} (threshold {threshold})")
    return ComparisonResult(
        fingerprint_one=fingerprint_one,
        fingerprint_two=fingerprint_two,
        distance=distance,
        threshold=threshold,
    )


def are_equal(
    image_1: ImageSource,
    image_2: ImageSource,
    threshold: int = EQUALITY_THRESHOLD,
) -> bool:
    """Return True when the two images are perceptually the same."""
    return compare_images(image_1, image_2, threshold).equal
