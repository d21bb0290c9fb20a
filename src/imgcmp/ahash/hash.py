"""Average-hash fingerprint extraction."""

import string
from pathlib import Path
from typing import BinaryIO, Union

import imagehash
import numpy as np
from PIL import Image, UnidentifiedImageError

from ..config import GRID_SIZE, HASH_LENGTH
from ..logging import get_logger
from .errors import ImageDecodeError, ImageReadError

logger = get_logger(__name__)

Fingerprint = imagehash.ImageHash
ImageSource = Union[str, Path, BinaryIO]


def average_hash(image: Image.Image) -> Fingerprint:
    """
    Compute the 64-bit average hash of an already decoded image.

    The image is stretched to an 8x8 grid with nearest-neighbour sampling,
    converted to grayscale, and every cell whose luminance is less than or
    equal to the integer average of all cells sets its bit.

    Args:
        image: Decoded Pillow image of any mode

    Returns:
        Fingerprint whose row-major bits follow the pixel order
    """
    reduced = image.resize((GRID_SIZE, GRID_SIZE), Image.Resampling.NEAREST).convert("L")
    pixels = np.asarray(reduced, dtype=np.uint32).reshape(HASH_LENGTH)

    average = int(pixels.sum()) // HASH_LENGTH
    bits = (pixels <= average).reshape(GRID_SIZE, GRID_SIZE)
    bits.setflags(write=False)

    return imagehash.ImageHash(bits)


def extract(image_source: ImageSource) -> Fingerprint:
    """
    Load an image and compute its average hash.

    Args:
        image_source: Path to an image file or a binary file object

    Returns:
        Fingerprint of the image

    Raises:
        ImageReadError: If the source cannot be accessed
        ImageDecodeError: If the data is not a decodable image
    """
    try:
        img = Image.open(image_source)
    except UnidentifiedImageError as exc:
        raise ImageDecodeError(f"Cannot identify image {image_source}: {exc}") from exc
    except Image.DecompressionBombError as exc:
        raise ImageDecodeError(f"Refusing to decode {image_source}: {exc}") from exc
    except (FileNotFoundError, PermissionError, IsADirectoryError, NotADirectoryError) as exc:
        raise ImageReadError(f"Cannot read {image_source}: {exc}") from exc
    except (OSError, SyntaxError, ValueError) as exc:
        # format plugins report corrupt headers as plain OSError
        raise ImageDecodeError(f"Cannot decode header of {image_source}: {exc}") from exc

    with img:
        try:
            img.load()
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            raise ImageDecodeError(f"Failed to decode {image_source}: {exc}") from exc

        fingerprint = average_hash(img)

    logger.debug(f"Computed average hash for {image_source}: {fingerprint}")
    return fingerprint


def fingerprint_from_hex(text: str) -> Fingerprint:
    """Parse the 16-digit hex form produced by ``str(fingerprint)``."""
    text = text.strip()
    if len(text) != HASH_LENGTH // 4:
        raise ValueError(f"Expected {HASH_LENGTH // 4} hex digits, got {len(text)}: {text!r}")
    if not all(c in string.hexdigits for c in text):
        raise ValueError(f"Not a hex fingerprint: {text!r}")

    fingerprint = imagehash.hex_to_hash(text)
    fingerprint.hash.setflags(write=False)
    return fingerprint
