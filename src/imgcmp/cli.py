from pathlib import Path
from typing import Optional

import typer

from . import __version__
from .ahash import (
    ImageComparisonError,
    ImageDecodeError,
    ImageReadError,
    compare_images,
    extract,
)
from .config import HASH_LENGTH, Settings
from .logging import get_logger

logger = get_logger(__name__)

app = typer.Typer(help="imgcmp - check whether two images look the same", no_args_is_help=True)

EXIT_ERROR = 1
EXIT_READ_ERROR = 2
EXIT_DECODE_ERROR = 3


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"imgcmp {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Simple command line tool to test if images are equal."""


def _exit_for(exc: ImageComparisonError) -> typer.Exit:
    if isinstance(exc, ImageReadError):
        logger.error(f"Cannot read image: {exc}")
        return typer.Exit(code=EXIT_READ_ERROR)
    if isinstance(exc, ImageDecodeError):
        logger.error(f"Cannot decode image: {exc}")
        return typer.Exit(code=EXIT_DECODE_ERROR)
    logger.error(f"Comparison failed: {exc}")
    return typer.Exit(code=EXIT_ERROR)


@app.command()
def compare(
    image_one: Path = typer.Argument(..., help="File path of an image"),
    image_two: Path = typer.Argument(..., help="File path of an image"),
    threshold: int = typer.Option(
        Settings().threshold, min=0, max=HASH_LENGTH,
        help="Images closer than this Hamming distance are the same",
    ),
    show_distance: bool = typer.Option(False, "--show-distance", help="Also print the Hamming distance"),
) -> None:
    """
    Compare two images by their average hash.

    Prints whether the pictures are the same. The exit status is 0 for either
    verdict and non-zero when an image cannot be read or decoded.
    """
    logger.debug(f"Comparing {image_one} with {image_two}")

    try:
        result = compare_images(image_one, image_two, threshold=threshold)
    except ImageComparisonError as exc:
        raise _exit_for(exc) from exc

    if result.equal:
        typer.echo("Pictures are the same")
    else:
        typer.echo("Pictures are different")

    if show_distance:
        typer.echo(f"Hamming distance: {result.distance}/{result.fingerprint_one.hash.size}")


@app.command("hash")
def hash_command(
    image: Path = typer.Argument(..., help="File path of an image"),
) -> None:
    """Print the 64-bit average hash of an image as 16 hex digits."""
    try:
        fingerprint = extract(image)
    except ImageComparisonError as exc:
        raise _exit_for(exc) from exc

    typer.echo(str(fingerprint))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
