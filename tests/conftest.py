"""Test configuration for pytest."""

import logging
import os
from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    # Set environment variable to ensure minimal logging during tests
    os.environ['IMGCMP_LOG_LEVEL'] = 'WARNING'

    # Also configure root logger to be quiet
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def save_image(tmp_path):
    """Return a helper that writes an image into tmp_path and returns its path."""
    def _save(img: Image.Image, name: str, **kwargs) -> Path:
        path = tmp_path / name
        img.save(path, **kwargs)
        return path
    return _save
