from pathlib import Path

import pytest
from typer.testing import CliRunner

from imgcmp import __version__
from imgcmp.cli import EXIT_DECODE_ERROR, EXIT_READ_ERROR, app
from tests.helpers.image_factory import block_image, dark_first, grid_image


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def image_pair(save_image):
    """Two images three bits apart plus one ten bits away from the first."""
    base = save_image(grid_image(dark_first(32)), "base.png")
    close = save_image(block_image(dark_first(29)), "close.jpg")
    far = save_image(grid_image(dark_first(22)), "far.png")
    return base, close, far


class TestCLIBasicFunctionality:
    def test_help_command_works(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "compare" in result.stdout
        assert "hash" in result.stdout

    def test_compare_help_works(self, runner):
        result = runner.invoke(app, ["compare", "--help"])

        assert result.exit_code == 0
        assert "image_one" in result.stdout.lower()
        assert "--threshold" in result.stdout
        assert "--show-distance" in result.stdout

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestCompareCommand:
    def test_same_pictures(self, runner, image_pair):
        base, close, _ = image_pair

        result = runner.invoke(app, ["compare", str(base), str(close)])

        assert result.exit_code == 0
        assert "Pictures are the same" in result.stdout

    def test_different_pictures(self, runner, image_pair):
        base, _, far = image_pair

        result = runner.invoke(app, ["compare", str(base), str(far)])

        assert result.exit_code == 0
        assert "Pictures are different" in result.stdout

    def test_show_distance(self, runner, image_pair):
        base, _, far = image_pair

        result = runner.invoke(app, ["compare", "--show-distance", str(base), str(far)])

        assert result.exit_code == 0
        assert "Hamming distance: 10/64" in result.stdout

    def test_threshold_option(self, runner, image_pair):
        base, _, far = image_pair

        result = runner.invoke(app, ["compare", "--threshold", "11", str(base), str(far)])

        assert result.exit_code == 0
        assert "Pictures are the same" in result.stdout

    def test_threshold_out_of_range(self, runner, image_pair):
        base, close, _ = image_pair

        result = runner.invoke(app, ["compare", "--threshold", "65", str(base), str(close)])

        assert result.exit_code == 2

    def test_missing_argument(self, runner, image_pair):
        base, _, _ = image_pair

        result = runner.invoke(app, ["compare", str(base)])

        assert result.exit_code == 2

    def test_missing_file(self, runner, image_pair, tmp_path):
        base, _, _ = image_pair

        result = runner.invoke(app, ["compare", str(base), str(tmp_path / "missing.png")])

        assert result.exit_code == EXIT_READ_ERROR
        assert "Pictures are" not in result.stdout

    def test_corrupt_file(self, runner, image_pair, tmp_path):
        base, _, _ = image_pair
        corrupted = tmp_path / "corrupted.png"
        corrupted.write_bytes(b"not an image")

        result = runner.invoke(app, ["compare", str(corrupted), str(base)])

        assert result.exit_code == EXIT_DECODE_ERROR
        assert "Pictures are" not in result.stdout

    def test_corrupt_bmp_header(self, runner, image_pair, tmp_path):
        base, _, _ = image_pair
        corrupt = tmp_path / "corrupt.bmp"
        corrupt.write_bytes(b"BM" + bytes(12) + (99).to_bytes(4, "little") + bytes(8))

        result = runner.invoke(app, ["compare", str(base), str(corrupt)])

        assert result.exit_code == EXIT_DECODE_ERROR


class TestHashCommand:
    def test_prints_hex_fingerprint(self, runner, image_pair):
        base, _, _ = image_pair

        result = runner.invoke(app, ["hash", str(base)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "ffffffff00000000"

    def test_missing_file(self, runner, tmp_path: Path):
        result = runner.invoke(app, ["hash", str(tmp_path / "missing.png")])

        assert result.exit_code == EXIT_READ_ERROR
