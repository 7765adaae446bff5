"""
Test PNG decoding to RGBA
"""
import os
import tempfile

import pytest
from PIL import Image

from blockatlas import TileDecodeError
from blockatlas.texturing import PillowCodec, load_rgba8


class TestLoadRGBA8:
    """Test color type handling and failure reporting"""

    def test_rgba_is_returned_unchanged(self):
        """Test that RGBA pixels, including alpha, come through as-is"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "glass.png")
            Image.new('RGBA', (4, 4), (10, 20, 30, 40)).save(path)

            img = load_rgba8(path)

        assert img.mode == 'RGBA'
        assert img.size == (4, 4)
        assert img.getpixel((3, 3)) == (10, 20, 30, 40)

    def test_rgb_is_made_opaque(self):
        """Test that RGB images are widened with alpha 255"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "stone.png")
            Image.new('RGB', (4, 2), (100, 110, 120)).save(path)

            img = PillowCodec().decode(path)

        assert img.mode == 'RGBA'
        assert img.getpixel((0, 1)) == (100, 110, 120, 255)

    def test_grayscale_is_unsupported(self):
        """Test that other color types are rejected"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "gray.png")
            Image.new('L', (4, 4), 128).save(path)

            with pytest.raises(TileDecodeError) as exc_info:
                load_rgba8(path)

        assert "Unsupported color type L" in str(exc_info.value)
        assert exc_info.value.path == path

    def test_missing_file(self):
        """Test that a missing file raises TileDecodeError with the path"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "nope.png")
            with pytest.raises(TileDecodeError) as exc_info:
                load_rgba8(path)

        assert "nope.png" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_corrupt_file(self):
        """Test that a file that is not an image raises TileDecodeError"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "broken.png")
            with open(path, 'wb') as f:
                f.write(b"definitely not a png")

            with pytest.raises(TileDecodeError):
                load_rgba8(path)
