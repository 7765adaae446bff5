"""
Test the embedded atlas device and atlas schema models
"""
import base64
from pathlib import Path

import numpy as np
import pytest
from PIL import Image
from pydantic import ValidationError

from blockatlas import (
    AtlasConfig,
    AtlasDefinition,
    EmbeddedAtlasDevice,
    PixelFormat,
    TextureUploadError,
)
from blockatlas.texturing import AtlasBuilder


class TestEmbeddedAtlasDevice:
    """Test PNG encoding of uploaded atlases"""

    def test_upload_round_trips_pixels(self):
        """Test that the encoded PNG holds the uploaded pixels"""
        img = Image.new('RGBA', (8, 4), (0, 0, 0, 0))
        img.putpixel((7, 3), (1, 2, 3, 4))

        atlas = EmbeddedAtlasDevice().upload(img.tobytes(), (8, 4, 1), PixelFormat.RGBA8)

        assert isinstance(atlas, AtlasDefinition)
        assert atlas.resolution == [8, 4]
        assert base64.b64decode(atlas.data).startswith(b'\x89PNG')
        pixels = np.asarray(atlas.to_image())
        assert tuple(pixels[3, 7]) == (1, 2, 3, 4)
        assert tuple(pixels[0, 0]) == (0, 0, 0, 0)

    def test_unsupported_format(self):
        """Test that only RGBA8 is accepted"""
        with pytest.raises(TextureUploadError):
            EmbeddedAtlasDevice().upload(b'\x00' * 16, (2, 2, 1), "bgra8")

    def test_byte_length_must_match_extent(self):
        """Test that short buffers are rejected"""
        with pytest.raises(TextureUploadError):
            EmbeddedAtlasDevice().upload(b'\x00' * 15, (2, 2, 1), PixelFormat.RGBA8)

    def test_extent_must_be_2d(self):
        """Test that 3D extents are rejected"""
        with pytest.raises(TextureUploadError):
            EmbeddedAtlasDevice().upload(b'\x00' * 32, (2, 2, 2), PixelFormat.RGBA8)


class TestAtlasSchema:
    """Test pydantic validation of config and payloads"""

    def test_config_builds_atlas(self):
        """Test that AtlasConfig feeds AtlasBuilder.from_config"""
        config = AtlasConfig(base_path="assets/blocks", unit_width=16, unit_height=32)
        builder = AtlasBuilder.from_config(config)

        assert builder.path == Path("assets/blocks")
        assert builder.unit_size == (16, 32)
        assert builder.get_size() == (64, 128)

    def test_config_forbids_extra_fields(self):
        """Test that unknown config keys are rejected"""
        with pytest.raises(ValidationError):
            AtlasConfig(base_path=".", unit_width=16, unit_height=16, mipmaps=True)

    def test_config_requires_positive_units(self):
        """Test that zero unit sizes are rejected"""
        with pytest.raises(ValidationError):
            AtlasConfig(base_path=".", unit_width=16, unit_height=0)

    def test_definition_resolution(self):
        """Test that resolutions must be two positive integers"""
        with pytest.raises(ValidationError):
            AtlasDefinition(data="", resolution=[16])
        with pytest.raises(ValidationError):
            AtlasDefinition(data="", resolution=[16, 0])
