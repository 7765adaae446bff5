"""
Graphics device interface for finished atlases.

A device receives the raw RGBA8 bytes of an atlas and returns a texture
handle. EmbeddedAtlasDevice is an in-process device that turns the atlas
into an embedded PNG payload instead of GPU memory.
"""

import base64
import logging
from enum import Enum
from io import BytesIO
from typing import Any, Protocol, Tuple

from PIL import Image

from blockatlas.exceptions import TextureUploadError
from blockatlas.schema.atlas import AtlasDefinition

logger = logging.getLogger(__name__)

Extent = Tuple[int, int, int]


class PixelFormat(str, Enum):
    # 8 bits per channel, unmultiplied alpha
    RGBA8 = "rgba8"

    @property
    def bytes_per_pixel(self) -> int:
        return 4


class GraphicsDevice(Protocol):
    """Allocates a texture of the given extent and format and uploads data into it."""

    def upload(self, data: bytes, extent: Extent, pixel_format: PixelFormat) -> Any:
        ...


class EmbeddedAtlasDevice:
    """
    Device that encodes uploads as base64 PNG.

    Mipmaps are not generated; the payload holds the base level only.
    """

    def upload(self, data: bytes, extent: Extent, pixel_format: PixelFormat) -> AtlasDefinition:
        if pixel_format != PixelFormat.RGBA8:
            raise TextureUploadError(f"Unsupported pixel format: {pixel_format}")

        w, h, depth = extent
        if depth != 1:
            raise TextureUploadError(f"Expected a 2D extent, got depth {depth}")

        expected = w * h * pixel_format.bytes_per_pixel
        if len(data) != expected:
            raise TextureUploadError(f"Expected {expected} bytes for {w}x{h} RGBA8, got {len(data)}")

        img = Image.frombytes('RGBA', (w, h), data)
        buf = BytesIO()
        img.save(buf, format='PNG')
        atlas_b64 = base64.b64encode(buf.getvalue()).decode('utf-8')

        logger.info(f"Encoded {w}x{h} atlas as PNG ({len(buf.getvalue())} bytes)")
        return AtlasDefinition(data=atlas_b64, mime='image/png', resolution=[w, h])
