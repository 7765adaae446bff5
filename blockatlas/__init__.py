"""
BlockAtlas - Pack fixed-size block tiles into a growable texture atlas

Tiles are loaded by name, placed on a growing square with stable pixel
origins, and handed to a graphics device as a single RGBA texture once
loading is done.
"""

from blockatlas.device import EmbeddedAtlasDevice, GraphicsDevice, PixelFormat
from blockatlas.exceptions import (
    AtlasConsumedError,
    AtlasError,
    ColorMapSizeError,
    TextureUploadError,
    TileDecodeError,
    TileDimensionError,
)
from blockatlas.schema import AtlasConfig, AtlasDefinition
from blockatlas.texturing import AtlasBuilder, ColorMap

__version__ = "0.0.1"
__all__ = [
    "AtlasBuilder",
    "ColorMap",
    "AtlasConfig",
    "AtlasDefinition",
    "EmbeddedAtlasDevice",
    "GraphicsDevice",
    "PixelFormat",
    "AtlasError",
    "AtlasConsumedError",
    "ColorMapSizeError",
    "TextureUploadError",
    "TileDecodeError",
    "TileDimensionError",
]
