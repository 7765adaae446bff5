"""
Texturing utilities for block atlases.

Includes tile decoding, growing-square atlas packing and color map lookup.
"""
from .atlas_builder import AtlasBuilder
from .codec import ImageCodec, PillowCodec, load_rgba8
from .color_map import ColorMap
from .spiral import PlacementCursor, ring_capacity

__all__ = [
    'AtlasBuilder',
    'ColorMap',
    'ImageCodec',
    'PillowCodec',
    'PlacementCursor',
    'load_rgba8',
    'ring_capacity',
]
