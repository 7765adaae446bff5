"""
PNG decoding for tiles and color maps.

Only 8-bit RGB and RGBA images are accepted; RGB is widened to RGBA with
full opacity.
"""

import logging
from pathlib import Path
from typing import Protocol, Union

from PIL import Image

from blockatlas.exceptions import TileDecodeError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ImageCodec(Protocol):
    """Turns a file path into a decoded RGBA image."""

    def decode(self, path: PathLike) -> Image.Image:
        ...


def load_rgba8(path: PathLike) -> Image.Image:
    """
    Load an RGBA image from path.

    Args:
        path: Image file to open

    Returns:
        Image in RGBA mode, detached from the file

    Raises:
        TileDecodeError: File is missing, unreadable, or not RGB/RGBA
    """
    try:
        with Image.open(path) as img:
            img.load()
            if img.mode == 'RGBA':
                return img.copy()
            if img.mode == 'RGB':
                return img.convert('RGBA')
            mode = img.mode
    except OSError as e:
        raise TileDecodeError(f"Could not load '{path}': {e}", path=path) from e

    raise TileDecodeError(f"Unsupported color type {mode} in '{path}'", path=path)


class PillowCodec:
    """Default codec backed by Pillow."""

    def decode(self, path: PathLike) -> Image.Image:
        logger.debug(f"Decoding {path}")
        return load_rgba8(path)
