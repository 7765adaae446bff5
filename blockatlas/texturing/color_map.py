"""
Triangular color lookup table.

A ColorMap is a 256x256 RGBA image sampled with two coordinates in [0, 1].
The second coordinate is scaled by the first, so only the triangle below the
diagonal is ever read. The origin is the bottom-right corner of the image.
"""

from typing import Optional, Tuple

from PIL import Image

from blockatlas.exceptions import ColorMapSizeError
from .codec import ImageCodec, PathLike, PillowCodec


class ColorMap:
    """A 256x256 image that stores colors."""

    SIZE = 256

    def __init__(self, image: Image.Image, source: Optional[PathLike] = None):
        w, h = image.size
        if (w, h) != (self.SIZE, self.SIZE):
            where = f" in '{source}'" if source is not None else ""
            raise ColorMapSizeError(f"ColorMap expected 256x256, found {w}x{h}{where}")
        self._image = image if image.mode == 'RGBA' else image.convert('RGBA')

    @classmethod
    def from_path(cls, path: PathLike, codec: Optional[ImageCodec] = None) -> "ColorMap":
        """
        Load a color map from a PNG file.

        Raises:
            TileDecodeError: The file could not be decoded
            ColorMapSizeError: The image is not 256x256
        """
        codec = codec or PillowCodec()
        return cls(codec.decode(path), source=path)

    def get(self, x: float, y: float) -> Tuple[int, int, int]:
        """Get the RGB color at (x, y); alpha is dropped."""
        x = max(0.0, min(1.0, x))
        y = max(0.0, min(1.0, y))

        # Scale y from [0, 1] to [0, x], forming a triangle
        y = x * y

        px = int(round((1.0 - x) * 255))
        py = int(round((1.0 - y) * 255))

        r, g, b, _ = self._image.getpixel((px, py))
        return r, g, b
