"""
Raster helpers shared by the atlas builder.

Rasters are Pillow images in RGBA mode. Rectangles are (x, y, width, height)
in pixels.
"""

from typing import Sequence, Tuple

from PIL import Image


def new_raster(width: int, height: int) -> Image.Image:
    """Create a fully transparent black raster."""
    return Image.new('RGBA', (width, height), (0, 0, 0, 0))


def grow_and_copy(raster: Image.Image) -> Image.Image:
    """
    Double a raster in both directions.

    The old pixels keep their coordinates (pasted at the top-left corner);
    the new area is transparent.
    """
    w, h = raster.size
    grown = new_raster(w * 2, h * 2)
    grown.paste(raster, (0, 0))
    return grown


def blit(dest: Image.Image, src: Image.Image, origin: Tuple[int, int], size: Tuple[int, int]) -> None:
    """Copy the top-left `size` region of src into dest at origin, alpha included."""
    w, h = size
    if src.size != (w, h):
        src = src.crop((0, 0, w, h))
    # No mask: overwrite rather than composite
    dest.paste(src, origin)


def scan_min_alpha(raster: Image.Image, rect: Sequence[int]) -> int:
    """Lowest alpha value inside rect, or 0 for an empty rectangle."""
    x, y, w, h = rect
    if w <= 0 or h <= 0:
        return 0
    alpha = raster.crop((x, y, x + w, y + h)).getchannel('A')
    lo, _ = alpha.getextrema()
    return lo
