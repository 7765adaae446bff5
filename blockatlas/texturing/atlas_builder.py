"""
Incremental texture atlas builder.

Tiles of one fixed unit size are loaded by name from a directory of PNGs and
packed into a single RGBA raster that doubles in size whenever the next ring
of the growing square would not fit. Each tile keeps the pixel origin it was
given for the lifetime of the builder.

Example:
    >>> builder = AtlasBuilder("assets/blocks", 16, 16)
    >>> builder.load("stone")
    (0, 0)
    >>> builder.load("dirt")
    (0, 16)
    >>> texture = builder.complete(device)
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from blockatlas.device import GraphicsDevice, PixelFormat
from blockatlas.exceptions import AtlasConsumedError, TileDecodeError, TileDimensionError
from blockatlas.schema.atlas import AtlasConfig
from .codec import ImageCodec, PathLike, PillowCodec
from .raster import blit, grow_and_copy, new_raster, scan_min_alpha
from .spiral import PlacementCursor

logger = logging.getLogger(__name__)

Rect = Tuple[int, int, int, int]


class AtlasBuilder:
    """
    Builds an atlas of equally sized tiles.

    The backing raster starts at 4x4 tiles and only grows. Tile positions and
    min-alpha results are memoized and never invalidated; placement never
    writes over a cell it has already handed out, so cached values for
    loaded tiles stay correct.
    """

    INITIAL_TILES = 4

    def __init__(
        self,
        path: PathLike,
        unit_width: int,
        unit_height: int,
        codec: Optional[ImageCodec] = None
    ):
        """
        Initialize an empty atlas.

        Args:
            path: Base directory for tiles ({path}/{name}.png)
            unit_width: Width of every tile in pixels (> 0)
            unit_height: Height of one tile frame in pixels (> 0)
            codec: Image decoder (defaults to Pillow)

        Raises:
            pydantic.ValidationError: A unit size is not positive
        """
        config = AtlasConfig(base_path=path, unit_width=unit_width, unit_height=unit_height)
        self.path = config.base_path
        self.unit_width = config.unit_width
        self.unit_height = config.unit_height
        self.codec = codec or PillowCodec()

        self._image = new_raster(self.unit_width * self.INITIAL_TILES, self.unit_height * self.INITIAL_TILES)
        self._cursor = PlacementCursor()
        # Pixel origin of every loaded tile
        self._tile_positions: Dict[str, Tuple[int, int]] = {}
        # Lowest alpha per queried rectangle
        self._min_alpha_cache: Dict[Rect, int] = {}
        self._completed = False

    @classmethod
    def from_config(cls, config: AtlasConfig, codec: Optional[ImageCodec] = None) -> "AtlasBuilder":
        return cls(config.base_path, config.unit_width, config.unit_height, codec=codec)

    @property
    def unit_size(self) -> Tuple[int, int]:
        return self.unit_width, self.unit_height

    @property
    def completed_tiles_size(self) -> int:
        """Side length, in tiles, of the fully occupied square."""
        return self._cursor.completed_tiles_size

    @property
    def position(self) -> int:
        """Slot within the ring currently being filled."""
        return self._cursor.position

    @property
    def tile_positions(self) -> Dict[str, Tuple[int, int]]:
        return dict(self._tile_positions)

    def __contains__(self, name: str) -> bool:
        return name in self._tile_positions

    def __len__(self) -> int:
        return len(self._tile_positions)

    def get_size(self) -> Tuple[int, int]:
        """
        Current raster size in pixels.

        Not stable: any load() may double it.
        """
        self._check_not_completed()
        return self._image.size

    def tile_path(self, name: str) -> Path:
        return self.path / f"{name}.png"

    def load(self, name: str) -> Tuple[int, int]:
        """
        Load a tile into the atlas and return its pixel origin.

        Already loaded names return their cached origin without touching the
        filesystem. The name is given without extension; PNG is the only
        supported format. Frames below the first unit height are ignored.

        Raises:
            TileDecodeError: The tile file is missing or unreadable
            TileDimensionError: The tile does not match the unit size
        """
        self._check_not_completed()

        pos = self._tile_positions.get(name)
        if pos is not None:
            return pos

        path = self.tile_path(name)
        try:
            img = self.codec.decode(path)
        except TileDecodeError as e:
            raise TileDecodeError(f"Could not load tile '{name}' from '{path}': {e}", path=path, name=name) from e

        uw, uh = self.unit_width, self.unit_height
        iw, ih = img.size
        if iw != uw:
            raise TileDimensionError(f"Tile '{name}' is {iw}px wide, expected {uw}px ('{path}')")
        if ih < uh or ih % uh != 0:
            raise TileDimensionError(
                f"Tile '{name}' is {ih}px high, expected a multiple of {uh}px ('{path}')"
            )
        if ih > uh:
            logger.warning(f"Ignoring {ih // uh - 1} extra frames in '{name}'")

        self._grow_if_needed()

        gx, gy = self._cursor.advance()
        origin = (gx * uw, gy * uh)
        blit(self._image, img, origin, (uw, uh))
        logger.debug(f"Placed '{name}' at {origin}")

        return self._tile_positions.setdefault(name, origin)

    def _grow_if_needed(self) -> None:
        # Only checked at the start of a ring, so a whole ring always fits
        if not self._cursor.at_ring_start:
            return

        w, h = self._image.size
        size = self._cursor.completed_tiles_size
        if self.unit_width * size >= w or self.unit_height * size >= h:
            self._image = grow_and_copy(self._image)
            logger.debug(f"Grew atlas from {w}x{h} to {w * 2}x{h * 2}")

    def min_alpha(self, rect: Sequence[int]) -> int:
        """
        Find the minimum alpha value in a sub-rectangle of the atlas.

        Args:
            rect: (x, y, width, height) in pixels, inside the loaded area

        Returns:
            Lowest alpha in the rectangle, 0 if it is empty
        """
        self._check_not_completed()

        key = tuple(int(v) for v in rect)
        if len(key) != 4:
            raise ValueError(f"Expected (x, y, width, height), got {rect!r}")

        cached = self._min_alpha_cache.get(key)
        if cached is not None:
            return cached

        alpha = scan_min_alpha(self._image, key)
        self._min_alpha_cache[key] = alpha
        return alpha

    def uv_rect(self, name: str) -> List[float]:
        """
        Normalized [u1, v1, u2, v2] of a loaded tile against the current size.

        Like get_size(), the result changes when the atlas grows.
        """
        self._check_not_completed()

        if name not in self._tile_positions:
            raise KeyError(f"Tile '{name}' has not been loaded")

        x, y = self._tile_positions[name]
        w, h = self._image.size
        return [
            x / w,
            y / h,
            (x + self.unit_width) / w,
            (y + self.unit_height) / h,
        ]

    def complete(self, device: GraphicsDevice):
        """
        Upload the finished atlas and return the device's texture handle.

        The builder is unusable afterwards, even if the upload fails.
        """
        self._check_not_completed()
        self._completed = True

        image, self._image = self._image, None
        w, h = image.size
        logger.info(f"Uploading {w}x{h} atlas with {len(self._tile_positions)} tiles")
        return device.upload(image.tobytes(), (w, h, 1), PixelFormat.RGBA8)

    def _check_not_completed(self) -> None:
        if self._completed:
            raise AtlasConsumedError("AtlasBuilder has already been completed")
