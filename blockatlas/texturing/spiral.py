"""
Growing-square placement for equally sized tiles.

Tiles fill the atlas grid as a square that grows one ring at a time. Ring
`size` turns a filled size x size square into a (size + 1) x (size + 1) one
and therefore holds 2 * size + 1 cells:

    after ring 2     0 2 6
                     1 3 7
                     4 5 8

Within a ring, the first `size` slots run along row `size` (left to right),
the remaining size + 1 slots run down column `size` (top to bottom). Cells
are never revisited.
"""

from dataclasses import dataclass
from typing import Tuple


def ring_capacity(size: int) -> int:
    """Number of cells added by ring `size`."""
    return 2 * size + 1


@dataclass
class PlacementCursor:
    """Position of the next free cell: ring index and slot within that ring."""
    completed_tiles_size: int = 0
    position: int = 0

    @property
    def at_ring_start(self) -> bool:
        return self.position == 0

    @property
    def placements(self) -> int:
        """Total cells handed out so far."""
        return self.completed_tiles_size ** 2 + self.position

    def advance(self) -> Tuple[int, int]:
        """Return the next free grid cell (column, row) and move past it."""
        size = self.completed_tiles_size
        if self.position < size:
            cell = (self.position, size)
        else:
            cell = (size, self.position - size)

        self.position += 1
        if self.position >= ring_capacity(size):
            self.position = 0
            self.completed_tiles_size += 1

        return cell
