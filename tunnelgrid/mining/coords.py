"""CoordinateMapper — grid indices to centred world positions and back.

The grid is centred on the world origin.  Column indices grow to the
right and row indices grow upward, so ``to_world(0, 0)`` is the centre of
the bottom-left cell.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class CoordinateMapper:
    """Stateless conversion between ``(col, row)`` and world ``(x, y)``.

    Attributes:
        side: Grid side length in cells.
        tile_size: World units per cell.
    """

    side: int
    tile_size: float

    @property
    def half_extent(self) -> float:
        """Distance from the world origin to any grid edge."""
        return self.side * self.tile_size / 2.0

    def to_world(self, col: int, row: int) -> tuple[float, float]:
        """Return the world position of the centre of cell ``(col, row)``."""
        origin = -self.half_extent + self.tile_size / 2.0
        return origin + col * self.tile_size, origin + row * self.tile_size

    def to_grid(self, x: float, y: float) -> tuple[int, int]:
        """Return the index of the cell containing world point ``(x, y)``.

        A point on an edge shared by two cells belongs to the higher index.
        The result is not clamped and may lie outside the grid.
        """
        col = math.floor((x + self.half_extent) / self.tile_size)
        row = math.floor((y + self.half_extent) / self.tile_size)
        return col, row

    def clamp(self, col: int, row: int) -> tuple[int, int]:
        """Clamp both indices into ``[0, side)``."""
        last = self.side - 1
        return min(max(col, 0), last), min(max(row, 0), last)
