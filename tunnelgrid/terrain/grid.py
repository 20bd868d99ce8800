"""TileGrid — the square grid of tile materials.

Materials are stored as their integer values in a ``uint8`` NumPy array
indexed as ``tiles[row, col]``.  Row 0 is the bottom of the world; the
highest row is the top, where the open-air strip lives.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from tunnelgrid.errors import OutOfBoundsError
from tunnelgrid.terrain.tiles import TileMaterial

# One character per material for text dumps
_GLYPHS: dict[TileMaterial, str] = {
    TileMaterial.EMPTY: ".",
    TileMaterial.AIR: " ",
    TileMaterial.MUD: "0",
    TileMaterial.GROUND: "1",
    TileMaterial.STEEL: "2",
    TileMaterial.CAVE: "~",
    TileMaterial.PLAYER_MARKER: "@",
}


@dataclass
class TileGrid:
    """A ``side x side`` grid holding exactly one material per cell.

    Attributes:
        side: Number of columns and rows.
        tiles: Material values indexed as ``tiles[row, col]``.
    """

    side: int
    tiles: NDArray[np.uint8] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Fill the grid with ``EMPTY``."""
        self.tiles = np.full(
            (self.side, self.side),
            TileMaterial.EMPTY.value,
            dtype=np.uint8,
        )

    def contains(self, col: int, row: int) -> bool:
        """Return True if ``(col, row)`` addresses a cell of this grid."""
        return 0 <= col < self.side and 0 <= row < self.side

    def _check(self, col: int, row: int) -> None:
        if not self.contains(col, row):
            msg = f"({col}, {row}) out of bounds for {self.side}x{self.side}"
            raise OutOfBoundsError(msg)

    def get(self, col: int, row: int) -> TileMaterial:
        """Return the material at ``(col, row)``.

        Raises:
            OutOfBoundsError: If either index is outside ``[0, side)``.
        """
        self._check(col, row)
        return TileMaterial(int(self.tiles[row, col]))

    def update(self, col: int, row: int, material: TileMaterial) -> None:
        """Replace the material at ``(col, row)``.

        Raises:
            OutOfBoundsError: If either index is outside ``[0, side)``.
        """
        self._check(col, row)
        self.tiles[row, col] = material.value

    def cells(self) -> Iterator[tuple[int, int, TileMaterial]]:
        """Yield ``(col, row, material)`` for every cell, row by row."""
        for row in range(self.side):
            for col in range(self.side):
                yield col, row, TileMaterial(int(self.tiles[row, col]))

    def material_counts(self) -> dict[TileMaterial, int]:
        """Return how many cells hold each material (zero counts omitted)."""
        counts = np.bincount(self.tiles.ravel(), minlength=len(TileMaterial))
        return {
            material: int(counts[material.value])
            for material in TileMaterial
            if counts[material.value] > 0
        }


def format_grid(
    grid: TileGrid,
    width: int | None = None,
    height: int | None = None,
) -> str:
    """Render the top-left block of ``grid`` as text, one glyph per cell.

    The highest row is printed first so the output reads like the world
    looks on screen.

    Args:
        grid: Grid to render.
        width: Columns to include, starting at column 0 (default: all).
        height: Rows to include, counted down from the top (default: all).

    Returns:
        Newline-separated rows of space-separated glyphs.
    """
    width = grid.side if width is None else min(width, grid.side)
    height = grid.side if height is None else min(height, grid.side)

    lines = [f"Tile grid ({grid.side}x{grid.side}):"]
    for row in range(grid.side - 1, grid.side - 1 - height, -1):
        lines.append(
            " ".join(_GLYPHS[grid.get(col, row)] for col in range(width)),
        )
    return "\n".join(lines)
