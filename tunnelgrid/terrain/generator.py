"""Grid generation — sample the noise field once per cell and classify it.

Generation order for each cell:

1. Reserved spawn cells become ``PLAYER_MARKER``.
2. Rows in the top air strip become ``AIR``.
3. Everything else is classified from the remapped noise value.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tunnelgrid.terrain.grid import TileGrid
from tunnelgrid.terrain.noise import NoiseField
from tunnelgrid.terrain.tiles import TileMaterial

if TYPE_CHECKING:
    from tunnelgrid.simulation.config import GenerationParameters

logger = logging.getLogger(__name__)


def noise_coordinate(index: int, side: int, scale: float) -> float:
    """Map a grid index into noise-space."""
    return index / side * scale


def generate_grid(
    params: GenerationParameters,
    noise: NoiseField | None = None,
) -> TileGrid:
    """Build a fully populated TileGrid from ``params``.

    Args:
        params: Generation parameters; validated before any cell is built.
        noise: Noise source to sample.  Defaults to a NoiseField seeded
            with ``params.seed``.

    Returns:
        A new grid with every cell assigned.

    Raises:
        InvalidConfigurationError: If ``params`` fail validation.
    """
    params.validate()
    if noise is None:
        noise = NoiseField(params.seed)

    classifier = params.classifier()
    side = params.side
    spawn_cells = set(params.spawn_cells)
    air_start = side - params.air_rows

    grid = TileGrid(side=side)
    for row in range(side):
        ny = noise_coordinate(row, side, params.scale)
        for col in range(side):
            if (col, row) in spawn_cells:
                material = TileMaterial.PLAYER_MARKER
            elif row >= air_start:
                material = TileMaterial.AIR
            else:
                nx = noise_coordinate(col, side, params.scale)
                # [-1, 1] -> [0, 1]
                normalized = (noise.sample(nx, ny) + 1.0) / 2.0
                material = classifier.classify(normalized)
            grid.update(col, row, material)

    logger.info(
        "Generated %dx%d grid (seed=%d, scale=%.2f): %s",
        side,
        side,
        params.seed,
        params.scale,
        ", ".join(
            f"{m.name.lower()}={n}" for m, n in grid.material_counts().items()
        ),
    )
    return grid
