"""MutationController — turns mining requests into grid writes.

``request`` aims one cell down and one cell towards the actor's facing.
``apply`` converts the stored world target to a clamped grid index and
overwrites that cell with the dig material.  Every material digs the
same way; there is no resistance model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tunnelgrid.mining.state import RIGHT, MiningState
from tunnelgrid.terrain.tiles import TileMaterial

if TYPE_CHECKING:
    from tunnelgrid.mining.coords import CoordinateMapper
    from tunnelgrid.terrain.grid import TileGrid

logger = logging.getLogger(__name__)


@dataclass
class MutationController:
    """Drives the idle/pending mining state machine.

    Attributes:
        state: The mining state this controller transitions.
        mapper: Converts world targets into grid indices.
        dig_material: Material written into mined cells.
    """

    state: MiningState
    mapper: CoordinateMapper
    dig_material: TileMaterial = TileMaterial.CAVE

    def target_for(self, actor_x: float, actor_y: float) -> tuple[float, float]:
        """Return the world position mined from ``(actor_x, actor_y)``."""
        step = self.mapper.tile_size
        dx = step if self.state.facing == RIGHT else -step
        return actor_x + dx, actor_y - step

    def request(self, actor_x: float, actor_y: float) -> None:
        """Queue a mining request for the cell the actor is facing."""
        self.state.request(self.target_for(actor_x, actor_y))

    def apply(self, grid: TileGrid) -> tuple[int, int] | None:
        """Apply the pending request, if any.

        Args:
            grid: The grid to mutate.

        Returns:
            The ``(col, row)`` that was overwritten, or None when idle.
        """
        target = self.state.take()
        if target is None:
            return None
        col, row = self.mapper.clamp(*self.mapper.to_grid(*target))
        grid.update(col, row, self.dig_material)
        logger.debug("Mined (%d, %d) -> %s", col, row, self.dig_material.name)
        return col, row
