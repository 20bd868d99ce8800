"""Session — owns the grid and mining state and advances them per step.

Each call to ``step`` follows a fixed order:

1. Record the actor's horizontal facing from the input report
2. Queue a mining request if the mining action is active
3. Apply the pending mining request to the grid
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tunnelgrid.mining.controller import MutationController
from tunnelgrid.mining.coords import CoordinateMapper
from tunnelgrid.mining.state import LEFT, RIGHT, MiningState
from tunnelgrid.simulation.config import GenerationParameters
from tunnelgrid.terrain.generator import generate_grid
from tunnelgrid.terrain.grid import TileGrid
from tunnelgrid.terrain.noise import NoiseField


@dataclass(frozen=True)
class InputReport:
    """What the input collaborator observed during one step.

    Attributes:
        actor_x: Actor world x position.
        actor_y: Actor world y position.
        move_x: Horizontal movement this step (sign only matters; 0 = none).
        mining: Whether the mining action is active.
    """

    actor_x: float
    actor_y: float
    move_x: float = 0.0
    mining: bool = False


@dataclass
class Session:
    """Exclusive owner of one generated world and its mining state.

    Attributes:
        params: Generation parameters for this session.
        noise: The seeded noise field the grid was sampled from.
        grid: The terrain grid.
        mapper: Grid/world coordinate conversion.
        mining: Pending mining request and actor facing.
        controller: Applies mining requests to ``grid``.
        tick: Number of steps taken.
    """

    params: GenerationParameters
    noise: NoiseField = field(init=False)
    grid: TileGrid = field(init=False)
    mapper: CoordinateMapper = field(init=False)
    mining: MiningState = field(init=False)
    controller: MutationController = field(init=False)
    tick: int = 0

    def __post_init__(self) -> None:
        """Generate the grid and wire up the mining machinery."""
        self.noise = NoiseField(self.params.seed)
        self.grid = generate_grid(self.params, self.noise)
        self.mapper = CoordinateMapper(
            side=self.params.side,
            tile_size=self.params.tile_size,
        )
        self.mining = MiningState()
        self.controller = MutationController(
            state=self.mining,
            mapper=self.mapper,
            dig_material=self.params.dig_material,
        )

    def spawn_position(self) -> tuple[float, float]:
        """Return the world position the actor should start at.

        Uses the first spawn cell, or the top row's middle cell when no
        spawn cell is configured.
        """
        if self.params.spawn_cells:
            col, row = self.params.spawn_cells[0]
        else:
            col, row = self.params.side // 2, self.params.side - 1
        return self.mapper.to_world(col, row)

    def step(self, report: InputReport) -> tuple[int, int] | None:
        """Advance the session by one step.

        Args:
            report: Input observed since the previous step.

        Returns:
            The cell mined during this step, if any.
        """
        if report.move_x > 0:
            self.mining.face(RIGHT)
        elif report.move_x < 0:
            self.mining.face(LEFT)

        if report.mining:
            self.controller.request(report.actor_x, report.actor_y)

        mined = self.controller.apply(self.grid)
        self.tick += 1
        return mined
