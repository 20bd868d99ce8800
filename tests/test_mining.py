"""Tests for tunnelgrid.mining — state machine and controller."""

import pytest

from tunnelgrid.mining.controller import MutationController
from tunnelgrid.mining.coords import CoordinateMapper
from tunnelgrid.mining.state import LEFT, RIGHT, MiningState
from tunnelgrid.terrain.grid import TileGrid
from tunnelgrid.terrain.tiles import TileMaterial


class TestMiningState:
    """Tests for the single-slot pending request."""

    def test_starts_idle_facing_right(self) -> None:
        state = MiningState()
        assert not state.pending
        assert state.target is None
        assert state.facing == RIGHT

    def test_request_then_take(self) -> None:
        state = MiningState()
        state.request((1.0, 2.0))
        assert state.pending
        assert state.take() == (1.0, 2.0)
        assert not state.pending
        assert state.target is None

    def test_take_when_idle(self) -> None:
        assert MiningState().take() is None

    def test_last_request_wins(self) -> None:
        state = MiningState()
        state.request((1.0, 2.0))
        state.request((3.0, 4.0))
        assert state.take() == (3.0, 4.0)
        assert state.take() is None

    def test_face(self) -> None:
        state = MiningState()
        state.face(LEFT)
        assert state.facing == LEFT

    @pytest.mark.parametrize("direction", [0, 2, -2])
    def test_face_rejects_other_values(self, direction: int) -> None:
        with pytest.raises(ValueError):
            MiningState().face(direction)


class TestMutationController:
    """Tests for target computation and grid writes."""

    def test_target_facing_right(self, controller: MutationController) -> None:
        assert controller.target_for(0.0, 0.0) == (6.0, -6.0)

    def test_target_facing_left(self, controller: MutationController) -> None:
        controller.state.face(LEFT)
        assert controller.target_for(0.0, 0.0) == (-6.0, -6.0)

    def test_apply_mines_diagonal_cell(
        self,
        controller: MutationController,
        mapper: CoordinateMapper,
        small_grid: TileGrid,
    ) -> None:
        controller.request(*mapper.to_world(3, 4))
        assert controller.apply(small_grid) == (4, 3)
        assert small_grid.get(4, 3) is TileMaterial.CAVE
        assert not controller.state.pending

    def test_apply_when_idle_writes_nothing(
        self,
        controller: MutationController,
        small_grid: TileGrid,
    ) -> None:
        assert controller.apply(small_grid) is None
        assert small_grid.material_counts() == {TileMaterial.EMPTY: 64}

    def test_only_second_request_applied(
        self,
        controller: MutationController,
        mapper: CoordinateMapper,
        small_grid: TileGrid,
    ) -> None:
        controller.request(*mapper.to_world(1, 1))
        controller.request(*mapper.to_world(5, 5))
        controller.apply(small_grid)
        assert small_grid.get(2, 0) is TileMaterial.EMPTY
        assert small_grid.get(6, 4) is TileMaterial.CAVE
        assert small_grid.material_counts()[TileMaterial.CAVE] == 1

    def test_steel_digs_like_mud(
        self,
        controller: MutationController,
        mapper: CoordinateMapper,
        small_grid: TileGrid,
    ) -> None:
        small_grid.update(4, 3, TileMaterial.STEEL)
        controller.request(*mapper.to_world(3, 4))
        controller.apply(small_grid)
        assert small_grid.get(4, 3) is TileMaterial.CAVE

    def test_idempotent(
        self,
        controller: MutationController,
        mapper: CoordinateMapper,
        small_grid: TileGrid,
    ) -> None:
        small_grid.update(4, 3, TileMaterial.MUD)
        for _ in range(2):
            controller.request(*mapper.to_world(3, 4))
            controller.apply(small_grid)
        assert small_grid.get(4, 3) is TileMaterial.CAVE
        assert small_grid.material_counts()[TileMaterial.CAVE] == 1

    @pytest.mark.parametrize(
        "actor,facing,expected",
        [
            ((7, 0), RIGHT, (7, 0)),
            ((0, 0), LEFT, (0, 0)),
            ((0, 5), LEFT, (0, 4)),
        ],
    )
    def test_edge_targets_are_clamped(
        self,
        controller: MutationController,
        mapper: CoordinateMapper,
        small_grid: TileGrid,
        actor: tuple[int, int],
        facing: int,
        expected: tuple[int, int],
    ) -> None:
        controller.state.face(facing)
        controller.request(*mapper.to_world(*actor))
        assert controller.apply(small_grid) == expected
        assert small_grid.get(*expected) is TileMaterial.CAVE

    def test_custom_dig_material(
        self,
        mapper: CoordinateMapper,
        small_grid: TileGrid,
    ) -> None:
        controller = MutationController(
            state=MiningState(),
            mapper=mapper,
            dig_material=TileMaterial.AIR,
        )
        controller.request(*mapper.to_world(3, 4))
        controller.apply(small_grid)
        assert small_grid.get(4, 3) is TileMaterial.AIR
