"""Shared fixtures for the tunnelgrid test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from tunnelgrid.mining.controller import MutationController
from tunnelgrid.mining.coords import CoordinateMapper
from tunnelgrid.mining.state import MiningState
from tunnelgrid.simulation.config import GenerationParameters
from tunnelgrid.terrain.grid import TileGrid


class ConstantNoise:
    """Noise stand-in that returns the same value everywhere."""

    def __init__(self, value: float) -> None:
        self.value = value

    def sample(self, x: float, y: float) -> float:
        return self.value


@pytest.fixture
def constant_noise() -> Callable[[float], ConstantNoise]:
    """Factory for noise sources that return one value everywhere."""
    return ConstantNoise


@pytest.fixture
def small_params() -> GenerationParameters:
    """A 16x16 world with a 4-row air strip and one spawn cell."""
    return GenerationParameters(
        seed=7,
        scale=2.0,
        side=16,
        tile_size=6.0,
        air_rows=4,
        spawn_cells=((0, 15),),
    )


@pytest.fixture
def default_params() -> GenerationParameters:
    """Default generation parameters (no YAML file needed)."""
    return GenerationParameters()


@pytest.fixture
def small_grid() -> TileGrid:
    """An empty 8x8 grid for fast tests."""
    return TileGrid(side=8)


@pytest.fixture
def mapper() -> CoordinateMapper:
    """Mapper for an 8x8 grid of 6-unit tiles."""
    return CoordinateMapper(side=8, tile_size=6.0)


@pytest.fixture
def controller(mapper: CoordinateMapper) -> MutationController:
    """Mining controller over a fresh state and the 8x8 mapper."""
    return MutationController(state=MiningState(), mapper=mapper)
