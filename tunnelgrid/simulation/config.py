"""Config — load generation parameters from YAML files.

World size, noise seed, classification bands and the reserved cells all
live in YAML and are parsed into a typed dataclass here.  Parameters are
validated once, before any grid is built.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

import yaml

from tunnelgrid.errors import InvalidConfigurationError
from tunnelgrid.terrain.tiles import (
    DEFAULT_BANDS,
    TileBand,
    TileClassifier,
    TileMaterial,
)

T = TypeVar("T")


@dataclass(frozen=True)
class GenerationParameters:
    """Read-only configuration for one session.

    Attributes:
        seed: Noise seed for deterministic generation.
        scale: Noise-space extent covered by the whole grid; higher values
            give smaller, more frequent terrain features.
        side: Number of grid columns and rows.
        tile_size: World units per cell.
        air_rows: Height of the open-air strip at the top of the grid.
        spawn_cells: Cells reserved for the player marker.
        bands: Classification bands in ascending order.
        fallback: Material for noise above the last band.
        dig_material: Material written by mining.
    """

    seed: int = 42
    scale: float = 2.5
    side: int = 100
    tile_size: float = 6.0
    air_rows: int = 19
    spawn_cells: tuple[tuple[int, int], ...] = ((1, 81),)
    bands: tuple[TileBand, ...] = DEFAULT_BANDS
    fallback: TileMaterial = TileMaterial.STEEL
    dig_material: TileMaterial = TileMaterial.CAVE

    def validate(self) -> None:
        """Check every parameter against the grid it describes.

        Raises:
            InvalidConfigurationError: On the first invalid parameter.
        """
        if self.side <= 0:
            msg = f"side must be positive, got {self.side}"
            raise InvalidConfigurationError(msg)
        if not math.isfinite(self.scale) or self.scale <= 0:
            msg = f"scale must be positive, got {self.scale}"
            raise InvalidConfigurationError(msg)
        if not math.isfinite(self.tile_size) or self.tile_size <= 0:
            msg = f"tile_size must be positive, got {self.tile_size}"
            raise InvalidConfigurationError(msg)
        if not 0 <= self.air_rows <= self.side:
            msg = f"air_rows must be within [0, {self.side}], got {self.air_rows}"
            raise InvalidConfigurationError(msg)
        for col, row in self.spawn_cells:
            if not (0 <= col < self.side and 0 <= row < self.side):
                msg = f"spawn cell ({col}, {row}) outside {self.side}x{self.side} grid"
                raise InvalidConfigurationError(msg)
        self.classifier()

    def classifier(self) -> TileClassifier:
        """Return the classifier built from ``bands`` and ``fallback``."""
        return TileClassifier(bands=self.bands, fallback=self.fallback)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GenerationParameters:
        """Load parameters from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated, validated GenerationParameters instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            InvalidConfigurationError: If a value is malformed or invalid.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            msg = f"{path}: expected a mapping at the top level"
            raise InvalidConfigurationError(msg)
        params = cls.from_dict(data)
        params.validate()
        return params

    @classmethod
    def from_dict(cls, data: dict) -> GenerationParameters:
        """Build parameters from a plain mapping, defaulting missing keys."""
        try:
            spawn_cells = tuple(
                (int(col), int(row))
                for col, row in data.get("spawn_cells", cls.spawn_cells)
            )
            bands = (
                tuple(
                    TileBand(float(bound), TileMaterial.from_name(str(name)))
                    for bound, name in data["bands"]
                )
                if "bands" in data
                else cls.bands
            )
        except InvalidConfigurationError:
            raise
        except (TypeError, ValueError) as exc:
            msg = f"malformed spawn_cells or bands: {exc}"
            raise InvalidConfigurationError(msg) from exc

        return cls(
            seed=_number(data, "seed", cls.seed, int),
            scale=_number(data, "scale", cls.scale, float),
            side=_number(data, "side", cls.side, int),
            tile_size=_number(data, "tile_size", cls.tile_size, float),
            air_rows=_number(data, "air_rows", cls.air_rows, int),
            spawn_cells=spawn_cells,
            bands=bands,
            fallback=_material(data, "fallback", cls.fallback),
            dig_material=_material(data, "dig_material", cls.dig_material),
        )


def _material(data: dict, key: str, default: TileMaterial) -> TileMaterial:
    """Read an optional material name from ``data``."""
    if key not in data:
        return default
    return TileMaterial.from_name(str(data[key]))


def _number(data: dict, key: str, default: T, type_: Callable[[object], T]) -> T:
    """Read an optional scalar from ``data``, converted with ``type_``.

    Raises:
        InvalidConfigurationError: If the value cannot be converted.
    """
    if key not in data:
        return default
    try:
        return type_(data[key])
    except (TypeError, ValueError, OverflowError) as exc:
        msg = f"{key} must be a number, got {data[key]!r}"
        raise InvalidConfigurationError(msg) from exc
