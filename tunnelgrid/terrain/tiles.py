"""Tile materials and the band classifier that assigns them.

A classifier holds an ordered list of ``TileBand`` entries.  Each band
claims every magnitude strictly below its ``upper_bound`` that earlier
bands did not already claim; anything at or above the last bound gets the
fallback material.  Keeping the thresholds as data makes them easy to
load from YAML and to test at every boundary.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, TypeVar

from tunnelgrid.errors import InvalidConfigurationError

T = TypeVar("T")


class TileMaterial(Enum):
    """What a single grid cell is made of.

    Values are small integers so a grid can store them in a ``uint8`` array.
    """

    EMPTY = 0
    AIR = 1
    MUD = 2
    GROUND = 3
    STEEL = 4
    CAVE = 5
    PLAYER_MARKER = 6

    @classmethod
    def from_name(cls, name: str) -> TileMaterial:
        """Look up a material by case-insensitive name (``"steel"``).

        Raises:
            InvalidConfigurationError: If no material has that name.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            msg = f"unknown tile material {name!r}"
            raise InvalidConfigurationError(msg) from None


class TileBand(NamedTuple):
    """One rung of the classification ladder.

    Attributes:
        upper_bound: Exclusive upper limit of the magnitudes this band claims.
        material: Material assigned to those magnitudes.
    """

    upper_bound: float
    material: TileMaterial


def first_matching_band(
    value: float,
    bands: Sequence[tuple[float, T]],
    default: T,
) -> T:
    """Return the payload of the first band whose bound exceeds ``value``.

    Bands are checked in the given order.  A value equal to a bound does
    not match that band.
    """
    for upper_bound, payload in bands:
        if value < upper_bound:
            return payload
    return default


DEFAULT_BANDS: tuple[TileBand, ...] = (
    TileBand(0.3, TileMaterial.MUD),
    TileBand(0.55, TileMaterial.GROUND),
    TileBand(0.7, TileMaterial.CAVE),
)


@dataclass(frozen=True)
class TileClassifier:
    """Maps a normalised noise value in ``[0, 1]`` to a ``TileMaterial``.

    Attributes:
        bands: Bands in strictly ascending ``upper_bound`` order.
        fallback: Material for magnitudes at or above the last bound.
    """

    bands: tuple[TileBand, ...] = DEFAULT_BANDS
    fallback: TileMaterial = TileMaterial.STEEL

    def __post_init__(self) -> None:
        """Reject band lists that are not strictly ascending."""
        bounds = [band.upper_bound for band in self.bands]
        for lower, upper in zip(bounds, bounds[1:]):
            if upper <= lower:
                msg = f"band bounds must be strictly ascending, got {bounds}"
                raise InvalidConfigurationError(msg)

    def classify(self, normalized: float) -> TileMaterial:
        """Return the material for ``normalized``.

        The magnitude is used, so negative inputs classify like their
        positive counterparts.
        """
        return first_matching_band(
            abs(normalized),
            self.bands,
            self.fallback,
        )
