"""NoiseField — seeded coherent 2D noise.

Thin wrapper over ``opensimplex.OpenSimplex`` so the rest of the package
only depends on a ``sample(x, y)`` contract.  The same seed always yields
the same field.
"""

from __future__ import annotations

from opensimplex import OpenSimplex


class NoiseField:
    """Deterministic scalar field over the real plane.

    Attributes:
        seed: Seed the underlying generator was built with.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._gen = OpenSimplex(seed=seed)

    def sample(self, x: float, y: float) -> float:
        """Return the noise value at ``(x, y)``, clipped to ``[-1, 1]``."""
        value = float(self._gen.noise2(x, y))
        return max(-1.0, min(1.0, value))

    def __repr__(self) -> str:
        return f"NoiseField(seed={self.seed})"
