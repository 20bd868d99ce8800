"""MiningState — the single pending mining request and the actor's facing.

The state machine has two states, ``idle`` and ``pending``.  ``request``
moves to ``pending`` (overwriting any earlier target) and ``take`` moves
back to ``idle``, handing the target to whoever applies it.  These are
the only ways the pending slot changes.
"""

from __future__ import annotations

from dataclasses import dataclass

LEFT = -1
RIGHT = 1


@dataclass
class MiningState:
    """Single-slot mining request plus horizontal facing.

    Attributes:
        pending: Whether a target is waiting to be applied.
        target: World position to mine, or None when idle.
        facing: Last horizontal movement direction (-1 left, +1 right).
    """

    pending: bool = False
    target: tuple[float, float] | None = None
    facing: int = RIGHT

    def face(self, direction: int) -> None:
        """Record the actor's latest horizontal movement direction.

        Raises:
            ValueError: If ``direction`` is not -1 or +1.
        """
        if direction not in (LEFT, RIGHT):
            msg = f"facing must be -1 or +1, got {direction}"
            raise ValueError(msg)
        self.facing = direction

    def request(self, target: tuple[float, float]) -> None:
        """Store ``target`` as the pending request (last request wins)."""
        self.target = target
        self.pending = True

    def take(self) -> tuple[float, float] | None:
        """Clear the pending request and return its target.

        Returns None if nothing was pending.
        """
        if not self.pending:
            return None
        target = self.target
        self.pending = False
        self.target = None
        return target
