"""Rule invariant failures."""

from __future__ import annotations

from frontier.game.core.models import Coord, PlayerId


class InvariantViolation(RuntimeError):
    """Raised when the turn engine is driven into a state it must never reach."""


class AlreadyOwned(InvariantViolation):
    """Raised when a claim targets a cell that already has an owner."""

    def __init__(self, coord: Coord, owner: PlayerId) -> None:
        super().__init__(f"Cell ({coord.row}, {coord.col}) is already owned by {owner.value}.")
        self.coord = coord
        self.owner = owner
