"""Board state representation and mutation helpers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from frontier.game.core.errors import AlreadyOwned, InvariantViolation
from frontier.game.core.models import GRID_SIZE, PLAYERS_BY_CODE, Coord, PlayerId


@dataclass(slots=True)
class BoardState:
    """Numpy-backed board: per-cell value and owner, ``0`` meaning unset."""

    size: int = GRID_SIZE
    values: np.ndarray = field(
        default_factory=lambda: np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int32)
    )
    owners: np.ndarray = field(
        default_factory=lambda: np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
    )

    def __post_init__(self) -> None:
        if self.values.shape != (self.size, self.size):
            self.values = np.zeros((self.size, self.size), dtype=np.int32)
        if self.owners.shape != (self.size, self.size):
            self.owners = np.zeros((self.size, self.size), dtype=np.int8)

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def value_at(self, coord: Coord) -> int | None:
        self._require_in_bounds(coord)
        value = int(self.values[coord.row, coord.col])
        return value or None

    def owner_at(self, coord: Coord) -> PlayerId | None:
        self._require_in_bounds(coord)
        code = int(self.owners[coord.row, coord.col])
        return PLAYERS_BY_CODE.get(code)

    def is_owned(self, coord: Coord) -> bool:
        self._require_in_bounds(coord)
        return self.owners[coord.row, coord.col] != 0

    def claim(self, coord: Coord, player: PlayerId, value: int) -> None:
        """Permanently assign ``player`` and ``value`` to an unowned cell."""
        if not self.in_bounds(coord):
            raise InvariantViolation(f"Cannot claim out-of-bounds cell ({coord.row}, {coord.col}).")
        if value < 1:
            raise InvariantViolation(f"Claim value must be positive, got {value}.")
        owner = self.owner_at(coord)
        if owner is not None:
            raise AlreadyOwned(coord, owner)
        self.values[coord.row, coord.col] = value
        self.owners[coord.row, coord.col] = player.code

    def unowned_cells(self) -> Iterator[Coord]:
        """Yield unowned cells in row-major order."""
        rows, cols = np.nonzero(self.owners == 0)
        for row, col in zip(rows.tolist(), cols.tolist()):
            yield Coord(row, col)

    def owned_cells_of(self, player: PlayerId) -> Iterator[Coord]:
        """Yield cells owned by ``player`` in row-major order."""
        rows, cols = np.nonzero(self.owners == player.code)
        for row, col in zip(rows.tolist(), cols.tolist()):
            yield Coord(row, col)

    def max_value_of(self, player: PlayerId) -> int:
        """Return the largest value among cells owned by ``player`` (0 if none)."""
        mask = self.owners == player.code
        if not mask.any():
            return 0
        return int(self.values[mask].max())

    def is_full(self) -> bool:
        """Return whether every cell has been claimed."""
        return bool(np.all(self.owners != 0))

    def _require_in_bounds(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise InvariantViolation(
                f"Cell ({coord.row}, {coord.col}) is outside a {self.size}x{self.size} board."
            )


def seed_diagonal(board: BoardState) -> None:
    """Pre-claim the main diagonal: rising values for player one, mirrored for player two."""
    half = board.size // 2
    for i in range(board.size):
        if i < half:
            board.claim(Coord(i, i), PlayerId.ONE, i + 1)
        else:
            board.claim(Coord(i, i), PlayerId.TWO, board.size - i)
