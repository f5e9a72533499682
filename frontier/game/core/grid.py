"""Fixed square grid topology with Moore-neighborhood adjacency."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from frontier.game.core.errors import InvariantViolation
from frontier.game.core.models import Coord

_MOORE_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


@dataclass(frozen=True, slots=True)
class Grid:
    """Immutable N x N cell layout plus precomputed adjacency."""

    size: int
    cells: tuple[Coord, ...]
    adjacency: Mapping[Coord, frozenset[Coord]]

    def contains(self, coord: Coord) -> bool:
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def neighbors(self, coord: Coord) -> frozenset[Coord]:
        """Return the Moore neighbors of ``coord`` clipped at the borders."""
        try:
            return self.adjacency[coord]
        except KeyError:
            raise InvariantViolation(
                f"Cell ({coord.row}, {coord.col}) is outside a {self.size}x{self.size} grid."
            ) from None

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)


def build_grid(size: int) -> Grid:
    """Build the row-major cell list and neighbor sets for an N x N grid."""
    cells = tuple(Coord(row, col) for row in range(size) for col in range(size))
    adjacency: dict[Coord, frozenset[Coord]] = {}
    for cell in cells:
        adjacency[cell] = frozenset(
            Coord(cell.row + dr, cell.col + dc)
            for dr, dc in _MOORE_OFFSETS
            if 0 <= cell.row + dr < size and 0 <= cell.col + dc < size
        )
    return Grid(size=size, cells=cells, adjacency=MappingProxyType(adjacency))
