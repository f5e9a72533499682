import pytest

from frontier.game.core.errors import InvariantViolation
from frontier.game.core.grid import build_grid
from frontier.game.core.models import Coord
from tests.frontier.helpers import symmetric_pairs


@pytest.mark.parametrize("size", [1, 2, 3, 6, 9])
def test_adjacency_is_symmetric(size: int) -> None:
    assert symmetric_pairs(build_grid(size))


@pytest.mark.parametrize("size", [3, 4, 6])
def test_neighbor_counts_for_corners_edges_and_interior(size: int) -> None:
    grid = build_grid(size)
    last = size - 1
    for cell in grid:
        on_row_edge = cell.row in (0, last)
        on_col_edge = cell.col in (0, last)
        expected = 3 if on_row_edge and on_col_edge else 5 if on_row_edge or on_col_edge else 8
        assert len(grid.neighbors(cell)) == expected, cell


def test_grid_is_row_major_and_excludes_self() -> None:
    grid = build_grid(3)
    assert grid.cells[0] == Coord(0, 0)
    assert grid.cells[-1] == Coord(2, 2)
    assert len(grid) == 9
    assert Coord(1, 1) not in grid.neighbors(Coord(1, 1))
    assert grid.neighbors(Coord(0, 0)) == {Coord(0, 1), Coord(1, 0), Coord(1, 1)}


def test_no_wraparound_at_borders() -> None:
    grid = build_grid(4)
    assert Coord(0, 3) not in grid.neighbors(Coord(0, 0))
    assert Coord(3, 0) not in grid.neighbors(Coord(0, 0))


def test_single_cell_grid_has_no_neighbors() -> None:
    grid = build_grid(1)
    assert grid.neighbors(Coord(0, 0)) == frozenset()


def test_neighbors_of_unknown_cell_raises() -> None:
    grid = build_grid(3)
    assert not grid.contains(Coord(3, 0))
    with pytest.raises(InvariantViolation):
        grid.neighbors(Coord(3, 0))


def test_adjacency_is_read_only() -> None:
    grid = build_grid(3)
    with pytest.raises(TypeError):
        grid.adjacency[Coord(0, 0)] = frozenset()  # type: ignore[index]
    assert grid.neighbors(Coord(0, 0)) == frozenset({Coord(0, 1), Coord(1, 0), Coord(1, 1)})
