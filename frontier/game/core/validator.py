"""Move legality: the largest-owned-neighbor rule."""

from __future__ import annotations

from frontier.game.core.board import BoardState
from frontier.game.core.errors import InvariantViolation
from frontier.game.core.grid import Grid
from frontier.game.core.models import Coord, PendingMove, PlayerId


def largest_owned_neighbor_value(
    coord: Coord, player: PlayerId, grid: Grid, board: BoardState
) -> int | None:
    """Return the largest value among ``coord``'s neighbors owned by ``player``.

    ``None`` means ``player`` owns no neighbor, so the cell is not selectable.
    """
    best: int | None = None
    for neighbor in grid.neighbors(coord):
        if board.owner_at(neighbor) is not player:
            continue
        value = board.value_at(neighbor)
        if value is not None and (best is None or value > best):
            best = value
    return best


def move_value(coord: Coord, player: PlayerId, grid: Grid, board: BoardState) -> int | None:
    """Return the value a claim of ``coord`` by ``player`` would carry, if legal."""
    if not grid.contains(coord):
        raise InvariantViolation(f"Cell ({coord.row}, {coord.col}) is outside the grid.")
    if board.is_owned(coord):
        return None
    largest = largest_owned_neighbor_value(coord, player, grid, board)
    if largest is None:
        return None
    return largest + 1


def frontier_of(player: PlayerId, grid: Grid, board: BoardState) -> list[PendingMove]:
    """List every unowned cell ``player`` may claim, with its value, row-major."""
    moves: list[PendingMove] = []
    for coord in board.unowned_cells():
        value = move_value(coord, player, grid, board)
        if value is not None:
            moves.append(PendingMove(coord=coord, value=value))
    return moves


def player_has_moves(player: PlayerId, grid: Grid, board: BoardState) -> bool:
    """Return whether any unowned cell borders a cell owned by ``player``."""
    for coord in board.unowned_cells():
        if any(board.owner_at(neighbor) is player for neighbor in grid.neighbors(coord)):
            return True
    return False
