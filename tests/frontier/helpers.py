from __future__ import annotations

from frontier.game.core.grid import Grid
from frontier.game.core.rules import GameSession, play_move
from frontier.game.core.validator import frontier_of


def play_first_available(session: GameSession) -> None:
    """Drive a session to the end by always claiming the first frontier cell."""
    while not session.is_over:
        moves = frontier_of(session.current_player, session.grid, session.board)
        assert moves, "current player must have a move while the game is running"
        result = play_move(session, moves[0].coord)
        assert result.applied


def symmetric_pairs(grid: Grid) -> bool:
    return all(cell in grid.neighbors(other) for cell in grid for other in grid.neighbors(cell))
