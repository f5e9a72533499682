"""Typed, view-ready board state exposed to renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from frontier.game.core.models import Coord, PlayerId, TurnPhase
from frontier.game.core.rules import GameSession


class CellHighlight(StrEnum):
    """How a cell should be highlighted."""

    UNOWNED = "UNOWNED"
    ELIGIBLE_PENDING = "ELIGIBLE_PENDING"
    OWNED = "OWNED"


@dataclass(frozen=True, slots=True)
class CellView:
    """Renderable state of one cell."""

    coord: Coord
    value: int | None
    highlight: CellHighlight
    owner: PlayerId | None = None
    pending_value: int | None = None
    hovered: bool = False

    @property
    def value_to_display(self) -> int | None:
        if self.highlight is CellHighlight.ELIGIBLE_PENDING:
            return self.pending_value
        return self.value


@dataclass(frozen=True, slots=True)
class BoardView:
    """View-ready snapshot of a session."""

    size: int
    cells: tuple[CellView, ...]
    current_player: PlayerId
    phase: TurnPhase
    scores: dict[PlayerId, int]
    status: str
    winner: PlayerId | None
    stalemate: bool

    def cell(self, coord: Coord) -> CellView:
        return self.cells[coord.row * self.size + coord.col]

    def rows(self) -> list[tuple[CellView, ...]]:
        return [self.cells[r * self.size : (r + 1) * self.size] for r in range(self.size)]


def build_board_view(session: GameSession) -> BoardView:
    """Project the session into per-cell renderable state."""
    board = session.board
    eligible = session.eligible
    cells: list[CellView] = []
    for coord in session.grid:
        owner = board.owner_at(coord)
        hovered = coord == session.hover_cell
        if owner is not None:
            cells.append(
                CellView(
                    coord=coord,
                    value=board.value_at(coord),
                    highlight=CellHighlight.OWNED,
                    owner=owner,
                    hovered=hovered,
                )
            )
        elif eligible is not None and eligible.coord == coord:
            cells.append(
                CellView(
                    coord=coord,
                    value=None,
                    highlight=CellHighlight.ELIGIBLE_PENDING,
                    pending_value=eligible.value,
                    hovered=hovered,
                )
            )
        else:
            cells.append(
                CellView(coord=coord, value=None, highlight=CellHighlight.UNOWNED, hovered=hovered)
            )
    return BoardView(
        size=session.size,
        cells=tuple(cells),
        current_player=session.current_player,
        phase=session.phase,
        scores=session.ledger.scores(),
        status=session.last_message,
        winner=session.winner,
        stalemate=session.stalemate,
    )
