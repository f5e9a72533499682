"""Input boundary: turns hover/confirm signals into turn-engine calls."""

from __future__ import annotations

import logging

from engine.events import EventBus
from frontier.game.app.events import GameOver, MoveCommitted, TurnPassed
from frontier.game.app.ui_state import BoardView, build_board_view
from frontier.game.core.errors import InvariantViolation
from frontier.game.core.models import Coord, PendingMove
from frontier.game.core.rules import GameSession, TurnResult, confirm, create_session, hover
from frontier.game.infra.config import GameConfig

logger = logging.getLogger(__name__)


class GameController:
    """Owns one game session and publishes its events."""

    def __init__(
        self,
        config: GameConfig | None = None,
        events: EventBus | None = None,
        session: GameSession | None = None,
    ) -> None:
        self._config = config or GameConfig()
        self._events = events or EventBus()
        self._session = session if session is not None else create_session(self._config.grid_size)
        self._game_over_sent = False

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def events(self) -> EventBus:
        return self._events

    def candidate_hover(self, coord: Coord | None) -> PendingMove | None:
        """Report the cell under the cursor (or ``None``) for this tick."""
        return hover(self._session, coord)

    def confirm_selection(self) -> bool:
        """Commit the hovered eligible cell. Returns whether a move was applied."""
        try:
            result = confirm(self._session)
        except InvariantViolation:
            logger.exception("turn_engine_invariant_violation")
            raise
        if not result.applied:
            logger.debug("illegal_move_ignored hover=%s", self._session.hover_cell)
            return False
        self._publish(result)
        return True

    def ui_state(self) -> BoardView:
        """Return the current renderable snapshot."""
        return build_board_view(self._session)

    def restart(self) -> None:
        """Discard the current session and start a fresh one."""
        self._session = create_session(self._config.grid_size)
        self._game_over_sent = False

    def _publish(self, result: TurnResult) -> None:
        if result.move is not None:
            move = result.move
            self._events.publish(MoveCommitted(player=move.player, coord=move.coord, value=move.value))
        if result.passed is not None:
            self._events.publish(TurnPassed(player=result.passed))
        session = self._session
        if result.game_over and not self._game_over_sent and session.winner is not None:
            self._game_over_sent = True
            self._events.publish(
                GameOver(
                    winner=session.winner,
                    score=session.ledger.score_of(session.winner),
                    stalemate=session.stalemate,
                )
            )
