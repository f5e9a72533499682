"""Turn engine: selection, commit and turn-end resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from engine.flow import FlowMachine, FlowTransition
from engine.logging import get_logger
from frontier.game.core.board import BoardState, seed_diagonal
from frontier.game.core.errors import InvariantViolation
from frontier.game.core.grid import Grid, build_grid
from frontier.game.core.ledger import ScoreLedger
from frontier.game.core.models import (
    GRID_SIZE,
    MIN_GRID_SIZE,
    TURN_ORDER,
    Coord,
    MoveRecord,
    PendingMove,
    PlayerId,
    TurnPhase,
)
from frontier.game.core.validator import move_value, player_has_moves

logger = get_logger(__name__)

TURN_FLOW: tuple[FlowTransition[TurnPhase], ...] = (
    FlowTransition(trigger="commit", source=TurnPhase.UNSELECTED, target=TurnPhase.COMMITTED),
    FlowTransition(trigger="resolve", source=TurnPhase.COMMITTED, target=TurnPhase.TURN_END),
    FlowTransition(trigger="next_turn", source=TurnPhase.TURN_END, target=TurnPhase.UNSELECTED),
    FlowTransition(trigger="finish", source=TurnPhase.TURN_END, target=TurnPhase.GAME_OVER),
)


def _new_turn_flow() -> FlowMachine[TurnPhase]:
    return FlowMachine(TurnPhase.UNSELECTED, TURN_FLOW)


@dataclass(slots=True)
class GameSession:
    """Runtime game aggregate: topology, board, scores and turn state."""

    grid: Grid
    board: BoardState
    ledger: ScoreLedger
    current_player: PlayerId = PlayerId.ONE
    flow: FlowMachine[TurnPhase] = field(default_factory=_new_turn_flow)
    pending_selection: PendingMove | None = None
    eligible: PendingMove | None = None
    hover_cell: Coord | None = None
    winner: PlayerId | None = None
    stalemate: bool = False
    turn: int = 1
    last_message: str = ""
    history: list[MoveRecord] = field(default_factory=list)

    @property
    def phase(self) -> TurnPhase:
        return self.flow.state

    @property
    def is_over(self) -> bool:
        return self.flow.state is TurnPhase.GAME_OVER

    @property
    def size(self) -> int:
        return self.grid.size


@dataclass(frozen=True, slots=True)
class TurnResult:
    """Outcome of one confirm signal."""

    applied: bool
    move: MoveRecord | None = None
    passed: PlayerId | None = None
    game_over: bool = False


IGNORED = TurnResult(applied=False)


def create_session(size: int = GRID_SIZE) -> GameSession:
    """Create a session with the diagonal seeded and player one to move."""
    if size < MIN_GRID_SIZE:
        raise ValueError(f"Grid size must be at least {MIN_GRID_SIZE}, got {size}.")
    grid = build_grid(size)
    board = BoardState(size=size)
    seed_diagonal(board)
    ledger = ScoreLedger.with_scores({player: board.max_value_of(player) for player in TURN_ORDER})
    session = GameSession(
        grid=grid,
        board=board,
        ledger=ledger,
        last_message=f"{PlayerId.ONE.label} to move.",
    )
    logger.info("session_created size=%d", size, extra={"scores": ledger.scores()})
    return session


def hover(session: GameSession, coord: Coord | None) -> PendingMove | None:
    """Record the candidate cell and return it as eligible when the current player may claim it."""
    session.hover_cell = coord if coord is not None and session.grid.contains(coord) else None
    session.eligible = None
    if session.hover_cell is None or session.phase is not TurnPhase.UNSELECTED:
        return None
    value = move_value(session.hover_cell, session.current_player, session.grid, session.board)
    if value is not None:
        session.eligible = PendingMove(coord=session.hover_cell, value=value)
    return session.eligible


def confirm(session: GameSession) -> TurnResult:
    """Commit the eligible candidate and resolve the turn end; ignored without one."""
    if session.phase is not TurnPhase.UNSELECTED or session.eligible is None:
        logger.debug(
            "confirm_ignored phase=%s hover=%s", session.phase.value, session.hover_cell
        )
        return IGNORED

    session.pending_selection = session.eligible
    session.eligible = None
    session.flow.trigger("commit")
    move = commit_pending(session)
    passed = end_turn(session)
    if not session.is_over:
        # Re-evaluate the cursor for whoever acts next.
        hover(session, session.hover_cell)
    return TurnResult(applied=True, move=move, passed=passed, game_over=session.is_over)


def play_move(session: GameSession, coord: Coord) -> TurnResult:
    """Hover then confirm ``coord`` for the current player."""
    hover(session, coord)
    return confirm(session)


def commit_pending(session: GameSession) -> MoveRecord:
    """Apply the pending selection for the current player and enter TURN_END."""
    if session.phase is not TurnPhase.COMMITTED:
        raise InvariantViolation(f"Cannot apply a move in phase {session.phase.value}.")
    pending = session.pending_selection
    if pending is None:
        raise InvariantViolation("Commit reached with no pending selection.")

    player = session.current_player
    session.board.claim(pending.coord, player, pending.value)
    session.ledger.update_score(player, pending.value)
    session.pending_selection = None
    record = MoveRecord(turn=session.turn, player=player, coord=pending.coord, value=pending.value)
    session.history.append(record)
    session.last_message = (
        f"{player.label} claimed ({pending.coord.row}, {pending.coord.col}) with {pending.value}."
    )
    logger.info(
        "move_committed player=%s row=%d col=%d value=%d",
        player.value,
        pending.coord.row,
        pending.coord.col,
        pending.value,
        extra={"turn": session.turn},
    )
    session.flow.trigger("resolve")
    return record


def end_turn(session: GameSession) -> PlayerId | None:
    """Resolve termination and hand-off. Returns the player who had to pass, if any."""
    if session.phase is not TurnPhase.TURN_END:
        raise InvariantViolation(f"Cannot end a turn in phase {session.phase.value}.")

    if session.board.is_full():
        _finish(session, stalemate=False)
        return None

    session.turn += 1
    current = session.current_player
    following = current.other
    if player_has_moves(following, session.grid, session.board):
        session.current_player = following
        session.last_message += f" {following.label} to move."
        session.flow.trigger("next_turn")
        return None

    if player_has_moves(current, session.grid, session.board):
        session.last_message += f" {following.label} cannot move; {current.label} plays again."
        logger.info("turn_passed player=%s", following.value)
        session.flow.trigger("next_turn")
        return following

    _finish(session, stalemate=True)
    return None


def _finish(session: GameSession, *, stalemate: bool) -> None:
    winner = session.ledger.winner()
    session.winner = winner
    session.stalemate = stalemate
    score = session.ledger.score_of(winner)
    reason = "No moves remain" if stalemate else "Board full"
    session.last_message = f"{reason}. {winner.label} wins with {score}."
    logger.info(
        "game_over winner=%s score=%d stalemate=%s",
        winner.value,
        score,
        stalemate,
        extra={"scores": session.ledger.scores(), "moves": len(session.history)},
    )
    session.flow.trigger("finish")
