"""Plain-text frontend driving the controller through its input boundary."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TextIO

from frontier.game.app.controller import GameController
from frontier.game.app.events import GameOver
from frontier.game.app.ui_state import BoardView, CellHighlight, CellView
from frontier.game.core.models import Coord, PlayerId

logger = logging.getLogger(__name__)

OWNER_MARKS: dict[PlayerId, str] = {PlayerId.ONE: "A", PlayerId.TWO: "B"}
QUIT_COMMANDS = frozenset({"q", "quit", "exit"})


def render_cell(cell: CellView) -> str:
    if cell.highlight is CellHighlight.OWNED and cell.owner is not None:
        return f"{cell.value}{OWNER_MARKS[cell.owner]}"
    if cell.highlight is CellHighlight.ELIGIBLE_PENDING:
        return f"[{cell.pending_value}]"
    return "."


def render_board(view: BoardView) -> str:
    """Render a board snapshot as a fixed-width text grid."""
    width = max(4, len(str(view.size * view.size)) + 3)
    header = " " * 3 + "".join(f"{col:>{width}}" for col in range(view.size))
    lines = [header]
    for row_index, row in enumerate(view.rows()):
        lines.append(f"{row_index:>3}" + "".join(f"{render_cell(c):>{width}}" for c in row))
    scores = "  ".join(
        f"{player.label} ({OWNER_MARKS[player]}): {score}" for player, score in view.scores.items()
    )
    lines.append(scores)
    if view.status:
        lines.append(view.status)
    return "\n".join(lines)


def parse_coord(text: str, size: int) -> Coord | None:
    """Parse ``"row col"`` or ``"row,col"``; ``None`` when malformed or off-grid."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        row, col = (int(part) for part in parts)
    except ValueError:
        return None
    if not (0 <= row < size and 0 <= col < size):
        return None
    return Coord(row, col)


def parse_moves(script: str, size: int) -> list[Coord]:
    """Parse a whitespace-separated ``"r,c r,c"`` script."""
    moves: list[Coord] = []
    for token in script.split():
        coord = parse_coord(token, size)
        if coord is None:
            raise ValueError(f"Invalid move '{token}' for a {size}x{size} grid.")
        moves.append(coord)
    return moves


def run_scripted(controller: GameController, moves: Iterable[Coord], out: TextIO) -> GameOver | None:
    """Play ``moves`` in order, reporting ignored ones; returns the game-over event if reached."""
    outcome: list[GameOver] = []
    subscription = controller.events.subscribe(GameOver, outcome.append)
    try:
        for coord in moves:
            if controller.session.is_over:
                break
            controller.candidate_hover(coord)
            if not controller.confirm_selection():
                player = controller.session.current_player
                out.write(f"Ignored ({coord.row}, {coord.col}) for {player.label}.\n")
        out.write(render_board(controller.ui_state()) + "\n")
    finally:
        controller.events.unsubscribe(subscription)
    return outcome[0] if outcome else None


def run_interactive(controller: GameController, stdin: TextIO, out: TextIO) -> GameOver | None:
    """Read ``row col`` lines until the game ends, input runs out or the user quits."""
    outcome: list[GameOver] = []
    subscription = controller.events.subscribe(GameOver, outcome.append)
    size = controller.session.size
    try:
        out.write(render_board(controller.ui_state()) + "\n")
        while not controller.session.is_over:
            out.write(f"{controller.session.current_player.label}> ")
            out.flush()
            line = stdin.readline()
            if not line:
                break
            text = line.strip().lower()
            if text in QUIT_COMMANDS:
                break
            coord = parse_coord(text, size)
            if coord is None:
                out.write(f"Enter a cell as 'row col' with values 0-{size - 1}, or 'q' to quit.\n")
                continue
            eligible = controller.candidate_hover(coord)
            if eligible is None or not controller.confirm_selection():
                if controller.session.board.is_owned(coord):
                    out.write(f"({coord.row}, {coord.col}) is already owned.\n")
                else:
                    out.write(f"({coord.row}, {coord.col}) is not adjacent to your cells.\n")
                continue
            out.write(render_board(controller.ui_state()) + "\n")
    finally:
        controller.events.unsubscribe(subscription)
    logger.debug("interactive_session_ended moves=%d", len(controller.session.history))
    return outcome[0] if outcome else None
