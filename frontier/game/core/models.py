"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

GRID_SIZE = 6
MIN_GRID_SIZE = 2


class PlayerId(StrEnum):
    """The two players of a game."""

    ONE = "PLAYER_ONE"
    TWO = "PLAYER_TWO"

    @property
    def other(self) -> PlayerId:
        return PlayerId.TWO if self is PlayerId.ONE else PlayerId.ONE

    @property
    def code(self) -> int:
        """Non-zero integer used in numpy owner arrays."""
        return PLAYER_CODES[self]

    @property
    def label(self) -> str:
        return "Player 1" if self is PlayerId.ONE else "Player 2"


PLAYER_CODES: dict[PlayerId, int] = {PlayerId.ONE: 1, PlayerId.TWO: 2}
PLAYERS_BY_CODE: dict[int, PlayerId] = {code: player for player, code in PLAYER_CODES.items()}
TURN_ORDER: tuple[PlayerId, ...] = (PlayerId.ONE, PlayerId.TWO)


class TurnPhase(StrEnum):
    """Turn engine phases."""

    UNSELECTED = "UNSELECTED"
    COMMITTED = "COMMITTED"
    TURN_END = "TURN_END"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class PendingMove:
    """A cell chosen for the acting player together with the value it would carry."""

    coord: Coord
    value: int


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One committed claim."""

    turn: int
    player: PlayerId
    coord: Coord
    value: int
