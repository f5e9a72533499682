"""Events published to the presentation boundary."""

from __future__ import annotations

from dataclasses import dataclass

from frontier.game.core.models import Coord, PlayerId


@dataclass(frozen=True, slots=True)
class GameEvent:
    """Base type for game events."""


@dataclass(frozen=True, slots=True)
class MoveCommitted(GameEvent):
    player: PlayerId
    coord: Coord
    value: int


@dataclass(frozen=True, slots=True)
class TurnPassed(GameEvent):
    """The named player had no legal move and was skipped."""

    player: PlayerId


@dataclass(frozen=True, slots=True)
class GameOver(GameEvent):
    winner: PlayerId
    score: int
    stalemate: bool = False
