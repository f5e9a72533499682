"""Transition-table state machine used by turn flows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

TState = TypeVar("TState")


@dataclass(frozen=True, slots=True)
class FlowTransition(Generic[TState]):
    """One transition definition."""

    trigger: str
    source: TState
    target: TState


class FlowMachine(Generic[TState]):
    """Deterministic transition table executor."""

    def __init__(
        self,
        initial_state: TState,
        transitions: tuple[FlowTransition[TState], ...],
    ) -> None:
        self._state = initial_state
        self._transitions = transitions

    @property
    def state(self) -> TState:
        return self._state

    def trigger(self, event: str) -> bool:
        """Execute first matching transition. Returns whether state changed."""
        for transition in self._transitions:
            if transition.trigger == event and transition.source == self._state:
                self._state = transition.target
                return True
        return False
