from __future__ import annotations

import pytest

from frontier.game.app.controller import GameController
from frontier.game.core.rules import GameSession, create_session
from frontier.game.infra.config import GameConfig


@pytest.fixture
def session() -> GameSession:
    return create_session(6)


@pytest.fixture
def controller() -> GameController:
    return GameController(GameConfig(grid_size=6))
