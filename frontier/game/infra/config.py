"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from frontier.game.core.models import GRID_SIZE, MIN_GRID_SIZE, PlayerId

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env",
    "appdata/config/.env.local",
    ".env",
    ".env.local",
)


@dataclass(frozen=True, slots=True)
class PlayerColors:
    """Display colors for a player's hovered and claimed cells."""

    selected: str
    committed: str


DEFAULT_COLORS: dict[PlayerId, PlayerColors] = {
    PlayerId.ONE: PlayerColors(selected="#8fb8ff", committed="#1f5fd6"),
    PlayerId.TWO: PlayerColors(selected="#ffb38f", committed="#d6561f"),
}


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Presentation configuration handed to frontends."""

    grid_size: int = GRID_SIZE
    colors_by_player: dict[PlayerId, PlayerColors] = field(
        default_factory=lambda: dict(DEFAULT_COLORS)
    )

    def __post_init__(self) -> None:
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid_size must be at least {MIN_GRID_SIZE}, got {self.grid_size}.")
        missing = [player for player in PlayerId if player not in self.colors_by_player]
        if missing:
            raise ValueError(f"Missing colors for: {', '.join(p.value for p in missing)}.")


def load_game_config() -> GameConfig:
    """Build game configuration from environment variables."""
    colors = {
        PlayerId.ONE: PlayerColors(
            selected=_str("FRONTIER_P1_SELECTED_COLOR", DEFAULT_COLORS[PlayerId.ONE].selected),
            committed=_str("FRONTIER_P1_COMMITTED_COLOR", DEFAULT_COLORS[PlayerId.ONE].committed),
        ),
        PlayerId.TWO: PlayerColors(
            selected=_str("FRONTIER_P2_SELECTED_COLOR", DEFAULT_COLORS[PlayerId.TWO].selected),
            committed=_str("FRONTIER_P2_COMMITTED_COLOR", DEFAULT_COLORS[PlayerId.TWO].committed),
        ),
    }
    return GameConfig(grid_size=_int("FRONTIER_GRID_SIZE", GRID_SIZE), colors_by_player=colors)


def load_env_file(
    path: str = ".env",
    *,
    override_existing: bool = True,
    protected: Collection[str] = frozenset(),
) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    Keys listed in ``protected`` are never written.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if key in protected:
            continue
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *,
    override_existing: bool = True,
    paths: Sequence[str] | None = None,
    protected: Collection[str] = frozenset(),
) -> None:
    """Load env files left to right; later files win over earlier ones."""
    for path in tuple(paths) if paths is not None else DEFAULT_ENV_FILES:
        load_env_file(path, override_existing=override_existing, protected=protected)


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _str(name: str, default: str) -> str:
    raw = os.getenv(name, "").strip()
    return raw or default
