"""App-level logging policy over the engine logging pipeline."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime

from engine.logging import JsonFormatter, LoggingConfig, configure_logging
from frontier.game.infra.app_data import resolve_logs_dir

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config(*, write_file: bool = True) -> LoggingConfig:
    """Resolve logging configuration from environment variables."""
    level_name = os.getenv("FRONTIER_LOG_LEVEL", os.getenv("LOG_LEVEL", "WARNING")).upper()
    console_format = os.getenv("LOG_FORMAT", "text").lower()
    return LoggingConfig(
        level_name=level_name,
        console_format=console_format,
        file_path=_resolve_run_log_file_path() if write_file else None,
        file_format="json",
    )


def setup_logging(*, write_file: bool = True) -> None:
    """Configure application logging."""
    config = build_logging_config(write_file=write_file)
    configure_logging(config)
    logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str:
    base_dir = resolve_logs_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"frontier_run_{stamp}.jsonl")
