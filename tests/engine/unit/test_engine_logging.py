from __future__ import annotations

import logging

from engine.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging


def test_configure_logging_console_only_replaces_root_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        configure_logging(LoggingConfig(level_name="debug"))
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0] is not sentinel
        assert isinstance(root.handlers[0], logging.StreamHandler)
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_logging_with_file_streams_through_queue(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "run.jsonl"
    try:
        configure_logging(LoggingConfig(level_name="INFO", file_path=str(log_file)))
        get_logger("engine.test").info("queued", extra={"turn": 3})
        shutdown_logging()
        text = log_file.read_text(encoding="utf-8")
        assert '"msg": "queued"' in text
        assert '"turn": 3' in text
    finally:
        shutdown_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_unknown_level_name_falls_back_to_info() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        configure_logging(LoggingConfig(level_name="chatty"))
        assert root.level == logging.INFO
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)
