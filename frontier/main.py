"""Application entry point."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from engine.logging import get_logger, shutdown_logging
from frontier.game.app.controller import GameController
from frontier.game.app.terminal import parse_moves, run_interactive, run_scripted
from frontier.game.infra.config import GameConfig, load_default_env_files, load_game_config
from frontier.game.infra.logging import setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="frontier", description="Two-player territory game.")
    parser.add_argument("--size", type=int, default=None, help="grid side length (default: env or 6)")
    parser.add_argument(
        "--moves",
        default=None,
        help="play a scripted game, e.g. \"0,1 5,4 1,0\" (non-interactive)",
    )
    parser.add_argument("--no-log-file", action="store_true", help="log to the console only")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Frontier application."""
    args = build_parser().parse_args(argv)
    # Variables already set in the process environment take precedence over env files.
    load_default_env_files(protected=frozenset(os.environ))
    setup_logging(write_file=not args.no_log_file)
    try:
        config = load_game_config()
        if args.size is not None:
            config = GameConfig(grid_size=args.size, colors_by_player=config.colors_by_player)
    except ValueError as exc:
        print(f"frontier: {exc}", file=sys.stderr)
        return 2

    controller = GameController(config)
    logger.info("game_started", extra={"grid_size": config.grid_size})
    try:
        if args.moves is not None:
            try:
                moves = parse_moves(args.moves, config.grid_size)
            except ValueError as exc:
                print(f"frontier: {exc}", file=sys.stderr)
                return 2
            run_scripted(controller, moves, sys.stdout)
        else:
            run_interactive(controller, sys.stdin, sys.stdout)
    finally:
        shutdown_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
