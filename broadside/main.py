"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import replace

from broadside.cli import ConsoleSession
from broadside.game.app.controller import GameController
from broadside.game.core.models import Difficulty
from broadside.game.infra.config import load_default_env_files, load_settings
from broadside.game.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Broadside: human vs. computer naval combat")
    parser.add_argument(
        "--difficulty",
        choices=[difficulty.value for difficulty in Difficulty],
        default=None,
        help="Opponent difficulty (default: BROADSIDE_DIFFICULTY or normal).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible games.")
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds before the computer replies (default: BROADSIDE_AI_DELAY_SECONDS or 0.5).",
    )
    parser.add_argument("--no-log-file", action="store_true", help="Log to the console only.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the Broadside terminal game."""
    args = build_parser().parse_args(argv)
    load_default_env_files(override_existing=False)
    # Board renders own the terminal; routine events go to the run file.
    setup_logging(log_to_file=not args.no_log_file, console_level_name="WARNING")

    settings = load_settings()
    if args.difficulty is not None:
        settings = replace(settings, difficulty=Difficulty(args.difficulty))
    if args.seed is not None:
        settings = replace(settings, seed=args.seed)
    if args.delay is not None:
        settings = replace(settings, ai_reply_delay_seconds=max(0.0, args.delay))
    logger.info(
        "session_settings difficulty=%s delay=%.2f seed=%s",
        settings.difficulty,
        settings.ai_reply_delay_seconds,
        settings.seed,
    )

    controller = GameController(rng=random.Random(settings.seed), settings=settings)
    try:
        return ConsoleSession(controller).run()
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
