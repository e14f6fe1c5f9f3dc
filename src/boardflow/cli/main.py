# src/boardflow/cli/main.py

"""
CLI entrypoint.

Replays a list of actions against a state snapshot: initializes logging,
starts the board watchers on a real HTTP API, dispatches the actions, waits
for every call to finish and prints each published action as a JSON line.
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from ..cli.bootstrap import action_to_json, create_app, load_json, parse_actions
from ..config import get_settings
from ..core.actions import Action
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="boardflow", description="Replay board actions through the task runtime.")
    parser.add_argument("--state", required=True, help="JSON file with the store state snapshot")
    parser.add_argument("--actions", required=True, help="JSON file with a list of actions to dispatch")
    parser.add_argument("--base-url", default=None, help="Board API base URL (overrides BOARDFLOW_API_BASE_URL)")
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="wait for in-flight calls after every action instead of once at the end",
    )
    return parser


async def replay(
        actions: Sequence[Action],
        *,
        settings,
        state,
        sequential: bool = False,
        out: TextIO = sys.stdout,
) -> int:
    app = create_app(settings=settings, state=state)

    def _print(action: Action) -> None:
        out.write(action_to_json(action) + "\n")

    unsubscribe = app.runtime.bus.subscribe(_print)
    try:
        for action in actions:
            app.runtime.dispatch(action)
            if sequential:
                await app.runtime.settle()
        await app.runtime.settle()
    finally:
        unsubscribe()
        await app.aclose()

    logger.info("Replayed %d action(s).", len(actions))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    if args.base_url:
        settings = dataclasses.replace(settings, api_base_url=args.base_url)

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = load_json(args.state)
        actions = parse_actions(load_json(args.actions))
    except (OSError, ValueError) as exc:
        logger.error("Cannot read replay input: %s", exc)
        return 2

    return asyncio.run(replay(actions, settings=settings, state=state, sequential=args.sequential))


if __name__ == "__main__":
    sys.exit(main())
