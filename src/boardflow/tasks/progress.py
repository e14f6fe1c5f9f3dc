# src/boardflow/tasks/progress.py

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

from ..core.board_actions import (
    LIST_FETCH_REQUESTS,
    LIST_FETCH_RESULTS,
    start_progress_bar,
    stop_progress_bar,
)
from ..core.effects import put, take

logger = logging.getLogger(__name__)

FETCHES_PER_CYCLE = 2


def progress_bar_coordinator() -> Generator[Any, Any, None]:
    """
    Progress bar for the board list + starred list pair.

    Cycle: idle -> two list-fetch requests seen -> start -> two results
    (success or failure, any mix) seen -> stop -> idle. The bar is toggled
    once per pair, whatever order the two fetches finish in. Runs forever and
    only observes the bus.
    """
    cycle = 0
    while True:
        for _ in range(FETCHES_PER_CYCLE):
            yield take(LIST_FETCH_REQUESTS)

        cycle += 1
        logger.debug("progress cycle=%s start", cycle)
        yield put(start_progress_bar())

        for _ in range(FETCHES_PER_CYCLE):
            yield take(LIST_FETCH_RESULTS)

        logger.debug("progress cycle=%s stop", cycle)
        yield put(stop_progress_bar())
