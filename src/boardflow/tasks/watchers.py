# src/boardflow/tasks/watchers.py

from __future__ import annotations

"""
Watchers and the root process.

A watcher waits for its action type(s) and forks a fresh worker task for
every occurrence. Workers run concurrently and are never de-duplicated or
cancelled: two quick updates of the same board are two independent tasks.
"""

import logging
from collections.abc import Callable, Generator
from typing import Any

from ..core import board_actions as ba
from ..core.effects import Pattern, fork, take
from ..core.ports import BoardsApi
from ..runtime.interpreter import Runtime, TaskHandle
from . import board_tasks
from .pagination import fetch_boards_on_scroll
from .progress import progress_bar_coordinator

logger = logging.getLogger(__name__)


def take_every(pattern: Pattern, worker: Callable[..., Any], *args: Any) -> Generator[Any, Any, None]:
    """Fork worker(*args, action) for every action matching pattern."""
    waiting = take(pattern)
    while True:
        action = yield waiting
        yield fork(worker, *args, action)


def boards_root(api: BoardsApi, *, page_size: int, home_path: str = "/") -> Generator[Any, Any, None]:
    """Start every board watcher and the progress bar coordinator, then finish."""
    watchers = [
        (ba.BOARDS_FETCH_REQUEST, board_tasks.fetch_boards_task, (api, page_size)),
        (ba.BOARDS_FETCH_STARRED_REQUEST, board_tasks.fetch_starred_boards_task, (api,)),
        (ba.BOARD_FETCH_REQUEST, board_tasks.fetch_board_task, (api,)),
        (ba.BOARD_CREATE_REQUEST, board_tasks.create_board_task, (api,)),
        (ba.BOARD_REMOVE_REQUEST, board_tasks.remove_board_task, (api,)),
        (ba.BOARD_UPDATE_REQUEST, board_tasks.update_board_task, (api,)),
        (ba.BOARD_MOVE_REQUEST, board_tasks.move_board_task, (api,)),
        (ba.BOARD_UPDATE_MODAL_FORM, board_tasks.update_board_modal_form_task, (api,)),
        (ba.SCROLL_BOTTOM, fetch_boards_on_scroll, (page_size, home_path)),
        (ba.BOARD_TOGGLE_STARRED_REQUEST, board_tasks.toggle_starred_task, (api,)),
    ]

    for pattern, worker, args in watchers:
        yield fork(take_every, pattern, worker, *args)

    yield fork(progress_bar_coordinator)
    logger.info("Board watchers started (%d + coordinator).", len(watchers))


def start(runtime: Runtime, api: BoardsApi, settings: Any) -> TaskHandle:
    """Spawn the root process on `runtime` using page size / home path from settings."""
    return runtime.spawn(
        boards_root,
        api,
        page_size=int(settings.boards_per_page),
        home_path=str(getattr(settings, "home_path", "/")),
    )
