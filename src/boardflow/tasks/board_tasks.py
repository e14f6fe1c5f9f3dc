# src/boardflow/tasks/board_tasks.py

from __future__ import annotations

"""
Per-feature board tasks.

Every task is spawned by a watcher with the triggering action, performs its
API call(s) and ends with exactly one success or one failure action. A failed
call is turned into a failure action carrying the error message; nothing is
retried.
"""

import logging
from collections.abc import Callable, Generator
from typing import Any

from ..core.actions import Action
from ..core.board_actions import (
    add_board,
    create_board,
    fetch_board,
    fetch_boards,
    fetch_starred_boards,
    hide_modal,
    move_board,
    payload_of,
    remove_board,
    start_progress_bar,
    stop_progress_bar,
    toggle_starred,
    update_board,
)
from ..core.effects import call, put, select
from ..core.errors import failure_message
from ..core.ports import BoardsApi
from ..core.selectors import select_boards_page

logger = logging.getLogger(__name__)

TaskGen = Generator[Any, Any, None]


def _notify(callback: Callable[[], None] | None) -> None:
    if callback is not None:
        callback()


def fetch_boards_task(api: BoardsApi, page_size: int, action: Action) -> TaskGen:
    page_index = payload_of(action)["pageIndex"]
    try:
        result = yield call(api.fetch_boards, page_index, page_size)
        # An empty body merges as {}; a non-mapping body is a failure.
        payload = {**(result or {}), "request": {"pageIndex": page_index}}
    except Exception as exc:
        logger.warning("fetch_boards failed page=%s: %s", page_index, exc)
        yield put(fetch_boards.failure(failure_message(exc)))
        return

    yield put(fetch_boards.success(payload))


def fetch_starred_boards_task(api: BoardsApi, action: Action) -> TaskGen:
    try:
        result = yield call(api.fetch_starred_boards)
    except Exception as exc:
        logger.warning("fetch_starred_boards failed: %s", exc)
        yield put(fetch_starred_boards.failure(failure_message(exc)))
        return

    yield put(fetch_starred_boards.success(result))


def fetch_board_task(api: BoardsApi, action: Action) -> TaskGen:
    board_id = payload_of(action)["id"]
    yield put(start_progress_bar())
    try:
        result = yield call(api.fetch_board, board_id)
    except Exception as exc:
        logger.warning("fetch_board failed id=%s: %s", board_id, exc)
        yield put(fetch_board.failure(failure_message(exc)))
    else:
        yield put(fetch_board.success(result))
    finally:
        yield put(stop_progress_bar())


def create_board_task(api: BoardsApi, action: Action) -> TaskGen:
    payload = payload_of(action)
    try:
        result = yield call(api.create_board, payload["title"], payload.get("description"))
    except Exception as exc:
        logger.warning("create_board failed: %s", exc)
        yield put(create_board.failure(failure_message(exc)))
        _notify(payload.get("reject"))
        return

    yield put(create_board.success(result))
    yield put(hide_modal())
    _notify(payload.get("resolve"))


def remove_board_task(api: BoardsApi, action: Action) -> TaskGen:
    board_id = payload_of(action)["id"]
    try:
        page = yield select(select_boards_page)
        result = yield call(api.remove_board, board_id)

        if not page.is_last_page:
            # Refill: pull the next unseen board so the visible page stays full.
            # The offset is len(ids) + 1 as the list endpoint expects it.
            refill = yield call(api.fetch_boards, len(page.ids) + 1, 1)
            yield put(add_board(refill))
    except Exception as exc:
        logger.warning("remove_board failed id=%s: %s", board_id, exc)
        yield put(remove_board.failure(failure_message(exc)))
        return

    yield put(remove_board.success(result))
    yield put(hide_modal())


def update_board_task(api: BoardsApi, action: Action) -> TaskGen:
    payload = payload_of(action)
    board_id = payload["id"]
    try:
        result = yield call(api.update_board, board_id, payload["props"], payload.get("params"))
    except Exception as exc:
        logger.warning("update_board failed id=%s: %s", board_id, exc)
        yield put(update_board.failure(failure_message(exc)))
        return

    yield put(update_board.success(result))


def update_board_modal_form_task(api: BoardsApi, action: Action) -> TaskGen:
    payload = payload_of(action)
    board_id = payload["id"]
    try:
        result = yield call(api.update_board, board_id, payload["props"])
    except Exception as exc:
        logger.warning("update_board (modal form) failed id=%s: %s", board_id, exc)
        yield put(update_board.failure(failure_message(exc)))
        _notify(payload.get("reject"))
        return

    yield put(update_board.success(result))
    yield put(hide_modal())
    _notify(payload.get("resolve"))


def move_board_task(api: BoardsApi, action: Action) -> TaskGen:
    payload = payload_of(action)
    source_id, target_id = payload["sourceId"], payload["targetId"]
    try:
        result = yield call(api.move_board, source_id, target_id)
    except Exception as exc:
        logger.warning("move_board failed %s -> %s: %s", source_id, target_id, exc)
        yield put(move_board.failure(failure_message(exc)))
        return

    yield put(move_board.success(result))


def toggle_starred_task(api: BoardsApi, action: Action) -> TaskGen:
    payload = payload_of(action)
    board_id = payload["id"]
    try:
        # Starring is silent: no notification, no activity entry.
        result = yield call(
            api.update_board,
            board_id,
            {"starred": payload["starred"]},
            {"notify": False, "activity": False},
        )
    except Exception as exc:
        logger.warning("toggle_starred failed id=%s: %s", board_id, exc)
        yield put(toggle_starred.failure(failure_message(exc)))
        return

    yield put(toggle_starred.success(result))
