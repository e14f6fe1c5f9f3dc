# src/boardflow/tasks/pagination.py

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

from ..core.actions import Action
from ..core.board_actions import fetch_boards, set_page_index
from ..core.effects import put, select
from ..core.selectors import select_boards_page, select_pathname

logger = logging.getLogger(__name__)


def is_cached(page_index: int, page_size: int, ids_count: int) -> bool:
    """The next page is already loaded when the ids seen so far go past the current page."""
    return page_index * page_size < ids_count


def fetch_boards_on_scroll(
        page_size: int,
        home_path: str = "/",
        action: Action | None = None,
) -> Generator[Any, Any, None]:
    """
    Scroll-bottom handler for the board list.

    Only acts on the home route. Reveals an already loaded page by moving the
    page pointer, otherwise asks for the next page unless a fetch is running
    or the last page was reached. Never talks to the API itself.
    """
    state = yield select()

    if select_pathname(state) != home_path:
        return

    page = select_boards_page(state)

    if is_cached(page.page_index, page_size, len(page.ids)):
        yield put(set_page_index(page.page_index + 1))
        return

    if not page.is_fetching and not page.is_last_page:
        yield put(fetch_boards.request({"pageIndex": page.page_index + 1}))
        return

    logger.debug(
        "scroll ignored page=%s fetching=%s last=%s", page.page_index, page.is_fetching, page.is_last_page
    )
