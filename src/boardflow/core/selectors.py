# src/boardflow/core/selectors.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class BoardsPage:
    """Projection of `pages.main.all` in the store."""

    ids: tuple[Any, ...]
    is_fetching: bool
    page_index: int
    is_last_page: bool


def select_boards_page(state: Mapping[str, Any]) -> BoardsPage:
    raw = state["pages"]["main"]["all"]
    return BoardsPage(
        ids=tuple(raw.get("ids") or ()),
        is_fetching=bool(raw.get("isFetching", False)),
        page_index=int(raw.get("pageIndex", 0)),
        is_last_page=bool(raw.get("isLastPage", False)),
    )


def select_pathname(state: Mapping[str, Any]) -> str:
    location = state["routing"]["locationBeforeTransitions"] or {}
    return str(location.get("pathname") or "")
