# tests/test_pagination.py

from __future__ import annotations

import pytest

from boardflow.core import board_actions as ba
from boardflow.core.effects import Call, put, select
from boardflow.tasks.pagination import fetch_boards_on_scroll, is_cached

from .fakes import make_state


def _run(state, *, page_size: int = 20, home_path: str = "/") -> list:
    """Drive the scroll task against a fixed snapshot and collect what it yields."""
    gen = fetch_boards_on_scroll(page_size, home_path, ba.scroll_bottom())
    effects = []
    assert next(gen) == select()
    value = state
    while True:
        try:
            effects.append(gen.send(value))
        except StopIteration:
            return effects
        value = None


@pytest.mark.parametrize(
    ("page_index", "page_size", "ids_count", "expected"),
    [
        (2, 20, 50, True),
        (2, 20, 40, False),
        (2, 20, 35, False),
        (0, 20, 1, True),
        (0, 20, 0, False),
        (3, 15, 46, True),
    ],
)
def test_is_cached(page_index: int, page_size: int, ids_count: int, expected: bool) -> None:
    assert is_cached(page_index, page_size, ids_count) is expected


def test_cached_page_only_moves_pointer() -> None:
    effects = _run(make_state(page_index=2, ids_count=50))
    assert effects == [put(ba.set_page_index(3))]
    assert not any(isinstance(e, Call) for e in effects)


def test_uncached_page_requests_next_page() -> None:
    effects = _run(make_state(page_index=2, ids_count=35))
    assert effects == [put(ba.fetch_boards.request({"pageIndex": 3}))]


@pytest.mark.parametrize(
    ("is_fetching", "is_last_page"),
    [(True, False), (False, True), (True, True)],
)
def test_uncached_page_is_skipped_while_fetching_or_on_last_page(is_fetching: bool, is_last_page: bool) -> None:
    state = make_state(page_index=2, ids_count=35, is_fetching=is_fetching, is_last_page=is_last_page)
    assert _run(state) == []


@pytest.mark.parametrize("ids_count", [0, 35, 50])
def test_other_routes_are_ignored(ids_count: int) -> None:
    state = make_state(page_index=2, ids_count=ids_count, pathname="/boards/b1")
    assert _run(state) == []


def test_custom_home_path() -> None:
    state = make_state(page_index=1, ids_count=5, pathname="/app")
    assert _run(state, home_path="/app") == [put(ba.fetch_boards.request({"pageIndex": 2}))]
