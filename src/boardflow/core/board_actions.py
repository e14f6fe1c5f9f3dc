# src/boardflow/core/board_actions.py

from __future__ import annotations

from typing import Any

from .actions import Action, create_actions, create_constants, simple_action

types = create_constants(
    "BOARDS_FETCH_REQUEST",
    "BOARDS_FETCH_SUCCESS",
    "BOARDS_FETCH_FAILURE",
    "BOARDS_FETCH_STARRED_REQUEST",
    "BOARDS_FETCH_STARRED_SUCCESS",
    "BOARDS_FETCH_STARRED_FAILURE",
    "BOARD_FETCH_REQUEST",
    "BOARD_FETCH_SUCCESS",
    "BOARD_FETCH_FAILURE",
    "BOARD_CREATE_REQUEST",
    "BOARD_CREATE_SUCCESS",
    "BOARD_CREATE_FAILURE",
    "BOARD_REMOVE_REQUEST",
    "BOARD_REMOVE_SUCCESS",
    "BOARD_REMOVE_FAILURE",
    "BOARD_UPDATE_REQUEST",
    "BOARD_UPDATE_SUCCESS",
    "BOARD_UPDATE_FAILURE",
    "BOARD_UPDATE_MODAL_FORM",
    "BOARD_MOVE_REQUEST",
    "BOARD_MOVE_SUCCESS",
    "BOARD_MOVE_FAILURE",
    "BOARD_TOGGLE_STARRED_REQUEST",
    "BOARD_TOGGLE_STARRED_SUCCESS",
    "BOARD_TOGGLE_STARRED_FAILURE",
    "BOARDS_SET_PAGE_INDEX",
    "BOARD_ADD",
    "SCROLL_BOTTOM",
    "MODAL_HIDE",
    "PROGRESS_BAR_START",
    "PROGRESS_BAR_STOP",
)

BOARDS_FETCH_REQUEST = types["BOARDS_FETCH_REQUEST"]
BOARDS_FETCH_SUCCESS = types["BOARDS_FETCH_SUCCESS"]
BOARDS_FETCH_FAILURE = types["BOARDS_FETCH_FAILURE"]
BOARDS_FETCH_STARRED_REQUEST = types["BOARDS_FETCH_STARRED_REQUEST"]
BOARDS_FETCH_STARRED_SUCCESS = types["BOARDS_FETCH_STARRED_SUCCESS"]
BOARDS_FETCH_STARRED_FAILURE = types["BOARDS_FETCH_STARRED_FAILURE"]
BOARD_FETCH_REQUEST = types["BOARD_FETCH_REQUEST"]
BOARD_CREATE_REQUEST = types["BOARD_CREATE_REQUEST"]
BOARD_REMOVE_REQUEST = types["BOARD_REMOVE_REQUEST"]
BOARD_UPDATE_REQUEST = types["BOARD_UPDATE_REQUEST"]
BOARD_UPDATE_MODAL_FORM = types["BOARD_UPDATE_MODAL_FORM"]
BOARD_MOVE_REQUEST = types["BOARD_MOVE_REQUEST"]
BOARD_TOGGLE_STARRED_REQUEST = types["BOARD_TOGGLE_STARRED_REQUEST"]
BOARDS_SET_PAGE_INDEX = types["BOARDS_SET_PAGE_INDEX"]
BOARD_ADD = types["BOARD_ADD"]
SCROLL_BOTTOM = types["SCROLL_BOTTOM"]
MODAL_HIDE = types["MODAL_HIDE"]
PROGRESS_BAR_START = types["PROGRESS_BAR_START"]
PROGRESS_BAR_STOP = types["PROGRESS_BAR_STOP"]

# Request/success/failure creators
fetch_boards = create_actions(
    types["BOARDS_FETCH_REQUEST"], types["BOARDS_FETCH_SUCCESS"], types["BOARDS_FETCH_FAILURE"]
)
fetch_starred_boards = create_actions(
    types["BOARDS_FETCH_STARRED_REQUEST"],
    types["BOARDS_FETCH_STARRED_SUCCESS"],
    types["BOARDS_FETCH_STARRED_FAILURE"],
)
fetch_board = create_actions(
    types["BOARD_FETCH_REQUEST"], types["BOARD_FETCH_SUCCESS"], types["BOARD_FETCH_FAILURE"]
)
create_board = create_actions(
    types["BOARD_CREATE_REQUEST"], types["BOARD_CREATE_SUCCESS"], types["BOARD_CREATE_FAILURE"]
)
remove_board = create_actions(
    types["BOARD_REMOVE_REQUEST"], types["BOARD_REMOVE_SUCCESS"], types["BOARD_REMOVE_FAILURE"]
)
update_board = create_actions(
    types["BOARD_UPDATE_REQUEST"], types["BOARD_UPDATE_SUCCESS"], types["BOARD_UPDATE_FAILURE"]
)
move_board = create_actions(
    types["BOARD_MOVE_REQUEST"], types["BOARD_MOVE_SUCCESS"], types["BOARD_MOVE_FAILURE"]
)
toggle_starred = create_actions(
    types["BOARD_TOGGLE_STARRED_REQUEST"],
    types["BOARD_TOGGLE_STARRED_SUCCESS"],
    types["BOARD_TOGGLE_STARRED_FAILURE"],
)

# Single actions
update_board_modal_form = simple_action(BOARD_UPDATE_MODAL_FORM)
add_board = simple_action(BOARD_ADD)
hide_modal = simple_action(MODAL_HIDE)
start_progress_bar = simple_action(PROGRESS_BAR_START)
stop_progress_bar = simple_action(PROGRESS_BAR_STOP)
scroll_bottom = simple_action(SCROLL_BOTTOM)


def set_page_index(page_index: int) -> Action:
    return Action(type=BOARDS_SET_PAGE_INDEX, payload={"pageIndex": page_index})


# Groups watched by the progress bar coordinator
LIST_FETCH_REQUESTS: tuple[str, ...] = (BOARDS_FETCH_REQUEST, BOARDS_FETCH_STARRED_REQUEST)
LIST_FETCH_RESULTS: tuple[str, ...] = (
    BOARDS_FETCH_SUCCESS,
    BOARDS_FETCH_FAILURE,
    BOARDS_FETCH_STARRED_SUCCESS,
    BOARDS_FETCH_STARRED_FAILURE,
)


def payload_of(action: Action) -> dict[str, Any]:
    """Request payloads are mappings; tolerate None for payload-less requests."""
    return dict(action.payload or {})
