# tests/test_actions_and_config.py

from __future__ import annotations

import pytest

from boardflow.cli.bootstrap import action_to_json, parse_actions
from boardflow.config import DEFAULT_BOARDS_PER_PAGE, Settings
from boardflow.core import board_actions as ba
from boardflow.core.actions import DEFAULT_ERROR_MESSAGE, Action, create_actions, create_constants
from boardflow.core.errors import ApiError, failure_message


def test_constants_map_to_themselves() -> None:
    assert create_constants("A", "B") == {"A": "A", "B": "B"}
    assert ba.types["BOARD_MOVE_REQUEST"] == "BOARD_MOVE_REQUEST"


def test_action_triple() -> None:
    triple = create_actions("X_REQUEST", "X_SUCCESS", "X_FAILURE")

    assert triple.request({"a": 1}) == Action("X_REQUEST", {"a": 1})
    assert triple.success([1]) == Action("X_SUCCESS", [1])
    assert triple.failure("bad") == Action("X_FAILURE", error="bad")
    assert triple.failure() == Action("X_FAILURE", error=DEFAULT_ERROR_MESSAGE)
    assert triple.types == ("X_REQUEST", "X_SUCCESS", "X_FAILURE")


def test_failure_message() -> None:
    assert failure_message(ApiError("  Not allowed ")) == "Not allowed"
    assert failure_message(ValueError("plain")) == "plain"
    assert failure_message(ApiError("")) is None


def test_parse_actions_and_json_line() -> None:
    actions = parse_actions([{"type": "SCROLL_BOTTOM"}, {"type": "BOARD_FETCH_REQUEST", "payload": {"id": "b1"}}])

    assert actions == [ba.scroll_bottom(), ba.fetch_board.request({"id": "b1"})]
    assert action_to_json(ba.fetch_board.failure()) == '{"type": "BOARD_FETCH_FAILURE", "error": "Something bad happened"}'

    with pytest.raises(ValueError):
        parse_actions({"type": "X"})
    with pytest.raises(ValueError):
        parse_actions([{"payload": 1}])


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("BOARDFLOW_API_BASE_URL", "https://boards.example/api")
    monkeypatch.setenv("BOARDFLOW_BOARDS_PER_PAGE", "15")
    monkeypatch.setenv("BOARDFLOW_HOME_PATH", "/home")

    settings = Settings.from_env()

    assert settings.api_base_url == "https://boards.example/api"
    assert settings.boards_per_page == 15
    assert settings.home_path == "/home"


@pytest.mark.parametrize("raw", ["0", "-5", "many"])
def test_invalid_page_size_falls_back_to_default(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("BOARDFLOW_BOARDS_PER_PAGE", raw)
    assert Settings.from_env().boards_per_page == DEFAULT_BOARDS_PER_PAGE
