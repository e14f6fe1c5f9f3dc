# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from boardflow.runtime.interpreter import Runtime
from boardflow.runtime.store import SnapshotStore

from .fakes import ActionLog, FakeBoardsApi, make_state


@pytest.fixture()
def settings(tmp_path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap and watchers.

    A SimpleNamespace rather than the real config keeps tests independent of
    the environment and any local .env file.
    """
    return SimpleNamespace(
        app_name="boardflow-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        api_base_url="http://boards.test/api",
        api_timeout_seconds=1.0,
        boards_per_page=20,
        home_path="/",
    )


@pytest.fixture()
def api() -> FakeBoardsApi:
    return FakeBoardsApi()


@pytest.fixture()
def store() -> SnapshotStore:
    return SnapshotStore(make_state(ids_count=20, page_index=1))


@pytest.fixture()
def action_log() -> ActionLog:
    return ActionLog()


@pytest.fixture()
def runtime(store: SnapshotStore, action_log: ActionLog) -> Runtime:
    rt = Runtime(store, name="test")
    rt.bus.subscribe(action_log)
    return rt
