# src/boardflow/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the HTTP board API, the state snapshot and the runtime together,
- starts the root process (watchers + progress bar coordinator),
- reads replay input files.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..api.client import HttpBoardsApi
from ..config import get_settings
from ..core.actions import Action
from ..core.ports import BoardsApi
from ..runtime.interpreter import Runtime, TaskHandle
from ..runtime.store import SnapshotStore
from ..tasks import watchers

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class App:
    settings: Any
    store: SnapshotStore
    runtime: Runtime
    api: BoardsApi
    root: TaskHandle | None = None

    async def aclose(self) -> None:
        close = getattr(self.api, "aclose", None)
        if close is not None:
            await close()


def create_app(
        *,
        settings=None,
        state: Mapping[str, Any] | None = None,
        api: BoardsApi | None = None,
) -> App:
    """
    Build and start the application. Must be called with a running event loop.

    Keeping settings and api injectable makes the app easy to test;
    if settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if api is None:
        api = HttpBoardsApi(settings.api_base_url, timeout=settings.api_timeout_seconds)

    store = SnapshotStore(state)
    runtime = Runtime(store, name=str(getattr(settings, "app_name", "boardflow")))
    app = App(settings=settings, store=store, runtime=runtime, api=api)
    app.root = watchers.start(runtime, api, settings)
    return app


def load_json(path: str | Path) -> Any:
    return json.loads(Path(path).read_text("utf-8"))


def parse_actions(raw: Any) -> list[Action]:
    """Turn a JSON list of {"type", "payload"?, "error"?} objects into actions."""
    if not isinstance(raw, list):
        raise ValueError("actions file must contain a JSON list")

    out: list[Action] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict) or not isinstance(item.get("type"), str):
            raise ValueError(f"action #{i} has no string 'type'")
        out.append(Action(type=item["type"], payload=item.get("payload"), error=item.get("error")))
    return out


def action_to_json(action: Action) -> str:
    data: dict[str, Any] = {"type": action.type}
    if action.payload is not None:
        data["payload"] = action.payload
    if action.error is not None:
        data["error"] = action.error
    return json.dumps(data, ensure_ascii=False, default=str)
