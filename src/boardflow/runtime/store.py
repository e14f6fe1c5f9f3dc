# src/boardflow/runtime/store.py

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


class SnapshotStore:
    """
    Read-only StateReader over a fixed snapshot.

    The real store (reducers) lives outside this package; this one is enough
    for replaying actions against a known state and for tests.
    """

    def __init__(self, state: Mapping[str, Any] | None = None) -> None:
        self._state: Mapping[str, Any] = MappingProxyType(dict(state or {}))

    def get_state(self) -> Mapping[str, Any]:
        return self._state

    def replace(self, state: Mapping[str, Any]) -> None:
        self._state = MappingProxyType(dict(state))
