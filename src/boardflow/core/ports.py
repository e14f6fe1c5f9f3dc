# src/boardflow/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Tasks depend on Protocols instead of concrete implementations so the HTTP
adapter and the state store stay swappable and tests can use fakes.
"""

from collections.abc import Mapping
from typing import Any, Awaitable, Protocol

Board = dict[str, Any]
# Server-side board representation; the core never looks inside it.


class BoardsApi(Protocol):
    """
    Board API collaborator.

    Every call resolves to the server result or raises (ApiError for expected
    failures). Results are passed through to the store untouched.
    """

    def fetch_boards(self, page_index: int, page_size: int) -> Awaitable[Any]: ...
    def fetch_starred_boards(self) -> Awaitable[Any]: ...
    def fetch_board(self, board_id: str) -> Awaitable[Any]: ...
    def create_board(self, title: str, description: str | None) -> Awaitable[Any]: ...
    def remove_board(self, board_id: str) -> Awaitable[Any]: ...

    def update_board(
            self,
            board_id: str,
            props: Mapping[str, Any],
            params: Mapping[str, Any] | None = None,
    ) -> Awaitable[Any]: ...

    def move_board(self, source_id: str, target_id: str) -> Awaitable[Any]: ...


class StateReader(Protocol):
    """Read-only, point-in-time view of the external store."""

    def get_state(self) -> Mapping[str, Any]: ...
