# src/boardflow/api/client.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..core.errors import ApiError

logger = logging.getLogger(__name__)


def _query_value(value: Any) -> Any:
    # Booleans go on the wire as the server expects them: "true"/"false".
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        msg = body.get("message") or body.get("error")
        if isinstance(msg, str) and msg.strip():
            return msg.strip()

    return f"{response.status_code} {response.reason_phrase}".strip()


class HttpBoardsApi:
    """
    BoardsApi over HTTP (httpx.AsyncClient).

    All failures, HTTP status or transport, surface as ApiError with a message
    fit for the failure action.
    """

    def __init__(
            self,
            base_url: str,
            *,
            timeout: float = 10.0,
            client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpBoardsApi:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _request(
            self,
            method: str,
            url: str,
            *,
            params: Mapping[str, Any] | None = None,
            json: Any = None,
    ) -> Any:
        query = {k: _query_value(v) for k, v in (params or {}).items()}
        try:
            response = await self._client.request(method, url, params=query or None, json=json)
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out", method, url)
            raise ApiError("Request timed out") from exc
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(f"Network error: {exc.__class__.__name__}") from exc

        if response.is_error:
            message = _error_message(response)
            logger.debug("%s %s -> %s %s", method, url, response.status_code, message)
            raise ApiError(message, status_code=response.status_code)

        if not response.content:
            return None
        return response.json()

    async def fetch_boards(self, page_index: int, page_size: int) -> Any:
        return await self._request("GET", "/boards", params={"pageIndex": page_index, "pageSize": page_size})

    async def fetch_starred_boards(self) -> Any:
        return await self._request("GET", "/boards/starred")

    async def fetch_board(self, board_id: str) -> Any:
        return await self._request("GET", f"/boards/{board_id}")

    async def create_board(self, title: str, description: str | None) -> Any:
        return await self._request("POST", "/boards", json={"title": title, "description": description})

    async def remove_board(self, board_id: str) -> Any:
        return await self._request("DELETE", f"/boards/{board_id}")

    async def update_board(
            self,
            board_id: str,
            props: Mapping[str, Any],
            params: Mapping[str, Any] | None = None,
    ) -> Any:
        return await self._request("PATCH", f"/boards/{board_id}", params=params, json=dict(props))

    async def move_board(self, source_id: str, target_id: str) -> Any:
        return await self._request("POST", f"/boards/{source_id}/move", json={"targetId": target_id})
