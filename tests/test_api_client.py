# tests/test_api_client.py

from __future__ import annotations

import json

import httpx
import pytest

from boardflow.api.client import HttpBoardsApi
from boardflow.core.errors import ApiError


def _api(handler) -> HttpBoardsApi:
    client = httpx.AsyncClient(base_url="http://boards.test/api", transport=httpx.MockTransport(handler))
    return HttpBoardsApi("http://boards.test/api", client=client)


@pytest.mark.asyncio
async def test_fetch_boards_sends_page_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"boards": [], "isLastPage": True})

    api = _api(handler)
    result = await api.fetch_boards(2, 20)

    assert result == {"boards": [], "isLastPage": True}
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/api/boards"
    assert seen[0].url.params["pageIndex"] == "2"
    assert seen[0].url.params["pageSize"] == "20"


@pytest.mark.asyncio
async def test_update_board_sends_props_and_flags() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "b1", "starred": True})

    api = _api(handler)
    await api.update_board("b1", {"starred": True}, {"notify": False, "activity": False})

    request = seen[0]
    assert request.method == "PATCH"
    assert request.url.path == "/api/boards/b1"
    assert request.url.params["notify"] == "false"
    assert request.url.params["activity"] == "false"
    assert json.loads(request.content) == {"starred": True}


@pytest.mark.asyncio
async def test_move_and_remove_routes() -> None:
    seen: list[tuple[str, str, bytes]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path, request.content))
        if request.method == "DELETE":
            return httpx.Response(204)
        return httpx.Response(200, json={"ok": True})

    api = _api(handler)
    assert await api.move_board("a", "b") == {"ok": True}
    assert await api.remove_board("a") is None

    assert seen[0][:2] == ("POST", "/api/boards/a/move")
    assert json.loads(seen[0][2]) == {"targetId": "b"}
    assert seen[1][:2] == ("DELETE", "/api/boards/a")


@pytest.mark.asyncio
async def test_http_error_uses_server_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Board not found"})

    api = _api(handler)
    with pytest.raises(ApiError) as err:
        await api.fetch_board("missing")

    assert err.value.message == "Board not found"
    assert err.value.status_code == 404


@pytest.mark.asyncio
async def test_http_error_without_body_uses_status_line() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="oops")

    api = _api(handler)
    with pytest.raises(ApiError) as err:
        await api.fetch_starred_boards()

    assert err.value.message == "500 Internal Server Error"


@pytest.mark.asyncio
async def test_transport_error_becomes_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    api = _api(handler)
    with pytest.raises(ApiError) as err:
        await api.create_board("t", None)

    assert err.value.message == "Network error: ConnectError"
    assert err.value.status_code is None
