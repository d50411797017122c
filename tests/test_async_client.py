import asyncio
import json

import httpx
import pytest

from conftest import API_KEY, BASE_URL, RecordingTransport
from rbxstats import AsyncRbxStatsClient, BadStatusError, MalformedResponseError, RequestFailedError


def _run(coro):
    return asyncio.run(coro)


def test_json_endpoint(make_async_client):
    body = '{"Windows": [{"name": "x", "detected": false}]}'
    handler = RecordingTransport(body=body)

    async def scenario():
        async with make_async_client(handler) as client:
            return await client.exploits.get_windows()

    assert _run(scenario()) == json.loads(body)
    assert handler.last_url == f"{BASE_URL}/api/exploits/windows?api={API_KEY}"


def test_plain_endpoint(make_async_client):
    handler = RecordingTransport(body="CameraMaxZoomDistance = 0x2A0")

    async def scenario():
        async with make_async_client(handler) as client:
            return await client.game.get_game_by_id_plain(920587237)

    assert _run(scenario()) == "CameraMaxZoomDistance = 0x2A0"
    assert handler.last_url == f"{BASE_URL}/api/offsets/game/920587237/plain?api={API_KEY}"


def test_concurrent_calls_share_one_client(make_async_client):
    handler = RecordingTransport(body='{"ok": true}')

    async def scenario():
        async with make_async_client(handler) as client:
            return await asyncio.gather(
                client.versions.get_latest(),
                client.versions.get_future(),
                client.offsets.get_camera(),
            )

    assert _run(scenario()) == [{"ok": True}] * 3
    paths = sorted(request.url.path for request in handler.requests)
    assert paths == ["/api/offsets/camera", "/api/versions/future", "/api/versions/latest"]


def test_validation_is_eager(make_async_client):
    handler = RecordingTransport()
    client = make_async_client(handler)
    # El error llega al llamar, no al hacer await.
    with pytest.raises(ValueError):
        client.offsets.get_offset_by_name("")
    _run(client._http.aclose())


def test_invalid_json(make_async_client):
    handler = RecordingTransport(body="<!doctype html>")

    async def scenario():
        async with make_async_client(handler) as client:
            await client.offsets.get_all()

    with pytest.raises(MalformedResponseError):
        _run(scenario())


def test_connection_failure(make_async_client):
    handler = RecordingTransport(error=httpx.ConnectError("connection refused"))

    async def scenario():
        async with make_async_client(handler) as client:
            await client.offsets.get_all_plain()

    with pytest.raises(RequestFailedError):
        _run(scenario())


def test_bad_status(make_async_client):
    handler = RecordingTransport(status_code=403, body="forbidden")

    async def scenario():
        async with make_async_client(handler) as client:
            await client.exploits.get_undetected()

    with pytest.raises(BadStatusError) as excinfo:
        _run(scenario())
    assert excinfo.value.status_code == 403


def test_owned_client_closed_on_exit():
    client = AsyncRbxStatsClient(API_KEY)

    async def scenario():
        async with client:
            pass

    _run(scenario())
    assert client._http.is_closed


def test_redirect_followed_on_injected_client_without_flag():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        if request.url.path == "/api/versions/future":
            return httpx.Response(301, headers={"Location": f"{BASE_URL}/api/v2/versions/future?api={API_KEY}"})
        return httpx.Response(200, json={"future": None})

    async def scenario():
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        try:
            async with AsyncRbxStatsClient(API_KEY, base_url=BASE_URL, http_client=http) as client:
                return await client.versions.get_future()
        finally:
            await http.aclose()

    assert _run(scenario()) == {"future": None}
    assert seen == ["/api/versions/future", "/api/v2/versions/future"]
