from __future__ import annotations

import logging
from collections.abc import AsyncIterator

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from pyvehicles._transport import HttpTransport
from pyvehicles.exceptions import VehiclesTransportError


async def _echo(request: web.Request) -> web.Response:
    return web.json_response({"query": dict(request.query), "agent": request.headers.get("user-agent")})


async def _broken(request: web.Request) -> web.Response:
    return web.Response(status=500, text="boom")


async def _not_json(request: web.Request) -> web.Response:
    return web.Response(text="<html>nope</html>")


@pytest_asyncio.fixture
async def base_url() -> AsyncIterator[str]:
    app = web.Application()
    app.router.add_get("/echo", _echo)
    app.router.add_get("/broken", _broken)
    app.router.add_get("/html", _not_json)
    server = test_utils.TestServer(app)
    await server.start_server()
    try:
        yield str(server.make_url("/"))
    finally:
        await server.close()


@pytest.mark.asyncio
async def test_get_json_decodes_reply_and_sends_params(base_url: str) -> None:
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(base_url, session)
        reply = await transport.get_json("/echo", {"lat": 1.5, "vehicleId": 3})

    assert reply["query"] == {"lat": "1.5", "vehicleId": "3"}
    assert reply["agent"].startswith("pyvehicles/")
    assert not transport.base_url.endswith("/")


@pytest.mark.asyncio
async def test_non_2xx_raises_with_status(base_url: str) -> None:
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(base_url, session)
        with pytest.raises(VehiclesTransportError) as exc_info:
            await transport.get_json("/broken", {})

    assert exc_info.value.status_code == 500
    assert exc_info.value.endpoint == "/broken"


@pytest.mark.asyncio
async def test_missing_route_reports_404(base_url: str) -> None:
    async with aiohttp.ClientSession() as session:
        with pytest.raises(VehiclesTransportError) as exc_info:
            await HttpTransport(base_url, session).get_json("/nowhere", {})

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_invalid_json_raises(base_url: str) -> None:
    async with aiohttp.ClientSession() as session:
        with pytest.raises(VehiclesTransportError, match="Invalid JSON"):
            await HttpTransport(base_url, session).get_json("/html", {})


@pytest.mark.asyncio
async def test_connection_failure_is_wrapped() -> None:
    async with aiohttp.ClientSession() as session:
        transport = HttpTransport(f"http://127.0.0.1:{test_utils.unused_port()}", session, timeout=2.0)
        with pytest.raises(VehiclesTransportError) as exc_info:
            await transport.get_json("/echo", {})

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_trace_logs_truncated_body(base_url: str, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="pyvehicles._transport")

    async with aiohttp.ClientSession() as session:
        await HttpTransport(base_url, session, trace=True).get_json("/echo", {"pad": "x" * 2000})

    traced = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Response from /echo")]
    assert len(traced) == 1
    assert len(traced[0]) < 600
