from __future__ import annotations

import asyncio
import json
from pathlib import Path

import aiohttp
import pytest
from aiohttp import test_utils, web

from pyboundaries._transport import HttpJsonTransport
from pyboundaries.client import BoundaryAggregator
from pyboundaries.config import BoundaryConfig
from pyboundaries.exceptions import BoundaryTimeoutError, BoundaryTransportError, LoadError

PAYLOAD = {
    "type": "FeatureCollection",
    "features": [{"type": "Feature", "properties": {"NAME_1": "Guayas", "NAME_2": "Balao"}, "geometry": None}],
}


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "gadm41_ECU_2.json"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.mark.asyncio
async def test_reads_plain_path(tmp_path: Path) -> None:
    path = _write(tmp_path, json.dumps(PAYLOAD))

    async with aiohttp.ClientSession() as http:
        result = await HttpJsonTransport(http).fetch_json(str(path), 5.0)

    assert result == PAYLOAD


@pytest.mark.asyncio
async def test_reads_file_uri(tmp_path: Path) -> None:
    path = _write(tmp_path, json.dumps(PAYLOAD["features"]))

    async with aiohttp.ClientSession() as http:
        result = await HttpJsonTransport(http).fetch_json(path.as_uri(), 5.0)

    assert result == PAYLOAD["features"]


@pytest.mark.asyncio
async def test_missing_file_raises_transport_error(tmp_path: Path) -> None:
    missing = tmp_path / "nope.json"

    async with aiohttp.ClientSession() as http:
        with pytest.raises(BoundaryTransportError) as exc_info:
            await HttpJsonTransport(http).fetch_json(str(missing), 5.0)

    assert exc_info.value.resource == str(missing)
    assert isinstance(exc_info.value.cause, FileNotFoundError)


@pytest.mark.asyncio
async def test_invalid_json_raises_transport_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "<html>proxy error</html>")

    async with aiohttp.ClientSession() as http:
        with pytest.raises(BoundaryTransportError, match="Invalid JSON"):
            await HttpJsonTransport(http).fetch_json(str(path), 5.0)


@pytest.mark.asyncio
async def test_invalid_utf8_raises_transport_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"features": [], "x": "\xff\xfe"}')

    async with aiohttp.ClientSession() as http:
        with pytest.raises(BoundaryTransportError, match="not valid UTF-8") as exc_info:
            await HttpJsonTransport(http).fetch_json(str(path), 5.0)

    assert isinstance(exc_info.value.cause, UnicodeDecodeError)


@pytest.mark.asyncio
async def test_invalid_utf8_dataset_is_a_load_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"features": [], "x": "\xff\xfe"}')

    async with BoundaryAggregator(BoundaryConfig(source=str(path))) as aggregator:
        with pytest.raises(LoadError):
            await aggregator.load()


# ------------------------------------------------------------------
# HTTP
# ------------------------------------------------------------------


async def _ok(_request: web.Request) -> web.Response:
    return web.json_response(PAYLOAD)


async def _bad_gateway(_request: web.Request) -> web.Response:
    return web.Response(status=502, text="upstream unavailable")


async def _not_found(_request: web.Request) -> web.Response:
    return web.Response(status=404, text="no such file")


async def _slow(_request: web.Request) -> web.Response:
    await asyncio.sleep(0.5)
    return web.json_response(PAYLOAD)


def _app() -> web.Application:
    app = web.Application()
    app.router.add_get("/gadm41_ECU_2.json", _ok)
    app.router.add_get("/bad-gateway.json", _bad_gateway)
    app.router.add_get("/missing.json", _not_found)
    app.router.add_get("/slow.json", _slow)
    return app


@pytest.mark.asyncio
async def test_http_200_returns_decoded_json() -> None:
    async with test_utils.TestServer(_app()) as server, aiohttp.ClientSession() as http:
        result = await HttpJsonTransport(http).fetch_json(str(server.make_url("/gadm41_ECU_2.json")), 5.0)

    assert result == PAYLOAD


@pytest.mark.asyncio
@pytest.mark.parametrize(("path", "status"), [("/missing.json", 404), ("/bad-gateway.json", 502)])
async def test_http_error_status_raises_with_status_code(path: str, status: int) -> None:
    async with test_utils.TestServer(_app()) as server, aiohttp.ClientSession() as http:
        url = str(server.make_url(path))
        with pytest.raises(BoundaryTransportError) as exc_info:
            await HttpJsonTransport(http).fetch_json(url, 5.0)

    assert exc_info.value.status_code == status
    assert exc_info.value.resource == url
    assert f"HTTP {status}" in str(exc_info.value)


@pytest.mark.asyncio
async def test_http_slow_response_raises_timeout() -> None:
    async with test_utils.TestServer(_app()) as server, aiohttp.ClientSession() as http:
        with pytest.raises(BoundaryTimeoutError) as exc_info:
            await HttpJsonTransport(http).fetch_json(str(server.make_url("/slow.json")), 0.05)

    assert exc_info.value.timeout == 0.05


@pytest.mark.asyncio
async def test_http_connection_error_raises_transport_error() -> None:
    async with test_utils.TestServer(_app()) as server:
        url = str(server.make_url("/gadm41_ECU_2.json"))
    # The server is closed now, so the port refuses connections.

    async with aiohttp.ClientSession() as http:
        with pytest.raises(BoundaryTransportError) as exc_info:
            await HttpJsonTransport(http).fetch_json(url, 5.0)

    assert not isinstance(exc_info.value, BoundaryTimeoutError)
    assert isinstance(exc_info.value.cause, aiohttp.ClientError)
