"""JSON transport for boundary datasets (HTTP via aiohttp, or local files)."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Protocol
from urllib.parse import unquote, urlparse

import aiohttp

from pyboundaries.exceptions import BoundaryTimeoutError, BoundaryTransportError

_logger = logging.getLogger(__name__)

_HTTP_SCHEMES = frozenset({"http", "https"})


class JsonFetcher(Protocol):
    """Structural fetch interface used by the loader.

    Implementations fetch *resource* and return the decoded JSON value,
    raising :class:`~pyboundaries.exceptions.LoadError` subclasses (or
    ``TimeoutError``/``aiohttp.ClientError``/``OSError``) on failure.
    Test doubles only need this one coroutine.
    """

    async def fetch_json(self, resource: str, timeout: float) -> Any:
        ...


def _decode(body: bytes, resource: str) -> Any:
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BoundaryTransportError(
            f"Response from {resource} is not valid UTF-8: {exc}",
            resource=resource,
        ) from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise BoundaryTransportError(
            f"Invalid JSON from {resource}: {text[:200]}",
            resource=resource,
        ) from exc


def _local_path(resource: str) -> Path:
    parsed = urlparse(resource)
    if parsed.scheme == "file":
        return Path(unquote(parsed.path))
    return Path(resource)


class HttpJsonTransport:
    """Fetch JSON documents over HTTP(S) or from the local filesystem.

    ``http://`` and ``https://`` resources are requested with the given
    ``aiohttp`` session; ``file://`` URIs and plain paths are read in a
    worker thread.
    """

    def __init__(self, http_session: aiohttp.ClientSession) -> None:
        self._http = http_session

    async def fetch_json(self, resource: str, timeout: float) -> Any:
        if urlparse(resource).scheme in _HTTP_SCHEMES:
            return await self._fetch_http(resource, timeout)
        return await self._fetch_file(resource, timeout)

    async def _fetch_http(self, url: str, timeout: float) -> Any:
        _logger.debug("GET %s (timeout=%ss)", url, timeout)

        try:
            async with self._http.get(url, timeout=aiohttp.ClientTimeout(total=timeout)) as resp:
                body = await resp.read()
                if resp.status != 200:
                    raise BoundaryTransportError(
                        f"HTTP {resp.status} from {url}: {body[:200].decode('utf-8', errors='replace')}",
                        resource=url,
                        status_code=resp.status,
                    )
        except BoundaryTransportError:
            raise
        except TimeoutError as exc:
            raise BoundaryTimeoutError(
                f"Request to {url} timed out after {timeout}s",
                resource=url,
                timeout=timeout,
            ) from exc
        except aiohttp.ClientError as exc:
            raise BoundaryTransportError(
                f"Request to {url} failed: {exc}",
                resource=url,
            ) from exc

        return _decode(body, url)

    async def _fetch_file(self, resource: str, timeout: float) -> Any:
        path = _local_path(resource)
        _logger.debug("Reading %s", path)

        try:
            body = await asyncio.wait_for(asyncio.to_thread(path.read_bytes), timeout)
        except TimeoutError as exc:
            raise BoundaryTimeoutError(
                f"Reading {path} timed out after {timeout}s",
                resource=resource,
                timeout=timeout,
            ) from exc
        except OSError as exc:
            raise BoundaryTransportError(
                f"Could not read {path}: {exc}",
                resource=resource,
            ) from exc

        return _decode(body, resource)
