"""Fetch and memoize the raw boundary dataset."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import ValidationError

from pyboundaries._cache import FeatureCollectionCache
from pyboundaries._constants import DEFAULT_TIMEOUT_S
from pyboundaries._transport import JsonFetcher
from pyboundaries.exceptions import (
    BoundaryDataError,
    BoundaryTimeoutError,
    BoundaryTransportError,
    LoadError,
)
from pyboundaries.models.feature import FeatureCollection

_logger = logging.getLogger(__name__)


def normalize_payload(payload: Any, resource: str = "") -> FeatureCollection:
    """Wrap a raw dataset payload into a :class:`FeatureCollection`.

    A mapping exposing ``features`` contributes that list; anything else is
    treated as the feature sequence itself.

    Raises
    ------
    BoundaryDataError
        If the features cannot be validated.
    """
    if isinstance(payload, dict) and payload.get("features") is not None:
        features = payload["features"]
    else:
        features = payload

    try:
        return FeatureCollection.model_validate({"type": "FeatureCollection", "features": features})
    except ValidationError as exc:
        raise BoundaryDataError(
            f"Payload from {resource or 'source'} is not a feature collection: {exc.error_count()} errors",
            resource=resource,
        ) from exc


class BoundaryLoader:
    """Loads the dataset once and serves it from the cache afterwards.

    Concurrent first calls each fetch on their own; whichever finishes
    last owns the cache slot.  Failures are never cached.
    """

    def __init__(
        self,
        fetcher: JsonFetcher,
        resource: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_S,
        cache: FeatureCollectionCache | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._resource = resource
        self._timeout = timeout
        self._cache = cache if cache is not None else FeatureCollectionCache()

    @property
    def cache(self) -> FeatureCollectionCache:
        return self._cache

    async def load(self) -> FeatureCollection:
        """Return the dataset, fetching it on the first call.

        Raises
        ------
        LoadError
            On timeout, transport failure or an unusable payload.  The
            cache stays unset.
        """
        cached = self._cache.get()
        if cached is not None:
            return cached

        try:
            payload = await self._fetch()
            collection = normalize_payload(payload, self._resource)
        except LoadError as exc:
            _logger.debug("Loading %s failed: %s", self._resource, exc)
            raise

        self._cache.store(collection)
        _logger.debug("Loaded %d boundary features from %s", len(collection.features), self._resource)
        return collection

    def invalidate(self) -> None:
        """Drop the cached dataset; the next :meth:`load` fetches again."""
        self._cache.invalidate()

    async def _fetch(self) -> Any:
        try:
            return await asyncio.wait_for(
                self._fetcher.fetch_json(self._resource, self._timeout),
                self._timeout,
            )
        except LoadError:
            raise
        except TimeoutError as exc:
            raise BoundaryTimeoutError(
                f"Loading {self._resource} timed out after {self._timeout}s",
                resource=self._resource,
                timeout=self._timeout,
            ) from exc
        except (aiohttp.ClientError, OSError, UnicodeDecodeError) as exc:
            raise BoundaryTransportError(
                f"Loading {self._resource} failed: {exc}",
                resource=self._resource,
            ) from exc
