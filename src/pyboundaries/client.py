"""High-level async aggregator for administrative boundaries."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pyboundaries._cache import FeatureCollectionCache
from pyboundaries._constants import list_known_canton_names
from pyboundaries._transport import HttpJsonTransport, JsonFetcher
from pyboundaries.aggregation import filter_by_province, find_canton, merge_province
from pyboundaries.config import BoundaryConfig
from pyboundaries.exceptions import BoundaryError, NoBoundariesFoundError
from pyboundaries.loader import BoundaryLoader
from pyboundaries.models.feature import FeatureCollection
from pyboundaries.normalize import display_name

_logger = logging.getLogger(__name__)


class BoundaryAggregator:
    """Async aggregator over a province/canton boundary dataset.

    Usage::

        async with BoundaryAggregator(BoundaryConfig()) as aggregator:
            guayas = await aggregator.get_province("Guayas")
            cantons = await aggregator.get_province_cantons("Guayas")

    A custom *fetcher* (anything implementing
    :class:`~pyboundaries._transport.JsonFetcher`) can be injected; the
    aggregator is then usable without entering the context manager.
    """

    def __init__(
        self,
        config: BoundaryConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        fetcher: JsonFetcher | None = None,
        cache: FeatureCollectionCache | None = None,
    ) -> None:
        self._config = config if config is not None else BoundaryConfig()
        self._external_session = session is not None
        self._http_session = session
        self._cache = cache if cache is not None else FeatureCollectionCache()
        self._loader: BoundaryLoader | None = None
        if fetcher is not None:
            self._loader = self._build_loader(fetcher)

    @property
    def config(self) -> BoundaryConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> BoundaryAggregator:
        if self._loader is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._loader = self._build_loader(HttpJsonTransport(self._http_session))
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._loader = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build_loader(self, fetcher: JsonFetcher) -> BoundaryLoader:
        return BoundaryLoader(
            fetcher,
            self._config.resource_url,
            timeout=self._config.timeout,
            cache=self._cache,
        )

    def _require_loader(self) -> BoundaryLoader:
        if self._loader is None:
            raise BoundaryError("Aggregator not initialized. Use 'async with BoundaryAggregator(...) as aggregator:'")
        return self._loader

    # ------------------------------------------------------------------
    # Dataset
    # ------------------------------------------------------------------

    async def load(self) -> FeatureCollection:
        """Return the full dataset, fetching it on first use."""
        return await self._require_loader().load()

    def invalidate_cache(self) -> None:
        """Forget the loaded dataset; the next call fetches it again."""
        self._cache.invalidate()

    # ------------------------------------------------------------------
    # Pipelines
    # ------------------------------------------------------------------

    async def get_province(self, province_name: str | None = None, *, label: str | None = None) -> FeatureCollection:
        """Return the province as a single ``MultiPolygon`` feature.

        *label* names the merged feature and defaults to *province_name*.

        Raises
        ------
        LoadError
            If the dataset cannot be loaded.
        NoBoundariesFoundError
            If no canton belongs to the province.
        """
        province = province_name or self._config.province
        collection = await self.load()
        cantons = filter_by_province(collection, province, keys=self._config.province_keys)
        _logger.debug("%d cantons found in %s", len(cantons), province)
        if not cantons:
            raise NoBoundariesFoundError(province)

        merged = merge_province(cantons, label or province)
        return FeatureCollection(features=[merged])

    async def get_province_cantons(self, province_name: str | None = None) -> FeatureCollection:
        """Return the cantons of a province with a normalized ``name`` property.

        An unknown province yields an empty collection.
        """
        province = province_name or self._config.province
        collection = await self.load()
        cantons = filter_by_province(collection, province, keys=self._config.province_keys)

        features = [feature.with_name(display_name(feature, self._config.canton_name_keys)) for feature in cantons]
        _logger.debug("%d cantons loaded for %s", len(features), province)
        for feature in features:
            _logger.debug("  %s: %s", feature.properties["name"], feature.geometry_type)

        return FeatureCollection(features=features)

    async def get_canton(self, name: str, province_name: str | None = None) -> FeatureCollection:
        """Return the first canton of the province whose name loosely matches *name*.

        Raises
        ------
        CantonNotFoundError
            If no canton matches.
        """
        cantons = await self.get_province_cantons(province_name)
        canton = find_canton(cantons, name, keys=("name",))
        return FeatureCollection(features=[canton])

    def list_known_canton_names(self) -> list[str]:
        """The 24 known canton names, in order.  No I/O."""
        return list_known_canton_names()
