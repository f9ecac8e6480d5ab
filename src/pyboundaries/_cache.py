"""In-memory cache for the loaded boundary dataset."""

from __future__ import annotations

from pyboundaries.models.feature import FeatureCollection


class FeatureCollectionCache:
    """Single-slot cache holding the most recently loaded collection.

    No eviction and no TTL; the slot only changes through :meth:`store`
    and :meth:`invalidate`.  Readers see either ``None`` or a fully built
    collection.
    """

    def __init__(self) -> None:
        self._collection: FeatureCollection | None = None

    @property
    def is_populated(self) -> bool:
        return self._collection is not None

    def get(self) -> FeatureCollection | None:
        return self._collection

    def store(self, collection: FeatureCollection) -> FeatureCollection:
        self._collection = collection
        return collection

    def invalidate(self) -> None:
        """Clear the slot so the next load fetches again."""
        self._collection = None
