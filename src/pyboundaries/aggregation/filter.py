"""Select the cantons of a province."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pyboundaries._constants import PROVINCE_KEYS
from pyboundaries.models.feature import Feature, FeatureCollection
from pyboundaries.normalize import contains_name, province_of


def filter_by_province(
    collection: FeatureCollection | Iterable[Feature],
    province_name: str,
    *,
    keys: Sequence[str] = PROVINCE_KEYS,
) -> list[Feature]:
    """Return the features whose province attribute contains *province_name*.

    Matching is case-insensitive substring containment, so ``"guayas"``
    keeps both ``"Guayas"`` and ``"GUAYAS - Costa"``.  Input order is kept;
    an empty list is a valid result.
    """
    features = collection.features if isinstance(collection, FeatureCollection) else collection
    return [feature for feature in features if contains_name(province_of(feature, keys), province_name)]
