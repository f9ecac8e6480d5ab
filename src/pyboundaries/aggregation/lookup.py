"""Resolve a canton by name."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pyboundaries._constants import CANTON_NAME_KEYS
from pyboundaries.exceptions import CantonNotFoundError
from pyboundaries.models.feature import Feature, FeatureCollection
from pyboundaries.normalize import display_name, names_match


def find_canton(
    features: FeatureCollection | Iterable[Feature],
    name: str,
    *,
    keys: Sequence[str] = CANTON_NAME_KEYS,
) -> Feature:
    """Return the first feature whose display name loosely matches *name*.

    An empty *name* is contained in every candidate, so it returns the
    first feature.

    Raises
    ------
    CantonNotFoundError
        If nothing matches.
    """
    candidates = features.features if isinstance(features, FeatureCollection) else features
    for feature in candidates:
        if names_match(name, display_name(feature, keys)):
            return feature
    raise CantonNotFoundError(name)
