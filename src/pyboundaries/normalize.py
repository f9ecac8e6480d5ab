"""Normalization helpers.

Centralizes property fallback chains and the loose name matching used by
the province filter and the canton lookup.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from pyboundaries._constants import CANTON_NAME_KEYS, PROVINCE_KEYS, UNNAMED

if TYPE_CHECKING:
    from pyboundaries.models.feature import Feature


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def first_present(properties: Mapping[str, Any], keys: Sequence[str]) -> str | None:
    """Return the first value in *keys* order that is present and non-empty.

    Values are returned as strings; ``None`` and blank strings are skipped
    so the next key in the chain gets a chance.
    """
    for key in keys:
        value = safe_str(properties.get(key))
        if value is not None:
            return value
    return None


def province_of(feature: Feature, keys: Sequence[str] = PROVINCE_KEYS) -> str:
    """Province attribute of *feature*, or ``""`` when none of *keys* is set."""
    return first_present(feature.properties, keys) or ""


def display_name(feature: Feature, keys: Sequence[str] = CANTON_NAME_KEYS, default: str = UNNAMED) -> str:
    """Canton display name of *feature*, falling back to *default*."""
    return first_present(feature.properties, keys) or default


def contains_name(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test."""
    return needle.lower() in haystack.lower()


def names_match(query: str, candidate: str) -> bool:
    """Bidirectional, case-insensitive substring match.

    ``"Guaya"`` matches ``"Guayaquil"`` and ``"Cantón Guayaquil"`` matches
    ``"Guayaquil"``.
    """
    return contains_name(candidate, query) or contains_name(query, candidate)
