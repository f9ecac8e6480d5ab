"""Merge canton geometries into a single province shape."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pyboundaries.exceptions import NoBoundariesFoundError
from pyboundaries.models.feature import Feature
from pyboundaries.models.geometry import MultiPolygon, Polygon, PolygonCoordinates

_logger = logging.getLogger(__name__)


def collect_polygons(features: Sequence[Feature]) -> list[PolygonCoordinates]:
    """Gather polygon coordinates from *features*, flattening one level.

    A ``Polygon`` contributes one entry and a ``MultiPolygon`` with *k*
    polygons contributes *k* entries.  Other geometries are skipped.
    """
    all_coords: list[PolygonCoordinates] = []
    for feature in features:
        geometry = feature.geometry
        if isinstance(geometry, Polygon):
            all_coords.append(geometry.coordinates)
        elif isinstance(geometry, MultiPolygon):
            all_coords.extend(geometry.coordinates)
        else:
            _logger.debug("Skipping %s geometry in merge", feature.geometry_type)
    return all_coords


def merge_province(features: Sequence[Feature], province_label: str) -> Feature:
    """Combine *features* into one ``MultiPolygon`` feature named *province_label*.

    No deduplication, ring validation or simplification is applied and the
    source features are left untouched.

    Raises
    ------
    NoBoundariesFoundError
        If *features* is empty.
    """
    if not features:
        raise NoBoundariesFoundError(province_label)

    return Feature(
        properties={"name": province_label},
        geometry=MultiPolygon(coordinates=collect_polygons(features)),
    )
