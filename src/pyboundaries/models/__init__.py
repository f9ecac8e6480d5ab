"""GeoJSON models for boundary data."""

from pyboundaries.models._base import GeoBaseModel
from pyboundaries.models.feature import Feature, FeatureCollection
from pyboundaries.models.geometry import Geometry, MultiPolygon, Polygon, UnsupportedGeometry

__all__ = [
    "Feature",
    "FeatureCollection",
    "GeoBaseModel",
    "Geometry",
    "MultiPolygon",
    "Polygon",
    "UnsupportedGeometry",
]
