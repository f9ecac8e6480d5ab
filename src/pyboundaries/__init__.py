"""pyboundaries - Async province/canton boundary aggregation."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyboundaries")
except PackageNotFoundError:
    __version__ = "0+local"
from pyboundaries._cache import FeatureCollectionCache
from pyboundaries._constants import KNOWN_CANTON_NAMES, list_known_canton_names
from pyboundaries._transport import HttpJsonTransport, JsonFetcher
from pyboundaries.aggregation import filter_by_province, find_canton, merge_province
from pyboundaries.client import BoundaryAggregator
from pyboundaries.config import BoundaryConfig
from pyboundaries.exceptions import (
    BoundaryConfigError,
    BoundaryDataError,
    BoundaryError,
    BoundaryTimeoutError,
    BoundaryTransportError,
    CantonNotFoundError,
    LoadError,
    NoBoundariesFoundError,
)
from pyboundaries.loader import BoundaryLoader
from pyboundaries.models import (
    Feature,
    FeatureCollection,
    Geometry,
    MultiPolygon,
    Polygon,
    UnsupportedGeometry,
)

__all__ = [
    "__version__",
    "BoundaryAggregator",
    "BoundaryConfig",
    "BoundaryConfigError",
    "BoundaryDataError",
    "BoundaryError",
    "BoundaryLoader",
    "BoundaryTimeoutError",
    "BoundaryTransportError",
    "CantonNotFoundError",
    "Feature",
    "FeatureCollection",
    "FeatureCollectionCache",
    "Geometry",
    "HttpJsonTransport",
    "JsonFetcher",
    "KNOWN_CANTON_NAMES",
    "LoadError",
    "MultiPolygon",
    "NoBoundariesFoundError",
    "Polygon",
    "UnsupportedGeometry",
    "filter_by_province",
    "find_canton",
    "list_known_canton_names",
    "merge_province",
]
