"""Filter, merge and lookup over loaded boundary features."""

from pyboundaries.aggregation.filter import filter_by_province
from pyboundaries.aggregation.lookup import find_canton
from pyboundaries.aggregation.merge import collect_polygons, merge_province

__all__ = [
    "collect_polygons",
    "filter_by_province",
    "find_canton",
    "merge_province",
]
