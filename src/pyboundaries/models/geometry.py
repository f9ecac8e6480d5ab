"""Geometry models.

:data:`Geometry` is a tagged union discriminated on the GeoJSON ``type``
member.  ``Polygon`` and ``MultiPolygon`` are modelled explicitly; every
other geometry type loads as :class:`UnsupportedGeometry` so a dataset with
a stray ``GeometryCollection`` still loads.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Discriminator, Tag

from pyboundaries.models._base import GeoBaseModel

Position = list[Any]
"""``[longitude, latitude]``, optionally followed by altitude.  Passed through unchecked."""
Ring = list[Position]
PolygonCoordinates = list[Ring]


class Polygon(GeoBaseModel):
    """A single polygon: an outer ring followed by optional holes."""

    type: Literal["Polygon"] = "Polygon"
    coordinates: PolygonCoordinates


class MultiPolygon(GeoBaseModel):
    """An ordered group of independent polygons treated as one area."""

    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: list[PolygonCoordinates]

    @property
    def polygon_count(self) -> int:
        return len(self.coordinates)


class UnsupportedGeometry(GeoBaseModel):
    """Any other GeoJSON geometry, carried verbatim."""

    model_config = ConfigDict(extra="allow")

    type: str


def _geometry_tag(value: Any) -> str:
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if kind in ("Polygon", "MultiPolygon"):
        return str(kind)
    return "other"


Geometry = Annotated[
    Union[
        Annotated[Polygon, Tag("Polygon")],
        Annotated[MultiPolygon, Tag("MultiPolygon")],
        Annotated[UnsupportedGeometry, Tag("other")],
    ],
    Discriminator(_geometry_tag),
]
