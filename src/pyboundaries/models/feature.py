"""Feature and FeatureCollection models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator

from pyboundaries.models._base import GeoBaseModel
from pyboundaries.models.geometry import Geometry


class Feature(GeoBaseModel):
    """A named, attributed boundary shape.

    Parameters
    ----------
    properties : dict
        Dataset attributes (``NAME_1``, ``NAME_2``, ``GID_2`` ...).
        ``null`` in the payload becomes an empty dict.
    geometry : Geometry or None
        ``None`` for unlocated features.
    """

    type: Literal["Feature"] = "Feature"
    properties: dict[str, Any] = Field(default_factory=dict)
    geometry: Geometry | None = None

    @field_validator("properties", mode="before")
    @classmethod
    def _coerce_properties(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def geometry_type(self) -> str | None:
        return self.geometry.type if self.geometry is not None else None

    def with_name(self, name: str) -> Feature:
        """Return a copy with ``properties["name"]`` set to *name*."""
        return self.model_copy(update={"properties": {**self.properties, "name": name}})


class FeatureCollection(GeoBaseModel):
    """An ordered collection of features."""

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[Feature] = Field(default_factory=list)
