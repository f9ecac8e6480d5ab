"""Base model for GeoJSON shapes.

Every model inherits from :class:`GeoBaseModel` which provides:

* ``frozen=True`` so features behave as immutable value objects.
* ``extra="ignore"`` so vendor-specific members (``bbox``, ``crs``,
  ``id``) do not break loading.
* :meth:`GeoBaseModel.to_geojson` returning a plain JSON-compatible dict.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class GeoBaseModel(BaseModel):
    """Base for GeoJSON models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    def to_geojson(self) -> dict[str, Any]:
        """Return the model as a GeoJSON-compatible dict."""
        return self.model_dump(mode="json")
