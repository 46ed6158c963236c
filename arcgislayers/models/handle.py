"""Handle models for remote ArcGIS resources.

Architecture:
    A handle is the in-memory representation of a remote layer, table or
    service. It carries the endpoint URL, the decoded service metadata and the
    query parameters attached by query-building helpers.

Design Decisions:
    - Frozen models: query helpers return copies instead of mutating
    - Explicit ``query`` field: the filter state travels with the handle
    - One subclass per resource variant: callers dispatch on the type
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pyproj import CRS

from ..core.crs import crs_from_spatial_reference


class BaseHandle(BaseModel):
    """Common base for all ArcGIS resource handles."""

    url: str = Field(..., min_length=1)
    metadata: dict[str, Any] = Field(default_factory=dict)
    query: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    def __getitem__(self, key: str) -> Any:
        """Read a metadata value, ``None`` when the key is absent."""
        return self.metadata.get(key)

    @property
    def name(self) -> str | None:
        """Resource name from the metadata."""
        return self.metadata.get("name")

    @property
    def crs(self) -> CRS | None:
        """Spatial reference of the resource, ``None`` when unset."""
        sr = self.metadata.get("spatialReference")
        if sr is None:
            sr = (self.metadata.get("extent") or {}).get("spatialReference")
        return crs_from_spatial_reference(sr)


class FeatureLayer(BaseHandle):
    """A layer of a FeatureServer or MapServer with geometry."""

    pass


class Table(BaseHandle):
    """A non-spatial table of a FeatureServer or MapServer."""

    pass


class FeatureServer(BaseHandle):
    """A FeatureServer listing layers and tables."""

    pass


class MapServer(BaseHandle):
    """A MapServer listing layers and tables."""

    pass


class ImageServer(BaseHandle):
    """An ImageServer (raster) service."""

    pass
