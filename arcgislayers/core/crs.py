"""Coordinate reference system helpers."""

from __future__ import annotations

from typing import Any

from pyproj import CRS
from pyproj.exceptions import CRSError


def _check_crs(value: Any, arg: str) -> None:
    if value is not None and not isinstance(value, CRS):
        raise TypeError(f"{arg} must be a pyproj.CRS or None, got {type(value).__name__}")


def coalesce_crs(x: CRS | None, y: CRS | None) -> CRS | None:
    """Pick the first non-missing CRS.

    ``x`` wins whenever it is set. When both are missing ``x`` (``None``) is
    returned.

    Raises:
        TypeError: If either argument is neither a ``pyproj.CRS`` nor ``None``
    """
    _check_crs(x, "x")
    _check_crs(y, "y")

    if x is None and y is not None:
        return y
    return x


def crs_from_spatial_reference(sr: dict[str, Any] | None) -> CRS | None:
    """Build a CRS from an ArcGIS ``spatialReference`` object.

    ``latestWkid`` is preferred over ``wkid`` since the former carries the
    current EPSG code for deprecated Esri ids (e.g. 102100 -> 3857).
    """
    if not sr:
        return None

    wkid = sr.get("latestWkid") or sr.get("wkid")
    if wkid is not None:
        wkid = int(wkid)
        try:
            return CRS.from_authority("EPSG", wkid)
        except CRSError:
            # Esri-only ids (e.g. 54030 World Robinson) are not in the EPSG registry
            return CRS.from_authority("ESRI", wkid)

    wkt = sr.get("wkt")
    if wkt:
        return CRS.from_wkt(wkt)

    return None
