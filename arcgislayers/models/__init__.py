"""Handle models for ArcGIS REST resources.

Architecture:
    This module exports the Pydantic v2 handle models. All models are
    immutable (frozen=True); helpers that change query state return copies.

Model Categories:
    - Layers: FeatureLayer, Table
    - Services: FeatureServer, MapServer, ImageServer
"""

from .handle import BaseHandle, FeatureLayer, FeatureServer, ImageServer, MapServer, Table

__all__ = [
    "BaseHandle",
    "FeatureLayer",
    "FeatureServer",
    "ImageServer",
    "MapServer",
    "Table",
]
