"""Shared REST constants.

Centralizes request defaults and the mapping from service URLs and metadata
``type`` values to handle classes so the opener can stay small.
"""

from __future__ import annotations

from ...models import FeatureLayer, FeatureServer, ImageServer, MapServer, Table

# Request timeout in seconds
DEFAULT_TIMEOUT = 30.0

# Every metadata request asks for the JSON representation
DEFAULT_PARAMS = {"f": "json"}

# Service endpoints are recognised by the last path segment
SERVICE_SUFFIXES = {
    "featureserver": FeatureServer,
    "mapserver": MapServer,
    "imageserver": ImageServer,
}

# Layer endpoints are recognised by the ``type`` key of their metadata
LAYER_TYPES = {
    "Feature Layer": FeatureLayer,
    "Table": Table,
}

# Query parameters never written to logs
SECRET_PARAMS = frozenset({"token", "password"})
