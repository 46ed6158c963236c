"""arcgislayers - helpers for ArcGIS Feature, Map and Image service handles."""

from .core import (
    ArcGISLayersError,
    ProviderError,
    StructuralError,
    UnsupportedHandleError,
    ValidationError,
    check_null_or_scalar,
    coalesce_crs,
    crs_from_spatial_reference,
)
from .models import BaseHandle, FeatureLayer, FeatureServer, ImageServer, MapServer, Table
from .runtime import ChunkPlan, HTTPClient, arc_open, chunk_indices
from .utils import (
    FIELD_COLUMNS,
    ITEM_COLUMNS,
    clear_query,
    infer_esri_type,
    list_fields,
    list_items,
    refresh_layer,
    update_params,
)

__version__ = "0.1.0"

__all__ = [
    # Handles
    "BaseHandle",
    "FeatureLayer",
    "FeatureServer",
    "ImageServer",
    "MapServer",
    "Table",
    # Metadata
    "FIELD_COLUMNS",
    "ITEM_COLUMNS",
    "infer_esri_type",
    "list_fields",
    "list_items",
    # Query state
    "clear_query",
    "refresh_layer",
    "update_params",
    # REST
    "HTTPClient",
    "arc_open",
    # Chunking
    "ChunkPlan",
    "chunk_indices",
    # CRS and validation
    "check_null_or_scalar",
    "coalesce_crs",
    "crs_from_spatial_reference",
    # Exceptions
    "ArcGISLayersError",
    "ProviderError",
    "StructuralError",
    "UnsupportedHandleError",
    "ValidationError",
]
