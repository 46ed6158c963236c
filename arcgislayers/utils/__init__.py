"""Utility functions for handles."""

from .fields import FIELD_COLUMNS, esri_field_type, infer_esri_type
from .metadata import ITEM_COLUMNS, list_fields, list_items
from .query import clear_query, refresh_layer, update_params

__all__ = [
    "FIELD_COLUMNS",
    "ITEM_COLUMNS",
    "clear_query",
    "esri_field_type",
    "infer_esri_type",
    "list_fields",
    "list_items",
    "refresh_layer",
    "update_params",
]
