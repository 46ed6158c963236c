"""Core components."""

from .crs import coalesce_crs, crs_from_spatial_reference
from .exceptions import (
    ArcGISLayersError,
    ProviderError,
    StructuralError,
    UnsupportedHandleError,
    ValidationError,
)
from .validation import check_null_or_scalar

__all__ = [
    "ArcGISLayersError",
    "ProviderError",
    "StructuralError",
    "UnsupportedHandleError",
    "ValidationError",
    "check_null_or_scalar",
    "coalesce_crs",
    "crs_from_spatial_reference",
]
