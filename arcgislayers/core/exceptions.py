"""Custom exception hierarchy."""

from __future__ import annotations

from collections.abc import Iterable


class ArcGISLayersError(Exception):
    """Base exception for all library errors."""

    pass


class ValidationError(ArcGISLayersError):
    """Argument validation failure.

    Raised when a value bound for a single-value request parameter carries
    more than one element.
    """

    def __init__(self, message: str, arg: str | None = None, call: str | None = None) -> None:
        super().__init__(message)
        self.arg = arg
        self.call = call


class StructuralError(ArcGISLayersError):
    """Two listings cannot be stacked because their columns differ."""

    def __init__(
        self,
        message: str,
        left: Iterable[str] | None = None,
        right: Iterable[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.left = frozenset(left) if left is not None else frozenset()
        self.right = frozenset(right) if right is not None else frozenset()


class UnsupportedHandleError(ArcGISLayersError):
    """Operation invoked on a handle variant it does not support."""

    def __init__(self, message: str, handle_type: str | None = None) -> None:
        super().__init__(message)
        self.handle_type = handle_type


class ProviderError(ArcGISLayersError):
    """Error payload returned by an ArcGIS REST endpoint."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code
