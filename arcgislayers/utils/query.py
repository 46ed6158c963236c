"""Query state helpers for layer and table handles."""

from __future__ import annotations

from typing import Any, TypeVar

from ..core.exceptions import UnsupportedHandleError
from ..core.validation import check_null_or_scalar
from ..models import BaseHandle, FeatureLayer, Table
from ..runtime.rest import HTTPClient, arc_open

H = TypeVar("H", bound=BaseHandle)

# Handle variants that carry a query and can be refreshed
QUERYABLE_TYPES = (FeatureLayer, Table)


def clear_query(handle: H) -> H:
    """Return a copy of ``handle`` without any stored query parameters."""
    return handle.model_copy(update={"query": {}})


def update_params(handle: H, **params: Any) -> H:
    """Return a copy of ``handle`` with ``params`` merged into its query.

    Passing ``None`` for a parameter removes it from the query.

    Example:
        >>> flayer = update_params(flayer, outFields="*", where="1=1")

    Raises:
        ValidationError: If a parameter value has more than one element
    """
    query = dict(handle.query)
    for key, value in params.items():
        check_null_or_scalar(value, arg=key, call="update_params")
        if value is None:
            query.pop(key, None)
        else:
            query[key] = value
    return handle.model_copy(update={"query": query})


async def refresh_layer(handle: H, *, client: HTTPClient | None = None) -> H:
    """Re-fetch a layer or table, keeping its query.

    Picks up any changes made upstream (new fields, renamed layers, etc.).

    Args:
        handle: FeatureLayer or Table to refresh
        client: HTTP client to reuse

    Returns:
        A new handle of the same type with the old query attached

    Raises:
        UnsupportedHandleError: If ``handle`` is not a FeatureLayer or Table
    """
    if not isinstance(handle, QUERYABLE_TYPES):
        raise UnsupportedHandleError(
            f"refresh_layer() supports FeatureLayer and Table, not {type(handle).__name__}",
            handle_type=type(handle).__name__,
        )

    fresh = await arc_open(handle.url, client=client)
    return fresh.model_copy(update={"query": dict(handle.query)})
