"""Argument guards for values sent as single request parameters."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from .exceptions import ValidationError


def check_null_or_scalar(x: Any, arg: str = "x", call: str | None = None) -> None:
    """Ensure ``x`` is either ``None`` or a single value.

    Multipart and query parameters of the ArcGIS REST API accept exactly one
    value per key, so lists, tuples, arrays and series with more than one
    element are rejected. Strings and bytes count as single values.

    Args:
        x: Value to check
        arg: Name of the argument being checked, used in the error message
        call: Name of the calling operation, used in the error message

    Raises:
        ValidationError: If ``x`` has more than one element
    """
    if x is None or isinstance(x, (str, bytes)):
        return
    # 0-d arrays define __len__ but have no length
    if getattr(x, "ndim", None) == 0:
        return
    if isinstance(x, Sized) and len(x) > 1:
        where = f" in {call}()" if call else ""
        raise ValidationError(
            f"`{arg}` argument{where} must be a scalar or None, got {len(x)} values",
            arg=arg,
            call=call,
        )
