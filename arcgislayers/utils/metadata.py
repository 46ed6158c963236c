"""Accessors for cached handle metadata."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd

from ..core.exceptions import StructuralError
from ..models import BaseHandle
from .fields import FIELD_COLUMNS, infer_esri_type

# Canonical columns of a layer or table listing
ITEM_COLUMNS = (
    "id",
    "name",
    "parentLayerId",
    "defaultVisibility",
    "subLayerIds",
    "minScale",
    "maxScale",
    "type",
    "geometryType",
)


def as_listing(value: Any, columns: Sequence[str]) -> pd.DataFrame | None:
    """Turn a metadata listing into a DataFrame.

    Lists of records from service JSON get the canonical ``columns`` first,
    followed by any extra keys. DataFrames are returned untouched.
    """
    if value is None:
        return None
    if isinstance(value, pd.DataFrame):
        return value

    frame = pd.DataFrame(list(value))
    extras = [c for c in frame.columns if c not in columns]
    return frame.reindex(columns=[*columns, *extras])


def list_fields(handle: BaseHandle) -> pd.DataFrame:
    """Fields of a layer or table.

    Handles without field metadata (e.g. services) yield an empty listing
    with the canonical columns rather than ``None``.
    """
    fields = as_listing(handle["fields"], FIELD_COLUMNS)
    if fields is None:
        fields = infer_esri_type(pd.DataFrame())
    return fields


def list_items(handle: BaseHandle) -> pd.DataFrame:
    """Layers and tables of a service, stacked row-wise (layers first).

    Raises:
        StructuralError: If both listings are non-empty and their columns differ
    """
    layers = as_listing(handle["layers"], ITEM_COLUMNS)
    tables = as_listing(handle["tables"], ITEM_COLUMNS)

    if layers is None or layers.empty:
        if tables is None or tables.empty:
            return pd.DataFrame(columns=list(ITEM_COLUMNS))
        return tables
    if tables is None or tables.empty:
        return layers

    if set(layers.columns) != set(tables.columns):
        missing = sorted(set(layers.columns) ^ set(tables.columns))
        raise StructuralError(
            f"Cannot combine layers and tables of {handle.url}: "
            f"columns differ ({', '.join(map(str, missing))})",
            left=layers.columns,
            right=tables.columns,
        )

    return pd.concat([layers, tables[list(layers.columns)]], ignore_index=True)
