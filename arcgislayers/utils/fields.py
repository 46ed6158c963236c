"""Esri field type inference for pandas data."""

from __future__ import annotations

import pandas as pd
from pandas.api import types as ptypes

# Canonical columns of a field listing, in the order the REST API reports them
FIELD_COLUMNS = (
    "name",
    "type",
    "alias",
    "sqlType",
    "nullable",
    "editable",
    "domain",
    "defaultValue",
    "length",
)


def esri_field_type(dtype) -> str:
    """Map a pandas dtype to an ``esriFieldType`` name."""
    if ptypes.is_bool_dtype(dtype):
        return "esriFieldTypeSmallInteger"
    if ptypes.is_integer_dtype(dtype):
        if ptypes.pandas_dtype(dtype).itemsize <= 2:
            return "esriFieldTypeSmallInteger"
        return "esriFieldTypeInteger"
    if ptypes.is_float_dtype(dtype):
        return "esriFieldTypeDouble"
    if ptypes.is_datetime64_any_dtype(dtype):
        return "esriFieldTypeDate"
    return "esriFieldTypeString"


def infer_esri_type(df: pd.DataFrame) -> pd.DataFrame:
    """Infer a field listing from the columns of ``df``.

    Args:
        df: Data whose columns become fields. May have zero rows and zero
            columns, in which case the listing is empty.

    Returns:
        One row per column with the canonical field listing columns
    """
    rows = [
        {
            "name": str(column),
            "type": esri_field_type(dtype),
            "alias": str(column),
            "sqlType": "sqlTypeOther",
            "nullable": True,
            "editable": True,
            "domain": None,
            "defaultValue": None,
            "length": None,
        }
        for column, dtype in df.dtypes.items()
    ]
    return pd.DataFrame(rows, columns=list(FIELD_COLUMNS))
