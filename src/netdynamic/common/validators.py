"""
Input validation utilities for spell tables.

Spell tables are Polars DataFrames with one row per spell: one or two
integer key columns (a vertex id, or the tail and head of an edge) plus
onset and terminus columns, and optionally boolean censoring columns.
"""

from typing import List, Optional, Sequence

import polars as pl

from .exceptions import DataFormatError, InvalidInterval, ValidationError


def validate_spell_dataframe(
    df: pl.DataFrame,
    key_cols: Sequence[str],
    onset_col: str = "onset",
    terminus_col: str = "terminus",
    censor_cols: Optional[Sequence[str]] = None,
    allow_empty: bool = True
) -> None:
    """
    Validate a spell table before building a dynamic network from it.

    Parameters
    ----------
    df : pl.DataFrame
        Spell table to validate
    key_cols : Sequence[str]
        Vertex id column, or tail and head columns for edges
    onset_col : str, default "onset"
        Name of the onset column
    terminus_col : str, default "terminus"
        Name of the terminus column
    censor_cols : Sequence[str], optional
        Censoring columns that are present and must be boolean
    allow_empty : bool, default True
        Whether a table without rows is acceptable

    Raises
    ------
    ValidationError
        If columns are missing, contain nulls, or vertex ids are negative
    DataFormatError
        If key columns are not integers or censoring columns not boolean
    InvalidInterval
        If some row has ``onset > terminus``

    Examples
    --------
    >>> df = pl.DataFrame({"tail": [0, 1], "head": [1, 2],
    ...                    "onset": [0.0, 5.0], "terminus": [10.0, 15.0]})
    >>> validate_spell_dataframe(df, key_cols=["tail", "head"])
    """
    if not isinstance(df, pl.DataFrame):
        raise DataFormatError(
            f"Spell table must be a polars DataFrame, got {type(df).__name__}",
            format_type="DataFrame"
        )

    required_cols: List[str] = list(key_cols) + [onset_col, terminus_col]
    missing_cols = [col for col in required_cols if col not in df.columns]
    if missing_cols:
        raise ValidationError(
            f"Missing required columns: {missing_cols}",
            field="columns",
            details={"available_columns": df.columns, "missing": missing_cols}
        )

    if df.is_empty():
        if not allow_empty:
            raise ValidationError("DataFrame is empty", field="dataframe")
        return

    for col in required_cols:
        null_count = df[col].null_count()
        if null_count > 0:
            raise ValidationError(
                f"Column contains {null_count} null values",
                field=col,
                details={"null_count": null_count, "total_rows": len(df)}
            )

    for col in key_cols:
        if not df[col].dtype.is_integer():
            raise DataFormatError(
                f"Vertex id column must be integer, got {df[col].dtype}",
                format_type="DataFrame",
                field=col
            )
        if df[col].min() < 0:
            raise ValidationError(
                "Vertex ids must be non-negative",
                field=col,
                value=df[col].min()
            )

    for col in censor_cols or ():
        if df[col].dtype != pl.Boolean:
            raise DataFormatError(
                f"Censoring column must be boolean, got {df[col].dtype}",
                format_type="DataFrame",
                field=col
            )

    inverted = (
        df.with_row_index("row")
        .filter(pl.col(onset_col) > pl.col(terminus_col))
    )
    if not inverted.is_empty():
        first = inverted.row(0, named=True)
        raise InvalidInterval(
            first[onset_col],
            first[terminus_col],
            details={"row": first["row"], "invalid_rows": len(inverted)}
        )
