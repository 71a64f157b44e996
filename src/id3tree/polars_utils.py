"""Utility functions for turning Polars DataFrames into labeled tables."""

from __future__ import annotations

from collections.abc import Sequence

import polars as pl

from id3tree.exceptions import (
    ColumnsNotFoundError,
    DuplicateAttributesError,
    MissingLabelError,
    MissingValueError,
)
from id3tree.models import LabeledTable


def table_from_dataframe(
    df: pl.DataFrame,
    target: str,
    *,
    features: Sequence[str] | None = None,
) -> LabeledTable:
    """Convert a DataFrame into a `LabeledTable` with `target` as the label.

    Every value is cast to its string representation, so integer or boolean
    columns become categorical. The label column is always placed last.

    Args:
        df (pl.DataFrame): The source DataFrame.
        target (str): Name of the label column.
        features (Sequence[str] | None): Feature columns to keep, in order.
            When `None`, every column except `target` is used in frame order.

    Returns:
        LabeledTable: The converted table.

    Raises:
        ColumnsNotFoundError: If `target` or a requested feature is missing.
        DuplicateAttributesError: If `features` repeats a name or contains `target`.
        MissingLabelError: If the target column holds a null.
        MissingValueError: If a feature column holds a null.

    Examples:
        >>> df = pl.DataFrame({"Wind": [0, 1], "Rad": [1, 0]})
        >>> table = table_from_dataframe(df, "Rad")
        >>> table.rows
        (('0', '1'), ('1', '0'))
    """
    feature_columns = list(features) if features is not None else [col for col in df.columns if col != target]
    columns = [*feature_columns, target]
    _validate_columns(df, columns)

    string_df = df.select([pl.col(col).cast(pl.String) for col in columns])
    _validate_no_nulls(string_df, target)

    return LabeledTable.from_rows(columns, string_df.rows())


def table_to_dataframe(table: LabeledTable) -> pl.DataFrame:
    """Convert a `LabeledTable` into a DataFrame of string columns.

    Args:
        table (LabeledTable): The table to convert.

    Returns:
        pl.DataFrame: One `pl.String` column per attribute, label last.
    """
    return pl.DataFrame(
        list(table.rows),
        schema=dict.fromkeys(table.attributes, pl.String),
        orient="row",
    )


def _validate_columns(df: pl.DataFrame, columns: list[str]) -> None:
    """Raise if any column is missing from `df` or appears twice in `columns`.

    Args:
        df (pl.DataFrame): The source DataFrame.
        columns (list[str]): Feature columns followed by the target column.

    Raises:
        ColumnsNotFoundError: If any column is absent from `df.columns`.
        DuplicateAttributesError: If `columns` contains duplicates.
    """
    missing_columns = [col for col in columns if col not in df.columns]
    if missing_columns:
        raise ColumnsNotFoundError(missing_columns=missing_columns, available_columns=df.columns)
    if len(set(columns)) != len(columns):
        raise DuplicateAttributesError(columns)


def _validate_no_nulls(df: pl.DataFrame, target: str) -> None:
    """Raise for the first null value, scanning rows top to bottom.

    Args:
        df (pl.DataFrame): String-cast DataFrame with the target column last.
        target (str): Name of the label column.

    Raises:
        MissingLabelError: If the first null found is in the target column.
        MissingValueError: If the first null found is in a feature column.
    """
    if df.null_count().sum_horizontal().item() == 0:
        return
    for row_number, row in enumerate(df.iter_rows(named=True), start=1):
        for column, value in row.items():
            if value is None:
                if column == target:
                    raise MissingLabelError(row_number, column)
                raise MissingValueError(row_number, column)
