"""Table access helpers.

Survey designs are built on top of a ``pandas.DataFrame``. These helpers are
the only place the design code touches the table, so column lookups and
writes are checked the same way everywhere.
"""

from typing import Sequence

import numpy as np
import pandas as pd

from survey_design.errors import (
    ColumnNotFoundError,
    DesignError,
    DimensionMismatchError,
)


def row_count(table: pd.DataFrame) -> int:
    """Return the number of observed rows in the table."""
    return int(table.shape[0])


def to_numeric_vector(values, label: str) -> np.ndarray:
    """Convert a sequence of numbers to a 1-D float array.

    Args:
        values: List, tuple, numpy array or pandas Series of numbers
        label: Name used in error messages (e.g. "weights")

    Returns:
        1-D numpy array of floats

    Raises:
        DesignError: If the values are not numeric or not one-dimensional
    """
    try:
        vector = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise DesignError(f"{label} must be numeric: {e}") from e

    if vector.ndim == 0:
        vector = vector.reshape(1)
    if vector.ndim != 1:
        raise DesignError(
            f"{label} must be a one-dimensional vector, got {vector.ndim} dimensions"
        )

    return vector


def get_column(table: pd.DataFrame, name: str) -> np.ndarray:
    """Read a numeric column from the table.

    Args:
        table: Survey data
        name: Column name

    Returns:
        Column values as a float array

    Raises:
        ColumnNotFoundError: If the column does not exist
        DimensionMismatchError: If the column length differs from the row count
    """
    if name not in table.columns:
        raise ColumnNotFoundError(
            f"Column '{name}' not found in data. Available columns: {list(table.columns)}"
        )

    vector = to_numeric_vector(table[name].to_numpy(), f"column '{name}'")
    check_length(table, vector, f"column '{name}'")
    return vector


def check_length(table: pd.DataFrame, values: Sequence, label: str) -> None:
    """Raise if ``values`` cannot be stored as a column of ``table``."""
    n = row_count(table)
    if len(values) != n:
        raise DimensionMismatchError(
            f"{label} has length {len(values)} but the data has {n} rows"
        )


def set_column(table: pd.DataFrame, name: str, values: Sequence) -> None:
    """Replace or create a column in place.

    Args:
        table: Survey data, modified in place
        name: Column name
        values: New column values, one per row

    Raises:
        DimensionMismatchError: If the number of values differs from the row count
    """
    check_length(table, values, f"column '{name}'")
    table[name] = np.asarray(values)
