"""
Record types and tabular schemas for rated items and products.

**Conceptual**: This module defines the "data contracts" the utility functions
operate on. Two small immutable records cover the whole library:
  - RatedItem: something with a title and a numeric rating.
  - Product: something with a name and a numeric price.

The same contracts exist in tabular form for callers holding pandas
DataFrames. Frame validation raises SchemaValidationError with actionable
messages, the same way the record helpers refuse malformed input.

**Teaching note**: Python callers hand records around in several shapes:
dataclasses, named tuples, plain dicts parsed from JSON. `record_field` reads a
field from any of them, so the sequence helpers stay duck-typed instead of
demanding one concrete class.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import pandas as pd


class SchemaValidationError(Exception):
    """
    Raised when a DataFrame does not conform to the expected schema.

    The message names the context (if given), the missing or malformed
    columns, and what was found instead.
    """
    pass


RATED_ITEM_REQUIRED_COLUMNS = ['title', 'rating']

PRODUCT_REQUIRED_COLUMNS = ['name', 'price']


@dataclass(frozen=True)
class RatedItem:
    """
    A titled record with a numeric rating.

    Attributes:
        title: Human-readable title.
        rating: Numeric score; filtering keeps ratings >= 4.
    """
    title: str
    rating: float


@dataclass(frozen=True)
class Product:
    """
    A named record with a numeric price. Products are compared by price only.

    Attributes:
        name: Product name.
        price: Unit price.
    """
    name: str
    price: float


def record_field(record: Any, name: str) -> Any:
    """
    Read a field from a record given as an object or a mapping.

    Args:
        record: Dataclass/object exposing `name` as an attribute, or a Mapping
                holding `name` as a key.
        name: Field to read.

    Returns:
        The field value.

    Raises:
        KeyError: If a mapping record lacks the key.
        AttributeError: If an object record lacks the attribute.
    """
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)


def _validate_frame(
    df: pd.DataFrame,
    required_columns: list[str],
    numeric_column: str,
    context: str | None,
) -> None:
    ctx = f"{context}: " if context else ""

    missing_cols = set(required_columns) - set(df.columns)
    if missing_cols:
        raise SchemaValidationError(
            f"{ctx}Missing required columns: {sorted(missing_cols)}. "
            f"Expected columns: {required_columns}. "
            f"Found columns: {list(df.columns)}."
        )

    # Empty frames carry object dtype after construction from [], accept them
    if len(df) > 0 and not pd.api.types.is_numeric_dtype(df[numeric_column]):
        raise SchemaValidationError(
            f"{ctx}'{numeric_column}' column must be numeric, "
            f"got dtype {df[numeric_column].dtype}."
        )


def validate_rated_items_frame(df: pd.DataFrame, context: str | None = None) -> None:
    """
    Validate that a DataFrame conforms to the rated item schema.

    **Functionally**:
      - Checks that `title` and `rating` columns are present.
      - Checks that `rating` is numeric (unless the frame is empty).

    Args:
        df: DataFrame to validate.
        context: Optional description of the source, included in messages.

    Raises:
        SchemaValidationError: On missing columns or a non-numeric rating column.
    """
    _validate_frame(df, RATED_ITEM_REQUIRED_COLUMNS, 'rating', context)


def validate_products_frame(df: pd.DataFrame, context: str | None = None) -> None:
    """
    Validate that a DataFrame conforms to the product schema.

    Same checks as `validate_rated_items_frame`, for `name` and a numeric
    `price`.

    Raises:
        SchemaValidationError: On missing columns or a non-numeric price column.
    """
    _validate_frame(df, PRODUCT_REQUIRED_COLUMNS, 'price', context)
