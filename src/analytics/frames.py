"""
DataFrame counterparts of the rating filter and max-price finder.

**Conceptual**: `src.utils.sequences` works on lists of records. When the same
records already live in a pandas DataFrame, converting back to records just to
filter them is wasteful. This module provides vectorized equivalents with the
same ordering and tie-break rules:
  - `filter_frame_by_rating` keeps rows with rating >= threshold, in order.
  - `most_expensive_product_row` returns the earliest row holding the maximum
    price, or None for an empty frame.

Missing values are the one difference. Frames treat NaN as "no value": NaN
ratings never match and NaN prices are skipped. The list-based
`get_most_expensive_product` has no such rule; its strict `>` comparison is
always False against NaN, so a NaN-priced first record is never replaced.

Every function validates its input frame against the schemas in
`src.data.schemas` before touching it.
"""

from collections.abc import Iterable
from dataclasses import asdict, is_dataclass
from typing import Any

import numpy as np
import pandas as pd

from src.data.schemas import (
    PRODUCT_REQUIRED_COLUMNS,
    RATED_ITEM_REQUIRED_COLUMNS,
    Product,
    record_field,
    validate_products_frame,
    validate_rated_items_frame,
)
from src.utils.sequences import RATING_THRESHOLD


def _records_to_frame(records: Iterable[Any], columns: list[str]) -> pd.DataFrame:
    rows = []
    for record in records:
        if is_dataclass(record):
            row = asdict(record)
        else:
            row = {column: record_field(record, column) for column in columns}
        rows.append({column: row[column] for column in columns})
    return pd.DataFrame(rows, columns=columns)


def rated_items_to_frame(items: Iterable[Any]) -> pd.DataFrame:
    """
    Build a DataFrame with `title` and `rating` columns from rated items.

    Accepts RatedItem instances or mappings with the same keys. Row order
    follows input order; the index is a fresh RangeIndex.
    """
    return _records_to_frame(items, RATED_ITEM_REQUIRED_COLUMNS)


def products_to_frame(products: Iterable[Any]) -> pd.DataFrame:
    """Build a DataFrame with `name` and `price` columns from products."""
    return _records_to_frame(products, PRODUCT_REQUIRED_COLUMNS)


def filter_frame_by_rating(
    df: pd.DataFrame,
    min_rating: float = RATING_THRESHOLD,
) -> pd.DataFrame:
    """
    Keep only rows whose rating is at or above a threshold.

    **Functionally**:
    - Input: DataFrame with at least `title` and `rating` columns.
    - Output: a new DataFrame (copy) with the matching rows. Row order and
      index labels are preserved, so results can be joined back to `df`.
    - Extra columns pass through untouched.
    - NaN ratings never match.

    Args:
        df: Rated items frame.
        min_rating: Inclusive lower bound (default 4).

    Returns:
        Filtered copy of df.

    Raises:
        SchemaValidationError: If df does not match the rated item schema.
    """
    validate_rated_items_frame(df, context="filter_frame_by_rating")
    mask = df['rating'] >= min_rating
    return df.loc[mask].copy()


def most_expensive_product_row(df: pd.DataFrame) -> Product | None:
    """
    Return the earliest row holding the maximum price, as a Product.

    **Functionally**:
    - Uses positional argmax over the price column. numpy's argmax returns
      the first occurrence of the maximum, which gives the same tie-break as
      the linear scan in `get_most_expensive_product`.
    - NaN prices are skipped (np.nanargmax), unlike the list scan, which
      keeps a NaN-priced first element.
    - An empty frame (or one whose prices are all NaN) returns None.

    Args:
        df: Products frame with `name` and `price` columns.

    Returns:
        Product for the winning row, or None.

    Raises:
        SchemaValidationError: If df does not match the product schema.
    """
    validate_products_frame(df, context="most_expensive_product_row")

    prices = df['price'].to_numpy(dtype=float)
    if prices.size == 0 or np.all(np.isnan(prices)):
        return None

    position = int(np.nanargmax(prices))
    row = df.iloc[position]
    return Product(name=row['name'], price=row['price'])
