"""
Tests for src/data/schemas.py
"""

import pandas as pd
import pytest

from src.data.schemas import (
    Product,
    RatedItem,
    SchemaValidationError,
    record_field,
    validate_products_frame,
    validate_rated_items_frame,
)


def test_record_field_reads_objects_and_mappings():
    """Attributes and mapping keys are both supported."""
    assert record_field(RatedItem("A", 4), "rating") == 4
    assert record_field({"name": "B", "price": 2}, "price") == 2


def test_record_field_missing_field_raises():
    """Missing fields propagate the natural lookup error."""
    with pytest.raises(KeyError):
        record_field({"name": "B"}, "price")
    with pytest.raises(AttributeError):
        record_field(Product("A", 1), "rating")


def test_validate_rated_items_frame_accepts_valid_frame():
    """A frame with title and numeric rating passes."""
    df = pd.DataFrame({"title": ["A", "B"], "rating": [4.5, 3.0]})
    validate_rated_items_frame(df)


def test_validate_rated_items_frame_missing_column():
    """A missing column is reported with the context prefix."""
    df = pd.DataFrame({"title": ["A"]})

    with pytest.raises(SchemaValidationError, match=r"reviews\.csv: Missing required columns"):
        validate_rated_items_frame(df, context="reviews.csv")


def test_validate_products_frame_non_numeric_price():
    """Prices stored as text are rejected."""
    df = pd.DataFrame({"name": ["A"], "price": ["cheap"]})

    with pytest.raises(SchemaValidationError, match="'price' column must be numeric"):
        validate_products_frame(df)


def test_validate_products_frame_accepts_empty_frame():
    """An empty frame with the right columns is valid."""
    validate_products_frame(pd.DataFrame(columns=["name", "price"]))
