"""
Sequence helpers: rating filter, flattening concatenation, max-price finder.

**Conceptual**: Each helper takes an explicit sequence and returns a new
value; inputs are never mutated. Records may be dataclasses from
`src.data.schemas` or plain mappings with the same keys.

**Teaching note**: `get_most_expensive_product` is written as an explicit
linear scan rather than `max(...)`. Both keep the first of several equal
maxima, but the scan makes the tie-break rule visible: the current best is
replaced only on a strictly greater price.
"""

from collections.abc import Iterable, Sequence
from typing import TypeVar

from src.data.schemas import Product, RatedItem, record_field

T = TypeVar("T")
R = TypeVar("R")
P = TypeVar("P")

# Minimum rating kept by filter_by_rating
RATING_THRESHOLD = 4


def filter_by_rating(items: Iterable[R], min_rating: float = RATING_THRESHOLD) -> list[R]:
    """
    Keep only the items rated at or above a threshold.

    **Functionally**:
    - Input: rated items (RatedItem or mappings with a 'rating' key).
    - Output: a new list, original relative order preserved.
    - The comparison is inclusive: rating == min_rating is kept.

    **Edge cases**:
    - Empty input returns an empty list.
    - The result is never longer than the input.

    Args:
        items: Rated items to filter.
        min_rating: Inclusive lower bound (default 4).

    Returns:
        List of the items whose rating is >= min_rating.

    Example:
        >>> filter_by_rating([RatedItem("A", 4.5), RatedItem("B", 3.2)])
        [RatedItem(title='A', rating=4.5)]
    """
    return [item for item in items if record_field(item, "rating") >= min_rating]


def concatenate_arrays(*arrays: Iterable[T]) -> list[T]:
    """
    Concatenate any number of sequences into one list.

    Elements of the first argument come first, then the second, and so on.
    Zero arguments return an empty list; sequences may have any lengths,
    including zero.

    Example:
        >>> concatenate_arrays([1, 2], [3], [], [4, 5])
        [1, 2, 3, 4, 5]
    """
    result: list[T] = []
    for array in arrays:
        result.extend(array)
    return result


def get_most_expensive_product(products: Sequence[P]) -> P | None:
    """
    Find the product with the greatest price.

    **Functionally**:
    - Scans left to right starting from the first product.
    - The current best is replaced only when a later price is strictly
      greater, so among equal maxima the earliest one wins.
    - An empty input is "no result", reported as None (not an exception).

    Args:
        products: Products (Product or mappings with a 'price' key).

    Returns:
        The earliest product holding the maximum price, or None if empty.

    Example:
        >>> get_most_expensive_product([Product("A", 5), Product("B", 9), Product("C", 9)])
        Product(name='B', price=9)
    """
    if len(products) == 0:
        return None

    most_expensive = products[0]
    for product in products[1:]:
        if record_field(product, "price") > record_field(most_expensive, "price"):
            most_expensive = product

    return most_expensive


__all__ = [
    "RATING_THRESHOLD",
    "RatedItem",
    "Product",
    "filter_by_rating",
    "concatenate_arrays",
    "get_most_expensive_product",
]
