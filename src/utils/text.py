"""
String and scalar value helpers.

This module holds the two small "shape-shifting" helpers of the library:
case formatting with an explicit default, and a processor over a closed
two-variant union (text or number).

Both functions are pure: no I/O, no logging, no hidden state.
"""

import numbers


def format_string(value: str, to_upper: bool = True) -> str:
    """
    Convert a string to upper or lower case.

    **Conceptual**: Uppercase is the default. Only an explicit `False` flips
    the conversion to lowercase; any other flag value (None, 0, "") keeps the
    default. This mirrors an "optional flag" where only a deliberate opt-out
    changes behavior.

    **Edge cases**:
    - Empty string returns an empty string.
    - Non-cased characters (digits, punctuation) pass through unchanged.

    Args:
        value: The string to convert.
        to_upper: Pass exactly False for lowercase; uppercase otherwise.

    Returns:
        The converted string.

    Example:
        >>> format_string("Hello")
        'HELLO'
        >>> format_string("Hello", to_upper=False)
        'hello'
    """
    # Identity check: 0 and None are falsy but must not select lowercase
    if to_upper is False:
        return value.lower()
    return value.upper()


def process_value(value: str | int | float) -> int | float:
    """
    Process a value that is either text or a number.

    **Conceptual**: The input is a closed union of two variants. Text maps to
    its length; a number maps to its double. Every legal input falls into
    exactly one branch.

    **Functionally**:
    - str -> number of characters (len counts code points).
    - int/float (including numpy numeric scalars) -> value * 2.
    - bool is rejected even though it subclasses int: True is not a number
      in this domain.

    Args:
        value: A string or a real number.

    Returns:
        Character count for strings, doubled value for numbers.

    Raises:
        TypeError: If value is neither a string nor a real number.

    Example:
        >>> process_value("hello")
        5
        >>> process_value(10)
        20
    """
    match value:
        case bool():
            raise TypeError("process_value expects str or a number, got bool")
        case str():
            return len(value)
        case numbers.Real():
            return value * 2
        case _:
            raise TypeError(
                f"process_value expects str or a number, got {type(value).__name__}"
            )
