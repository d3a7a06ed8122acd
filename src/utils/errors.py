"""
Error classes shared across the utility modules.

**Conceptual**: The library has exactly one domain error, raised when a caller
hands an operation an argument outside its documented domain. Everything else
is either total over its inputs or reports "no result" with `None`.
"""


class InvalidArgumentError(ValueError):
    """
    Raised when an operation receives an argument outside its legal domain.

    **Usage**: Currently raised by `src.orchestration.deferred.square_async`
    for negative inputs. It subclasses ValueError so callers that already
    catch ValueError keep working.
    """
    pass
