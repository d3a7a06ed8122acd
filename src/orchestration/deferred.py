"""
Delayed computations on the asyncio event loop.

**Conceptual**: `square_async` is a single unit of deferred work. It validates
its input immediately, then waits a fixed delay without blocking the event
loop, then produces `n * n`. Callers either `await` it directly or turn it
into a Task with `schedule_square` and register continuations with
`add_done_callback`.

**Contract**:
  - Negative input fails fast: InvalidArgumentError is raised before any
    suspension, and the sleeper is never called.
  - Non-negative input always resolves after the delay. There is no timeout
    and no abort path of its own; cancelling the surrounding task is ordinary
    asyncio behavior, not part of this API.
  - Concurrent calls share no state and complete in no guaranteed order.

**Teaching note**: The delay goes through an injected Sleeper
(`src.utils.time`). Production code uses the default AsyncioSleeper; tests
pass an InstantSleeper so the suite never spends real seconds waiting.
"""

import asyncio

from src.config.settings import get_settings
from src.utils.errors import InvalidArgumentError
from src.utils.log import get_logger
from src.utils.time import AsyncioSleeper, Sleeper

logger = get_logger(__name__)


async def square_async(
    n: float,
    delay_seconds: float | None = None,
    sleeper: Sleeper | None = None,
) -> float:
    """
    Square a number after a delay.

    Args:
        n: Number to square. Must be non-negative.
        delay_seconds: Delay before resolving. Defaults to the configured
                       `square_delay_seconds` (1.0 unless overridden).
        sleeper: Delay source. Defaults to AsyncioSleeper.

    Returns:
        n * n

    Raises:
        InvalidArgumentError: If n is negative (raised before any delay).

    Example:
        >>> asyncio.run(square_async(5))  # after one second
        25
    """
    if n < 0:
        logger.warning("Rejected negative input to square_async: %s", n)
        raise InvalidArgumentError(f"Negative number not allowed: {n}")

    if delay_seconds is None:
        delay_seconds = get_settings().square_delay_seconds
    if sleeper is None:
        sleeper = AsyncioSleeper()

    logger.debug("Squaring %s after %.3fs", n, delay_seconds)
    await sleeper.sleep(delay_seconds)

    result = n * n
    logger.debug("Squared %s -> %s", n, result)
    return result


def schedule_square(
    n: float,
    delay_seconds: float | None = None,
    sleeper: Sleeper | None = None,
) -> "asyncio.Task[float]":
    """
    Start `square_async` as a Task on the running event loop.

    The returned Task accepts continuations via `add_done_callback`. A
    negative n does not raise here; it surfaces as the Task's exception
    (`task.exception()`), or when the Task is awaited.

    Must be called from inside a running event loop.

    Returns:
        asyncio.Task resolving to n * n.

    Raises:
        RuntimeError: If no event loop is running.
    """
    return asyncio.get_running_loop().create_task(
        square_async(n, delay_seconds=delay_seconds, sleeper=sleeper)
    )
