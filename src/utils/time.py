"""
Weekday classification and delay abstractions.

This module provides two small time-related building blocks:
  - Day: an ordinal weekday enum (Monday=0 .. Sunday=6) and `get_day_type`,
    which classifies a day as "Weekday" or "Weekend".
  - Sleeper: a tiny protocol for "wait this long" so deferred computations can
    be driven by real asyncio time in production and by an instant sleeper in
    tests.

The key insight: depending on a Sleeper abstraction instead of calling
asyncio.sleep() directly makes delayed code testable and deterministic. Tests
can verify that the delay was requested (and for how long) without spending
real wall-clock time.
"""

import asyncio
from datetime import date
from enum import IntEnum
from typing import Protocol


class Day(IntEnum):
    """
    Weekday enumeration, ordinal-ordered like `date.weekday()`.

    Values run from MONDAY=0 to SUNDAY=6, so `Day(some_date.weekday())` maps a
    calendar date onto the enum.
    """
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_date(cls, value: date) -> "Day":
        """Return the Day a calendar date falls on."""
        return cls(value.weekday())


WEEKEND_DAYS = frozenset({Day.SATURDAY, Day.SUNDAY})


def get_day_type(day: Day | int) -> str:
    """
    Classify a day as "Weekend" (Saturday, Sunday) or "Weekday".

    Total over the seven enum values. A plain ordinal int is coerced through
    `Day(...)`, so 5 and 6 are weekend days too; an ordinal outside 0..6
    raises ValueError from the enum.

    Args:
        day: A Day member or its ordinal.

    Returns:
        "Weekend" or "Weekday".

    Example:
        >>> get_day_type(Day.SATURDAY)
        'Weekend'
        >>> get_day_type(Day.WEDNESDAY)
        'Weekday'
    """
    return "Weekend" if Day(day) in WEEKEND_DAYS else "Weekday"


class Sleeper(Protocol):
    """
    Abstract delay source protocol.

    **Conceptual**: A Sleeper is any object that can suspend the current
    coroutine for a number of seconds. Consumers accept a Sleeper (injected via
    function parameter) and await `sleeper.sleep(seconds)` whenever they need
    to wait. In production, pass an AsyncioSleeper; in tests, pass an
    InstantSleeper.

    **Example**:
        async def delayed(value, sleeper: Sleeper):
            await sleeper.sleep(1.0)
            return value

        asyncio.run(delayed(3, AsyncioSleeper()))   # waits one second
        asyncio.run(delayed(3, InstantSleeper()))   # returns immediately
    """

    async def sleep(self, seconds: float) -> None:
        """
        Suspend the calling coroutine for `seconds`.

        Args:
            seconds: Non-negative delay in seconds.
        """
        ...


class AsyncioSleeper:
    """
    Sleeper backed by the running asyncio event loop.

    The wait is non-blocking: other tasks on the loop keep running while the
    calling coroutine is suspended.
    """

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


class InstantSleeper:
    """
    Sleeper that records requested delays and returns without waiting.

    **Usage**:
        sleeper = InstantSleeper()
        asyncio.run(square_async(5, sleeper=sleeper))
        assert sleeper.requested == [1.0]

    It still yields control to the event loop once per call, so coroutines
    driven by it interleave the same way they would with real delays.
    """

    def __init__(self):
        self.requested: list[float] = []

    async def sleep(self, seconds: float) -> None:
        self.requested.append(seconds)
        await asyncio.sleep(0)


def get_asyncio_sleeper() -> Sleeper:
    """Factory for the production sleeper."""
    return AsyncioSleeper()


def get_instant_sleeper() -> InstantSleeper:
    """
    Factory for a recording, non-waiting sleeper.

    Particularly useful in test setup, where the test wants to assert on the
    requested delays afterwards.
    """
    return InstantSleeper()
