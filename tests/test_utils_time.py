"""
Tests for src/utils/time.py

These tests verify weekday classification and that both sleepers honor the
Sleeper protocol.
"""

import asyncio
from datetime import date
import time

import pytest

from src.utils.time import (
    AsyncioSleeper,
    Day,
    InstantSleeper,
    get_asyncio_sleeper,
    get_day_type,
    get_instant_sleeper,
)


def test_day_ordinals_run_monday_to_sunday():
    """Monday is 0 and Sunday is 6, matching date.weekday()."""
    assert Day.MONDAY == 0
    assert Day.SUNDAY == 6
    assert list(Day) == sorted(Day)
    assert len(Day) == 7


@pytest.mark.parametrize(
    "day, expected",
    [
        (Day.MONDAY, "Weekday"),
        (Day.TUESDAY, "Weekday"),
        (Day.WEDNESDAY, "Weekday"),
        (Day.THURSDAY, "Weekday"),
        (Day.FRIDAY, "Weekday"),
        (Day.SATURDAY, "Weekend"),
        (Day.SUNDAY, "Weekend"),
    ],
)
def test_get_day_type_all_days(day, expected):
    """Saturday and Sunday are weekend days, the rest are weekdays."""
    assert get_day_type(day) == expected


def test_get_day_type_accepts_ordinals():
    """Plain ints are coerced through Day."""
    assert get_day_type(5) == "Weekend"
    assert get_day_type(2) == "Weekday"


def test_get_day_type_rejects_out_of_range_ordinal():
    """Ordinals outside 0..6 are not days."""
    with pytest.raises(ValueError):
        get_day_type(7)


def test_day_from_date():
    """Calendar dates map onto the enum (2024-06-01 was a Saturday)."""
    assert Day.from_date(date(2024, 6, 1)) is Day.SATURDAY
    assert Day.from_date(date(2024, 6, 3)) is Day.MONDAY
    assert get_day_type(Day.from_date(date(2024, 6, 2))) == "Weekend"


def test_instant_sleeper_records_without_waiting():
    """InstantSleeper returns immediately and remembers each requested delay."""
    sleeper = InstantSleeper()

    async def run():
        await sleeper.sleep(30.0)
        await sleeper.sleep(0.5)

    started = time.monotonic()
    asyncio.run(run())
    elapsed = time.monotonic() - started

    assert sleeper.requested == [30.0, 0.5]
    assert elapsed < 1.0


def test_asyncio_sleeper_waits():
    """AsyncioSleeper really suspends for roughly the requested time."""
    sleeper = AsyncioSleeper()

    started = time.monotonic()
    asyncio.run(sleeper.sleep(0.05))
    elapsed = time.monotonic() - started

    assert elapsed >= 0.04


def test_sleeper_factories():
    """Factories return working sleepers."""
    assert isinstance(get_asyncio_sleeper(), AsyncioSleeper)

    sleeper = get_instant_sleeper()
    assert isinstance(sleeper, InstantSleeper)
    assert sleeper.requested == []
