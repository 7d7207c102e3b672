"""Fixed yearly holidays.

Holiday lookups go through an asynchronous fetch that stands in for a
remote calendar service, so callers await them like any other I/O.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, tzinfo

from date_helpers.compare import is_same_calendar_day
from date_helpers.constants import DEFAULT_HOLIDAY_LATENCY_S
from date_helpers.timeutils import local_date_fields

logger = logging.getLogger(__name__)

# (month, day, name), in the order they are returned for a year.
HOLIDAYS: tuple[tuple[int, int, str], ...] = (
    (1, 1, "New Year's Day"),
    (12, 25, "Christmas"),
    (12, 31, "New Year's Eve"),
)


def holidays_for_year(year: int) -> list[datetime]:
    """Local midnight of every holiday in ``year``, in table order."""
    return [datetime(year, month, day) for month, day, _ in HOLIDAYS]


async def fetch_holidays(year: int, *, latency_s: float = DEFAULT_HOLIDAY_LATENCY_S) -> list[datetime]:
    """
    Fetch the holidays for a year.

    Args:
        year: Calendar year to look up.
        latency_s: Simulated lookup delay in seconds.

    Returns:
        New Year's Day, Christmas and New Year's Eve at local midnight.
    """
    logger.debug("Fetching holidays for %d", year)
    await asyncio.sleep(latency_s)
    return holidays_for_year(year)


async def is_holiday(
    instant: datetime,
    *,
    tz: tzinfo | None = None,
    latency_s: float = DEFAULT_HOLIDAY_LATENCY_S,
) -> bool:
    """
    Check if a datetime falls on a holiday, whatever its time of day.

    Args:
        instant: The datetime to check.
        tz: Zone that defines the local calendar for aware datetimes.
        latency_s: Simulated lookup delay in seconds.

    Returns:
        True if the calendar day is one of the year's holidays.
    """
    year, _, _ = local_date_fields(instant, tz)
    holidays = await fetch_holidays(year, latency_s=latency_s)
    return any(is_same_calendar_day(instant, holiday, tz) for holiday in holidays)


def holiday_name(instant: datetime, tz: tzinfo | None = None) -> str | None:
    """Name of the holiday on the calendar day of ``instant``, or None."""
    _, month, day = local_date_fields(instant, tz)
    for h_month, h_day, name in HOLIDAYS:
        if (h_month, h_day) == (month, day):
            return name
    return None
