from __future__ import annotations

from datetime import datetime, tzinfo

from date_helpers.errors import InvalidRange
from date_helpers.timeutils import as_aware, local_date_fields


def _ordered(a: datetime, b: datetime) -> tuple[datetime, datetime]:
    # Naive and aware datetimes refuse to compare; lift both onto a timeline.
    if (a.tzinfo is None) != (b.tzinfo is None):
        return as_aware(a), as_aware(b)
    return a, b


def is_before(instant: datetime, compare: datetime) -> bool:
    a, b = _ordered(instant, compare)
    return a < b


def is_within_range(instant: datetime, start: datetime, end: datetime) -> bool:
    """
    Check whether ``instant`` falls strictly between ``start`` and ``end``.

    Both boundaries are excluded, so an instant equal to either one is
    outside the range.

    Raises:
        InvalidRange: ``start`` is after ``end``.
    """
    if is_before(end, start):
        raise InvalidRange("Invalid range: from date must be before to date")
    return is_before(start, instant) and is_before(instant, end)


def is_same_calendar_day(instant: datetime, compare: datetime, tz: tzinfo | None = None) -> bool:
    """True when both datetimes fall on the same local calendar date."""
    return local_date_fields(instant, tz) == local_date_fields(compare, tz)
