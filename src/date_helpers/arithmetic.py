"""Current-year lookup and offset arithmetic over datetimes."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

from dateutil.relativedelta import relativedelta

from date_helpers.constants import DEFAULT_UNIT, UnitKind
from date_helpers.errors import InvalidArgument
from date_helpers.timeutils import is_valid_amount, is_valid_instant


def current_year(tz: tzinfo | None = None) -> int:
    return datetime.now(tz).year


def _add_elapsed(value: datetime, delta: timedelta) -> datetime:
    # Aware values advance in absolute time so DST shifts do not leak in.
    if value.tzinfo is None or value.utcoffset() is None:
        return value + delta
    return (value.astimezone(timezone.utc) + delta).astimezone(value.tzinfo)


def add_offset(instant: datetime, amount: Any, unit: UnitKind | str = DEFAULT_UNIT) -> datetime:
    """
    Add ``amount`` units to ``instant`` and return a new datetime.

    Seconds and minutes are elapsed time and keep fractional amounts.
    Days and weeks move the calendar date with the wall clock unchanged.
    Months and years clamp to the end of a shorter month. For the calendar
    units the amount is truncated toward zero. Unknown units count as days.

    Raises:
        InvalidArgument: ``instant`` is not a usable datetime or ``amount``
            is not a finite number or moves the result out of range.
    """
    if not is_valid_instant(instant):
        raise InvalidArgument("Invalid date provided")
    if not is_valid_amount(amount):
        raise InvalidArgument("Invalid amount provided")

    kind = UnitKind.coerce(unit)
    try:
        return _shift(instant, amount, kind)
    except (OverflowError, ValueError) as exc:
        # Result lands outside the years datetime can represent.
        raise InvalidArgument("Invalid amount provided") from exc


def _shift(instant: datetime, amount: Any, kind: UnitKind) -> datetime:
    if kind is UnitKind.SECONDS:
        return _add_elapsed(instant, timedelta(seconds=float(amount)))
    if kind is UnitKind.MINUTES:
        return _add_elapsed(instant, timedelta(minutes=float(amount)))
    if kind is UnitKind.WEEKS:
        return instant + timedelta(weeks=int(amount))
    if kind is UnitKind.MONTHS:
        return instant + relativedelta(months=int(amount))
    if kind is UnitKind.YEARS:
        return instant + relativedelta(years=int(amount))
    return instant + timedelta(days=int(amount))
