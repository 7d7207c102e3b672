from __future__ import annotations

import math
from datetime import datetime, tzinfo
from numbers import Real
from typing import Any

import pandas as pd


def is_valid_instant(value: Any) -> bool:
    """True for a datetime (or pandas Timestamp) that is not NaT."""
    if not isinstance(value, datetime):
        return False
    return not pd.isna(value)


def is_valid_amount(value: Any) -> bool:
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def as_aware(value: datetime) -> datetime:
    """Attach the system local zone to a naive datetime; aware values pass through."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value.astimezone()
    return value


def local_date_fields(value: datetime, tz: tzinfo | None = None) -> tuple[int, int, int]:
    """Year, month and day of ``value`` on the local calendar.

    Naive datetimes already are local wall-clock time. Aware ones are
    converted to ``tz`` or, when it is None, to the system local zone.
    """
    if value.tzinfo is not None and value.utcoffset() is not None:
        value = value.astimezone(tz)
    return value.year, value.month, value.day
