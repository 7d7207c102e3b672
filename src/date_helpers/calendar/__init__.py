"""Holiday calendar utilities."""

from date_helpers.calendar.holidays import (
    HOLIDAYS,
    fetch_holidays,
    holiday_name,
    holidays_for_year,
    is_holiday,
)

__all__ = [
    "HOLIDAYS",
    "fetch_holidays",
    "holiday_name",
    "holidays_for_year",
    "is_holiday",
]
