"""Date arithmetic, comparison and holiday helpers."""

from date_helpers.arithmetic import add_offset, current_year
from date_helpers.calendar.holidays import fetch_holidays, holiday_name, is_holiday
from date_helpers.compare import is_before, is_same_calendar_day, is_within_range
from date_helpers.config import Config, Settings, load_config
from date_helpers.constants import UnitKind
from date_helpers.errors import DateHelperError, InvalidArgument, InvalidRange
from date_helpers.helpers import DateHelpers

__all__ = [
    "Config",
    "DateHelperError",
    "DateHelpers",
    "InvalidArgument",
    "InvalidRange",
    "Settings",
    "UnitKind",
    "add_offset",
    "current_year",
    "fetch_holidays",
    "holiday_name",
    "is_before",
    "is_holiday",
    "is_same_calendar_day",
    "is_within_range",
    "load_config",
]
