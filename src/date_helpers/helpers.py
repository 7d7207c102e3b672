from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from date_helpers.arithmetic import add_offset, current_year
from date_helpers.calendar.holidays import fetch_holidays, holiday_name, is_holiday
from date_helpers.compare import is_before, is_same_calendar_day, is_within_range
from date_helpers.config import Settings, load_config
from date_helpers.constants import UnitKind


class DateHelpers:
    """The date helper functions bound to one set of configured defaults."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()

    @staticmethod
    def from_yaml(path: Path) -> "DateHelpers":
        return DateHelpers(Settings.from_config(load_config(path)))

    def current_year(self) -> int:
        return current_year(self.settings.tz)

    def add_offset(self, instant: datetime, amount: Any, unit: UnitKind | str | None = None) -> datetime:
        return add_offset(instant, amount, self.settings.default_unit if unit is None else unit)

    def is_within_range(self, instant: datetime, start: datetime, end: datetime) -> bool:
        return is_within_range(instant, start, end)

    def is_before(self, instant: datetime, compare: datetime) -> bool:
        return is_before(instant, compare)

    def is_same_calendar_day(self, instant: datetime, compare: datetime) -> bool:
        return is_same_calendar_day(instant, compare, self.settings.tz)

    async def fetch_holidays(self, year: int) -> list[datetime]:
        return await fetch_holidays(year, latency_s=self.settings.holiday_latency_s)

    async def is_holiday(self, instant: datetime) -> bool:
        return await is_holiday(instant, tz=self.settings.tz, latency_s=self.settings.holiday_latency_s)

    def holiday_name(self, instant: datetime) -> str | None:
        return holiday_name(instant, self.settings.tz)
