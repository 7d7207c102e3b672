from __future__ import annotations

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class UnitKind(str, Enum):
    """Granularity of an offset passed to ``add_offset``."""

    SECONDS = "seconds"
    MINUTES = "minutes"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @classmethod
    def coerce(cls, value: Any) -> "UnitKind":
        """Map a member or its string value to a UnitKind, falling back to DAYS."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        logger.debug("Unrecognized unit kind %r, using days", value)
        return cls.DAYS


DEFAULT_UNIT = UnitKind.DAYS

# Simulated round trip of the holiday lookup, in seconds.
DEFAULT_HOLIDAY_LATENCY_S = 0.1
