"""Calendar engine for resolving natural-language time phrases."""

from timesuggest.calendar.engine import (
    INTERVAL_UNITS,
    MONTHS,
    WEEKDAYS,
    CalendarEngine,
    CalendarParseError,
    ordinal,
)

__all__ = [
    "INTERVAL_UNITS",
    "MONTHS",
    "WEEKDAYS",
    "CalendarEngine",
    "CalendarParseError",
    "ordinal",
]
