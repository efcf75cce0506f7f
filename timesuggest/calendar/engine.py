"""Calendar engine for resolving natural-language time phrases.

Phrases the suggestion rules build ("in 5 days", "next monday 8 am",
"march 3 6 pm", "today 3:30 pm") are resolved by dateparser against a
fixed reference instant. The engine also provides the predicates,
arithmetic and component formatting the rules need.
"""

import re
from datetime import datetime, timedelta

import dateparser

WEEKDAYS = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]

MONTHS = [
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]

INTERVAL_UNITS = ["minutes", "hours", "days", "weeks", "months", "years"]

ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}

_CLOCK_RE = re.compile(
    r"(?:^|\s)(?P<hour>\d{1,4})(?::(?P<minute>\d+))?\s*(?P<period>am|pm)$"
)
_WEEKDAY_RE = re.compile(
    r"^(?P<next>next\s+)?(?P<weekday>" + "|".join(WEEKDAYS) + r")\b"
)
_FORMAT_TOKEN_RE = re.compile(r"\{(Weekday|Dow|Month|Mon|do|d|h|mm|tt)\}")


class CalendarParseError(Exception):
    """Raised when a phrase cannot be resolved to an instant."""

    pass


def ordinal(day: int) -> str:
    """Return the day number with its English ordinal suffix (1st, 22nd, 13th)."""
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    suffix = ORDINAL_SUFFIXES.get(day % 10, "th")
    return f"{day}{suffix}"


class CalendarEngine:
    """Resolves time phrases relative to a reference instant.

    The engine is request-scoped: every predicate (past, future, today)
    is evaluated against the ``now`` it was built with, so results are
    deterministic for a given reference instant.
    """

    def __init__(self, now: datetime):
        """Initialize engine.

        Args:
            now: Reference instant (naive local time) for relative phrases
                 and predicates.
        """
        self.now = now

    def parse(self, phrase: str) -> datetime:
        """Resolve a natural-language phrase to an absolute instant.

        Dates are preferred from the future, except that a weekday resolves
        to its nearest occurrence counting today; "next <weekday>" is one
        week after that.

        Args:
            phrase: Phrase such as "in 5 days", "next monday 8 am",
                    "march 3 6 pm" or "today 3:30 pm"

        Returns:
            The resolved instant

        Raises:
            CalendarParseError: If the phrase cannot be resolved
        """
        text = _normalize_clock(" ".join(phrase.lower().split()))

        match = _WEEKDAY_RE.match(text)
        if not match:
            return self._dateparse(text, self.now)

        # from yesterday, a weekday equal to today's resolves to today
        resolved = self._dateparse(
            text[match.start("weekday") :], self.now - timedelta(days=1)
        )
        if match.group("next"):
            resolved += timedelta(days=7)
        return resolved

    def _dateparse(self, text: str, base: datetime) -> datetime:
        """Resolve a phrase with dateparser relative to ``base``."""
        if not text:
            raise CalendarParseError("empty phrase")

        settings: dict = {
            "RELATIVE_BASE": base,
            "PREFER_DATES_FROM": "future",
            "RETURN_AS_TIMEZONE_AWARE": False,
        }

        try:
            parsed = dateparser.parse(text, settings=settings)
        except Exception as e:
            # dateparser can raise various exceptions on malformed input
            raise CalendarParseError(f"cannot resolve {text!r}: {e}") from e

        if parsed is None:
            raise CalendarParseError(f"cannot resolve {text!r}")
        return parsed

    def is_past(self, dt: datetime) -> bool:
        """Check if instant is before the reference instant."""
        return dt < self.now

    def is_future(self, dt: datetime) -> bool:
        """Check if instant is after the reference instant."""
        return dt > self.now

    def is_today(self, dt: datetime) -> bool:
        """Check if instant falls on the reference instant's calendar day."""
        return dt.date() == self.now.date()

    def add_hours(self, dt: datetime, hours: int) -> datetime:
        return dt + timedelta(hours=hours)

    def add_days(self, dt: datetime, days: int) -> datetime:
        return dt + timedelta(days=days)

    def format(self, dt: datetime, pattern: str) -> str:
        """Format an instant with a component pattern.

        Supported tokens:
        - {Weekday}: full weekday name ("Tuesday")
        - {Dow}: abbreviated weekday ("Tue")
        - {Month}: full month name ("March")
        - {Mon}: abbreviated month ("Mar")
        - {d}: day of month ("3")
        - {do}: ordinal day of month ("3rd")
        - {h}: 12-hour clock hour ("8")
        - {mm}: zero-padded minutes ("05")
        - {tt}: meridiem ("am" / "pm")

        Args:
            dt: Instant to format
            pattern: Pattern containing tokens

        Returns:
            Formatted string
        """
        weekday = WEEKDAYS[dt.weekday()].capitalize()
        month = MONTHS[dt.month - 1].capitalize()
        components = {
            "Weekday": weekday,
            "Dow": weekday[:3],
            "Month": month,
            "Mon": month[:3],
            "d": str(dt.day),
            "do": ordinal(dt.day),
            "h": str(dt.hour % 12 or 12),
            "mm": f"{dt.minute:02d}",
            "tt": "am" if dt.hour < 12 else "pm",
        }
        return _FORMAT_TOKEN_RE.sub(lambda m: components[m.group(1)], pattern)


def _normalize_clock(text: str) -> str:
    """Validate a trailing clock time and rewrite 24-hour ones.

    "15:30 pm" becomes "15:30"; hours above 23 or minutes above 59 raise
    CalendarParseError.
    """
    match = _CLOCK_RE.search(text)
    if not match:
        return text

    hour = int(match.group("hour"))
    minute = match.group("minute")
    if hour > 23 or (minute and int(minute) > 59):
        raise CalendarParseError(f"invalid clock time {match.group(0).strip()!r}")
    if hour <= 12:
        return text

    # 24-hour clock: the meridiem is redundant
    prefix = text[: match.start("hour")]
    return f"{prefix}{hour}:{minute or '00'}"
