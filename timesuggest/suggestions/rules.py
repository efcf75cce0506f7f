"""Suggestion rules.

Each rule inspects a ClassifiedInput and returns zero or more
suggestions. Rules are independent and may overlap ("t" is a prefix of
"tuesday", "today", "tomorrow" and "tonight"), so every rule runs and
the results are concatenated in RULES order.
"""

import re
from collections.abc import Callable
from datetime import datetime

import structlog

from timesuggest.calendar.engine import (
    INTERVAL_UNITS,
    MONTHS,
    WEEKDAYS,
    CalendarEngine,
    CalendarParseError,
)
from timesuggest.suggestions.formatter import concise_time
from timesuggest.suggestions.schemas import ClassifiedInput, TimeSuggestion

logger = structlog.get_logger()

Rule = Callable[[ClassifiedInput, CalendarEngine], list[TimeSuggestion]]

NEXT_RE = re.compile(r"\bnext\b")
NEXT_STRIP_RE = re.compile(r"\s*next\s*")

TODAY_WORDS = ("today", "tdy")
TOMORROW_WORDS = ("tomorrow", "tmrw")
TONIGHT_WORDS = ("tonight", "tnight")
TONIGHT_DEFAULT_TIME = "6 pm"


def guess_time(num: int | None) -> str:
    """Guess a clock time for a bare hour number.

    Hours below 8 are assumed to be afternoon, since people rarely mean
    early morning without saying so. Hours above 12 are 24-hour times.

    Examples:
        >>> guess_time(None)
        '8 am'
        >>> guess_time(15)
        '3 pm'
        >>> guess_time(5)
        '5 pm'
        >>> guess_time(10)
        '10 am'
    """
    if not num:
        return "8 am"
    if num > 12:
        return f"{num - 12} pm"
    if num < 8:
        return f"{num} pm"
    return f"{num} am"


def _resolve(engine: CalendarEngine, phrase: str) -> datetime | None:
    """Resolve a phrase, or None if the engine cannot parse it."""
    try:
        return engine.parse(phrase)
    except CalendarParseError as e:
        logger.debug("skipping unresolvable phrase", phrase=phrase, error=str(e))
        return None


def _matches(word: str, vocabulary: tuple[str, ...]) -> bool:
    return any(term.startswith(word) for term in vocabulary)


def _clock_suggestion(
    prefix: str, engine: CalendarEngine, date: datetime
) -> TimeSuggestion:
    """Build a suggestion labelled '<prefix> <time>', e.g. 'tonight at 6 pm'."""
    return TimeSuggestion(natural=f"{prefix} {concise_time(engine, date)}", date=date)


def bare_quantity(
    fields: ClassifiedInput, engine: CalendarEngine
) -> list[TimeSuggestion]:
    """A lone number is a duration: "5" -> for 5 hours, for 5 days."""
    num = fields.primary_digit
    if fields.word or not num or fields.explicit_time:
        return []

    results = []
    for unit in ("hour", "day"):
        date = _resolve(engine, f"in {num} {unit}s")
        if date is not None:
            plural = "s" if num != 1 else ""
            results.append(
                TimeSuggestion(natural=f"for {num} {unit}{plural}", date=date)
            )
    return results


def bare_time(
    fields: ClassifiedInput, engine: CalendarEngine
) -> list[TimeSuggestion]:
    """A lone time (or hour-like number) is the next occurrence of that time."""
    num = fields.primary_digit
    if fields.word or not (fields.explicit_time or (num and num < 24)):
        return []

    date = _resolve(engine, fields.explicit_time or guess_time(num))
    if date is None:
        return []
    if engine.is_past(date):
        date = engine.add_hours(date, 24)

    day = "today" if engine.is_today(date) else "tomorrow"
    return [_clock_suggestion(f"{day},", engine, date)]


def interval(
    fields: ClassifiedInput, engine: CalendarEngine
) -> list[TimeSuggestion]:
    """Format: # interval ("5 d" -> for 5 days)."""
    if not fields.word or not fields.ambiguous_digits:
        return []

    num = fields.ambiguous_digits[0]
    results = []
    for unit in INTERVAL_UNITS:
        if not unit.startswith(fields.word):
            continue
        date = _resolve(engine, f"in {num} {unit}")
        if date is None:
            continue
        label = unit.removesuffix("s") if num == 1 else unit
        results.append(TimeSuggestion(natural=f"for {num} {label}", date=date))
    return results


def weekday(
    fields: ClassifiedInput, engine: CalendarEngine
) -> list[TimeSuggestion]:
    """Format: (next) day of week ("next tue", "fri 3pm")."""
    has_next = bool(NEXT_RE.search(fields.word))
    without_next = NEXT_STRIP_RE.sub("", fields.word, count=1)
    if not without_next:
        return []

    time = fields.explicit_time or guess_time(fields.primary_digit)
    results = []
    for day in WEEKDAYS:
        if not day.startswith(without_next):
            continue
        date = _resolve(engine, f"{'next ' if has_next else ''}{day} {time}")
        if date is None:
            continue
        if engine.is_past(date) and engine.is_today(date):
            date = engine.add_days(date, 7)
        prefix = "next" if has_next else "on"
        label = engine.format(date, "{Weekday} at {h} {tt}")
        results.append(TimeSuggestion(natural=f"{prefix} {label}", date=date))
    return results


def month_day(
    fields: ClassifiedInput, engine: CalendarEngine
) -> list[TimeSuggestion]:
    """Format: month and day ("march 3rd", "mar 3 6")."""
    if not fields.word:
        return []

    time = fields.explicit_time or guess_time(fields.secondary_digit)
    day = fields.explicit_day_of_month or fields.primary_digit or 1
    results = []
    for month in MONTHS:
        if not month.startswith(fields.word):
            continue
        date = _resolve(engine, f"{month} {day} {time}")
        if date is None:
            continue
        natural = engine.format(date, "{Month} {do}")
        if fields.explicit_time or fields.secondary_digit:
            natural += f" at {concise_time(engine, date)}"
        results.append(TimeSuggestion(natural=natural, date=date))
    return results


def today(
    fields: ClassifiedInput, engine: CalendarEngine
) -> list[TimeSuggestion]:
    if not fields.word or not _matches(fields.word, TODAY_WORDS):
        return []

    time = fields.explicit_time or guess_time(fields.primary_digit)
    date = _resolve(engine, f"today {time}")
    if date is None:
        return []

    if engine.is_future(date):
        return [_clock_suggestion("today at", engine, date)]
    if engine.is_past(date) and date.hour < 12 and not fields.explicit_time:
        # a guessed morning hour that already passed most likely meant evening
        date = engine.add_hours(date, 12)
        return [_clock_suggestion("today at", engine, date)]
    return []


def tomorrow(
    fields: ClassifiedInput, engine: CalendarEngine
) -> list[TimeSuggestion]:
    # an empty word matches too
    if not _matches(fields.word, TOMORROW_WORDS):
        return []

    time = fields.explicit_time or guess_time(fields.primary_digit)
    date = _resolve(engine, f"tomorrow {time}")
    if date is None:
        return []
    return [_clock_suggestion("tomorrow at", engine, date)]


def tonight(
    fields: ClassifiedInput, engine: CalendarEngine
) -> list[TimeSuggestion]:
    if not fields.word or not _matches(fields.word, TONIGHT_WORDS):
        return []

    time = fields.explicit_time
    if not time:
        num = fields.primary_digit
        time = guess_time(num) if num else TONIGHT_DEFAULT_TIME

    date = _resolve(engine, f"today {time}")
    if date is None:
        return []
    return [_clock_suggestion("tonight at", engine, date)]


RULES: list[Rule] = [
    bare_quantity,
    bare_time,
    interval,
    weekday,
    month_day,
    today,
    tomorrow,
    tonight,
]
