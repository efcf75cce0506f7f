"""Label formatting for time suggestions."""

from datetime import datetime

from timesuggest.calendar.engine import CalendarEngine


def concise_time(engine: CalendarEngine, dt: datetime) -> str:
    """Format the time of day, dropping minutes on the hour ('3 pm', '3:30 pm')."""
    return engine.format(dt, "{h}:{mm} {tt}" if dt.minute else "{h} {tt}")


def precise_label(engine: CalendarEngine, dt: datetime) -> str:
    """Format an unambiguous label, e.g. 'Fri, Oct 16 at 3 pm'."""
    return engine.format(dt, "{Dow}, {Mon} {d} at ") + concise_time(engine, dt)
