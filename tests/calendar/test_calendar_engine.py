"""Tests for the calendar engine."""

from datetime import datetime, timedelta
from unittest.mock import patch

import dateparser
import pytest

from timesuggest.calendar.engine import CalendarEngine, CalendarParseError, ordinal

# Use fixed reference time for deterministic tests
NOW = datetime(2026, 1, 14, 10, 0, 0)  # Wednesday, January 14, 2026


@pytest.fixture
def engine() -> CalendarEngine:
    return CalendarEngine(NOW)


class TestParseIntervals:
    """Tests for 'in N <unit>' phrases."""

    def test_in_days(self, engine: CalendarEngine):
        assert engine.parse("in 5 days") == datetime(2026, 1, 19, 10, 0)

    def test_in_hours(self, engine: CalendarEngine):
        assert engine.parse("in 5 hours") == datetime(2026, 1, 14, 15, 0)

    def test_in_minutes(self, engine: CalendarEngine):
        assert engine.parse("in 90 minutes") == datetime(2026, 1, 14, 11, 30)

    def test_in_weeks(self, engine: CalendarEngine):
        assert engine.parse("in 2 weeks") == datetime(2026, 1, 28, 10, 0)

    def test_in_months_uses_calendar_months(self, engine: CalendarEngine):
        assert engine.parse("in 1 months") == datetime(2026, 2, 14, 10, 0)

    def test_in_years(self, engine: CalendarEngine):
        assert engine.parse("in 1 year") == datetime(2027, 1, 14, 10, 0)

    def test_overflowing_interval_raises(self, engine: CalendarEngine):
        with pytest.raises(CalendarParseError):
            engine.parse("in 99999999999999999999 hours")


class TestParseClockTimes:
    """Tests for clock times and day anchors."""

    def test_bare_time_is_today(self, engine: CalendarEngine):
        assert engine.parse("3 pm") == datetime(2026, 1, 14, 15, 0)

    def test_passed_bare_time_is_tomorrow(self, engine: CalendarEngine):
        assert engine.parse("3:30 am") == datetime(2026, 1, 15, 3, 30)

    def test_midnight_and_noon(self, engine: CalendarEngine):
        assert engine.parse("12 am") == datetime(2026, 1, 15, 0, 0)
        assert engine.parse("12 pm") == datetime(2026, 1, 14, 12, 0)

    def test_24_hour_clock(self, engine: CalendarEngine):
        assert engine.parse("15:30 pm") == datetime(2026, 1, 14, 15, 30)
        assert engine.parse("tomorrow 13 pm") == datetime(2026, 1, 15, 13, 0)

    def test_today(self, engine: CalendarEngine):
        assert engine.parse("today 6 pm") == datetime(2026, 1, 14, 18, 0)

    def test_today_keeps_passed_time(self, engine: CalendarEngine):
        assert engine.parse("today 8 am") == datetime(2026, 1, 14, 8, 0)

    def test_tomorrow(self, engine: CalendarEngine):
        assert engine.parse("tomorrow 8 am") == datetime(2026, 1, 15, 8, 0)

    def test_invalid_minutes_raise(self, engine: CalendarEngine):
        with pytest.raises(CalendarParseError):
            engine.parse("12:345 pm")

    def test_invalid_hour_raises(self, engine: CalendarEngine):
        with pytest.raises(CalendarParseError):
            engine.parse("tomorrow 25 pm")

    def test_empty_phrase_raises(self, engine: CalendarEngine):
        with pytest.raises(CalendarParseError):
            engine.parse("   ")


class TestParseWeekdays:
    """Tests for '[next] <weekday>' phrases."""

    def test_nearest_occurrence(self, engine: CalendarEngine):
        assert engine.parse("tuesday 8 am") == datetime(2026, 1, 20, 8, 0)

    def test_today_counts_as_nearest(self, engine: CalendarEngine):
        # Resolves to today even though 8 am already passed
        assert engine.parse("wednesday 8 am") == datetime(2026, 1, 14, 8, 0)

    def test_next_adds_one_week(self, engine: CalendarEngine):
        assert engine.parse("next tuesday 8 am") == datetime(2026, 1, 27, 8, 0)

    def test_next_same_weekday(self, engine: CalendarEngine):
        assert engine.parse("next wednesday 3 pm") == datetime(2026, 1, 21, 15, 0)


class TestParseMonthDays:
    """Tests for '<month> <day>' phrases."""

    def test_upcoming_day(self, engine: CalendarEngine):
        assert engine.parse("march 3 8 am") == datetime(2026, 3, 3, 8, 0)

    def test_passed_day_rolls_to_next_year(self, engine: CalendarEngine):
        assert engine.parse("january 2 8 am") == datetime(2027, 1, 2, 8, 0)

    def test_later_today_stays_this_year(self, engine: CalendarEngine):
        assert engine.parse("january 14 6 pm") == datetime(2026, 1, 14, 18, 0)

    def test_passed_time_today_rolls_to_next_year(self, engine: CalendarEngine):
        assert engine.parse("january 14 8 am") == datetime(2027, 1, 14, 8, 0)

    def test_leap_day_moves_to_next_leap_year(self, engine: CalendarEngine):
        assert engine.parse("february 29 8 am") == datetime(2028, 2, 29, 8, 0)

    def test_invalid_day_raises(self, engine: CalendarEngine):
        with pytest.raises(CalendarParseError):
            engine.parse("february 30 8 am")


class TestDateparserResolution:
    """Every phrase is resolved by dateparser relative to the reference instant."""

    @pytest.mark.parametrize(
        "phrase",
        ["in 5 days", "3 pm", "today 6 pm", "tomorrow 8 am", "march 3 8 am"],
    )
    def test_phrase_goes_through_dateparser(
        self, engine: CalendarEngine, phrase: str
    ):
        with patch(
            "timesuggest.calendar.engine.dateparser.parse", wraps=dateparser.parse
        ) as mock_parse:
            engine.parse(phrase)

        mock_parse.assert_called_once()
        assert mock_parse.call_args.args[0] == phrase
        settings = mock_parse.call_args.kwargs["settings"]
        assert settings["RELATIVE_BASE"] == NOW
        assert settings["PREFER_DATES_FROM"] == "future"
        assert settings["RETURN_AS_TIMEZONE_AWARE"] is False

    def test_weekday_resolved_from_previous_day(self, engine: CalendarEngine):
        with patch(
            "timesuggest.calendar.engine.dateparser.parse", wraps=dateparser.parse
        ) as mock_parse:
            engine.parse("next tuesday 8 am")

        assert mock_parse.call_args.args[0] == "tuesday 8 am"
        settings = mock_parse.call_args.kwargs["settings"]
        assert settings["RELATIVE_BASE"] == NOW - timedelta(days=1)

    def test_explicit_date_january_25th(self, engine: CalendarEngine):
        result = engine.parse("January 25th")
        assert result.month == 1
        assert result.day == 25

    def test_unparseable_raises(self, engine: CalendarEngine):
        with pytest.raises(CalendarParseError):
            engine.parse("asdfghjkl not a date")

    def test_dateparser_error_is_wrapped(self, engine: CalendarEngine):
        with patch(
            "timesuggest.calendar.engine.dateparser.parse",
            side_effect=OverflowError("date value out of range"),
        ):
            with pytest.raises(CalendarParseError, match="out of range"):
                engine.parse("in 5 days")


class TestPredicatesAndArithmetic:
    """Tests for predicates and arithmetic."""

    def test_is_past(self, engine: CalendarEngine):
        assert engine.is_past(datetime(2026, 1, 14, 9, 59))
        assert not engine.is_past(NOW)

    def test_is_future(self, engine: CalendarEngine):
        assert engine.is_future(datetime(2026, 1, 14, 10, 1))
        assert not engine.is_future(NOW)

    def test_is_today(self, engine: CalendarEngine):
        assert engine.is_today(datetime(2026, 1, 14, 23, 59))
        assert not engine.is_today(datetime(2026, 1, 15, 0, 0))

    def test_add_hours_and_days(self, engine: CalendarEngine):
        assert engine.add_hours(NOW, 12) == datetime(2026, 1, 14, 22, 0)
        assert engine.add_days(NOW, 7) == datetime(2026, 1, 21, 10, 0)


class TestFormat:
    """Tests for component formatting."""

    def test_names(self, engine: CalendarEngine):
        dt = datetime(2026, 3, 3, 15, 5)
        assert engine.format(dt, "{Weekday}, {Month} {do}") == "Tuesday, March 3rd"
        assert engine.format(dt, "{Dow}, {Mon} {d}") == "Tue, Mar 3"

    def test_clock(self, engine: CalendarEngine):
        assert engine.format(datetime(2026, 3, 3, 15, 5), "{h}:{mm} {tt}") == "3:05 pm"
        assert engine.format(datetime(2026, 3, 3, 0, 0), "{h} {tt}") == "12 am"
        assert engine.format(datetime(2026, 3, 3, 12, 0), "{h} {tt}") == "12 pm"

    def test_unknown_tokens_left_alone(self, engine: CalendarEngine):
        assert engine.format(NOW, "{year} {d}") == "{year} 14"


class TestOrdinal:
    """Tests for ordinal day suffixes."""

    @pytest.mark.parametrize(
        ("day", "expected"),
        [
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (21, "21st"),
            (22, "22nd"),
            (23, "23rd"),
            (31, "31st"),
        ],
    )
    def test_suffix(self, day: int, expected: str):
        assert ordinal(day) == expected
