"""Tests for holiday calendars and their bundled YAML configuration."""

import datetime as _datetime

import pytest as _pytest

import extendedenum.conventions.holiday as holiday
import extendedenum.errors as errors

D = _datetime.date
CALENDARS = holiday.HolidayCalendars


class TestHolidayCalendarLookup:
    """Tests for HolidayCalendar.of."""

    def test_of(self) -> None:
        assert holiday.HolidayCalendar.of("Sat/Sun") is CALENDARS.SAT_SUN
        assert holiday.HolidayCalendar.of("Weekends") is CALENDARS.SAT_SUN
        assert holiday.HolidayCalendar.of("None") is CALENDARS.NO_HOLIDAYS

    def test_of_unknown(self) -> None:
        with _pytest.raises(errors.NotFoundError):
            holiday.HolidayCalendar.of("GBLO")

    def test_values(self) -> None:
        assert holiday.HolidayCalendar.extended_enum().values() == frozenset(
            {CALENDARS.NO_HOLIDAYS, CALENDARS.SAT_SUN, CALENDARS.FRI_SAT, CALENDARS.THU_FRI}
        )


class TestWeekendHolidayCalendar:
    """Tests for weekend-only calendars."""

    def test_is_holiday(self) -> None:
        # 2014-05-30 Friday, 31 Saturday, 2014-06-01 Sunday
        assert not CALENDARS.SAT_SUN.is_holiday(D(2014, 5, 30))
        assert CALENDARS.SAT_SUN.is_holiday(D(2014, 5, 31))
        assert CALENDARS.FRI_SAT.is_holiday(D(2014, 5, 30))
        assert not CALENDARS.FRI_SAT.is_business_day(D(2014, 5, 31))
        assert CALENDARS.FRI_SAT.is_business_day(D(2014, 6, 1))

    def test_no_holidays(self) -> None:
        assert CALENDARS.NO_HOLIDAYS.next(D(2014, 5, 30)) == D(2014, 5, 31)

    def test_next_and_previous(self) -> None:
        cal = CALENDARS.SAT_SUN
        assert cal.next(D(2014, 5, 30)) == D(2014, 6, 2)
        assert cal.next_or_same(D(2014, 5, 30)) == D(2014, 5, 30)
        assert cal.previous(D(2014, 6, 2)) == D(2014, 5, 30)
        assert cal.previous_or_same(D(2014, 6, 1)) == D(2014, 5, 30)

    def test_requires_a_business_day(self) -> None:
        with _pytest.raises(ValueError):
            holiday.WeekendHolidayCalendar("Never", frozenset(range(7)))
