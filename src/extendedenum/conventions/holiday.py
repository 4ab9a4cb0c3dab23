"""
Holiday calendars.

A holiday calendar decides which dates are business days. Calendars are a
named family: they are looked up by name through HolidayCalendar.of().
"""

from __future__ import annotations

import abc as _abc
import datetime as _datetime
import pathlib as _pathlib

import extendedenum.named as named
import extendedenum.registry as registry

DEFAULTS_DIR = _pathlib.Path(__file__).parent / "defaults"

_ONE_DAY = _datetime.timedelta(days=1)


class HolidayCalendar(named.Named):
    """
    A calendar of non-business days.

    Subclasses must implement:
    - name (property): Unique calendar name
    - is_holiday(): Whether a date is not a business day

    All implementations must be immutable.
    """

    @staticmethod
    def of(name: str) -> HolidayCalendar:
        """
        Get a holiday calendar by unique or alternate name.

        Raises:
            TypeError: If name is not a string.
            NotFoundError: If the name is not known.
        """
        return ENUM_LOOKUP.lookup(named.check_name(name))

    @staticmethod
    def extended_enum() -> registry.ExtendedEnum[HolidayCalendar]:
        """Get the extended enum of all holiday calendars."""
        return ENUM_LOOKUP

    @_abc.abstractmethod
    def is_holiday(self, date: _datetime.date) -> bool:
        """Whether the date is a holiday (weekends included)."""
        ...

    def is_business_day(self, date: _datetime.date) -> bool:
        """Whether the date is a business day."""
        return not self.is_holiday(date)

    def next(self, date: _datetime.date) -> _datetime.date:
        """Get the first business day after the date."""
        return self.next_or_same(date + _ONE_DAY)

    def next_or_same(self, date: _datetime.date) -> _datetime.date:
        """Get the date if it is a business day, else the next business day."""
        while self.is_holiday(date):
            date += _ONE_DAY
        return date

    def previous(self, date: _datetime.date) -> _datetime.date:
        """Get the last business day before the date."""
        return self.previous_or_same(date - _ONE_DAY)

    def previous_or_same(self, date: _datetime.date) -> _datetime.date:
        """Get the date if it is a business day, else the previous business day."""
        while self.is_holiday(date):
            date -= _ONE_DAY
        return date

    def __repr__(self) -> str:
        return f"HolidayCalendar[{self.name}]"


class WeekendHolidayCalendar(HolidayCalendar):
    """Calendar whose only holidays are fixed weekend days."""

    def __init__(self, name: str, weekend_days: frozenset[int]) -> None:
        """
        Args:
            name: Unique calendar name.
            weekend_days: Weekday numbers (Monday is 0) that are holidays.
        """
        self._name = named.check_name(name)
        if len(weekend_days) >= 7:
            raise ValueError("a calendar must have at least one business day per week")
        self._weekend_days = frozenset(weekend_days)

    @property
    def name(self) -> str:
        return self._name

    @property
    def weekend_days(self) -> frozenset[int]:
        """Weekday numbers (Monday is 0) that are holidays."""
        return self._weekend_days

    def is_holiday(self, date: _datetime.date) -> bool:
        return date.weekday() in self._weekend_days


class HolidayCalendars:
    """Standard holiday calendars."""

    NO_HOLIDAYS = WeekendHolidayCalendar("NoHolidays", frozenset())
    """Every day is a business day."""

    SAT_SUN = WeekendHolidayCalendar("Sat/Sun", frozenset({5, 6}))
    """Saturday and Sunday are holidays."""

    FRI_SAT = WeekendHolidayCalendar("Fri/Sat", frozenset({4, 5}))
    """Friday and Saturday are holidays."""

    THU_FRI = WeekendHolidayCalendar("Thu/Fri", frozenset({3, 4}))
    """Thursday and Friday are holidays."""


ENUM_LOOKUP: registry.ExtendedEnum[HolidayCalendar] = registry.ExtendedEnum(
    HolidayCalendar,
    bundled_dir=DEFAULTS_DIR,
)
