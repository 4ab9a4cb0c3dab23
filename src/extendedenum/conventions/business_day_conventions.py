"""
Standard business day conventions.

The constants of StandardBusinessDayConventions are registered with the
BusinessDayConvention extended enum by the bundled BusinessDayConvention.ini.
"""

from __future__ import annotations

import datetime as _datetime

import extendedenum.conventions.business_day as business_day
import extendedenum.conventions.holiday as holiday


class _NoAdjust(business_day.BusinessDayConvention):
    @property
    def name(self) -> str:
        return "NoAdjust"

    def adjust(self, date: _datetime.date, calendar: holiday.HolidayCalendar) -> _datetime.date:  # noqa: ARG002
        return date


class _Following(business_day.BusinessDayConvention):
    @property
    def name(self) -> str:
        return "Following"

    def adjust(self, date: _datetime.date, calendar: holiday.HolidayCalendar) -> _datetime.date:
        return calendar.next_or_same(date)


class _ModifiedFollowing(business_day.BusinessDayConvention):
    @property
    def name(self) -> str:
        return "ModifiedFollowing"

    def adjust(self, date: _datetime.date, calendar: holiday.HolidayCalendar) -> _datetime.date:
        adjusted = calendar.next_or_same(date)
        if adjusted.month != date.month:
            adjusted = calendar.previous_or_same(date)
        return adjusted


class _Preceding(business_day.BusinessDayConvention):
    @property
    def name(self) -> str:
        return "Preceding"

    def adjust(self, date: _datetime.date, calendar: holiday.HolidayCalendar) -> _datetime.date:
        return calendar.previous_or_same(date)


class _ModifiedPreceding(business_day.BusinessDayConvention):
    @property
    def name(self) -> str:
        return "ModifiedPreceding"

    def adjust(self, date: _datetime.date, calendar: holiday.HolidayCalendar) -> _datetime.date:
        adjusted = calendar.previous_or_same(date)
        if adjusted.month != date.month:
            adjusted = calendar.next_or_same(date)
        return adjusted


class StandardBusinessDayConventions:
    """Standard business day conventions."""

    NO_ADJUST = _NoAdjust()
    """The date is not adjusted."""

    FOLLOWING = _Following()
    """Move to the next business day."""

    MODIFIED_FOLLOWING = _ModifiedFollowing()
    """Move to the next business day, unless that is in the next month."""

    PRECEDING = _Preceding()
    """Move to the previous business day."""

    MODIFIED_PRECEDING = _ModifiedPreceding()
    """Move to the previous business day, unless that is in the previous month."""
