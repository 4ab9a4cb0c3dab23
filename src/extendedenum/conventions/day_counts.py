"""
Standard day count conventions.

The constants of StandardDayCounts are registered with the DayCount extended
enum by the bundled DayCount.ini configuration.
"""

from __future__ import annotations

import calendar as _calendar
import datetime as _datetime
import typing as _typing

import extendedenum.conventions.day_count as day_count
import extendedenum.named as named

YearFractionFn = _typing.Callable[
    [_datetime.date, _datetime.date, day_count.ScheduleInfo],
    float,
]


def _days_in_year(year: int) -> int:
    return 366 if _calendar.isleap(year) else 365


def _is_last_day_of_february(date: _datetime.date) -> bool:
    return date.month == 2 and date.day == _calendar.monthrange(date.year, 2)[1]


def _leap_days_between(first: _datetime.date, second: _datetime.date) -> int:
    """Count the 29ths of February after first and on or before second."""
    count = 0
    for year in range(first.year, second.year + 1):
        if _calendar.isleap(year) and first < _datetime.date(year, 2, 29) <= second:
            count += 1
    return count


def _thirty_360(y1: int, m1: int, d1: int, y2: int, m2: int, d2: int) -> float:
    return (360 * (y2 - y1) + 30 * (m2 - m1) + (d2 - d1)) / 360.0


def _one_one(first, second, info) -> float:  # noqa: ARG001
    return 1.0


def _act_act_isda(first, second, info) -> float:  # noqa: ARG001
    if first.year == second.year:
        return (second - first).days / _days_in_year(first.year)
    first_part = (_datetime.date(first.year + 1, 1, 1) - first).days / _days_in_year(first.year)
    second_part = (second - _datetime.date(second.year, 1, 1)).days / _days_in_year(second.year)
    return first_part + second_part + (second.year - first.year - 1)


def _act_365_actual(first, second, info) -> float:  # noqa: ARG001
    denominator = 366 if _leap_days_between(first, second) else 365
    return (second - first).days / denominator


def _nl_365(first, second, info) -> float:  # noqa: ARG001
    return ((second - first).days - _leap_days_between(first, second)) / 365.0


def _actual_over(denominator: float) -> YearFractionFn:
    def year_fraction(first, second, info) -> float:  # noqa: ARG001
        return (second - first).days / denominator

    return year_fraction


def _thirty_360_isda(first, second, info) -> float:  # noqa: ARG001
    d1 = first.day
    d2 = second.day
    if d1 == 31:
        d1 = 30
    if d2 == 31 and d1 == 30:
        d2 = 30
    return _thirty_360(first.year, first.month, d1, second.year, second.month, d2)


def _thirty_e_360(first, second, info) -> float:  # noqa: ARG001
    d1 = min(first.day, 30)
    d2 = min(second.day, 30)
    return _thirty_360(first.year, first.month, d1, second.year, second.month, d2)


def _thirty_e_360_isda(first, second, info) -> float:
    d1 = first.day
    d2 = second.day
    if d1 == 31 or _is_last_day_of_february(first):
        d1 = 30
    if d2 == 31:
        d2 = 30
    elif _is_last_day_of_february(second) and second != info.end_date:
        # The termination date keeps its day of month
        d2 = 30
    return _thirty_360(first.year, first.month, d1, second.year, second.month, d2)


class StandardDayCount(day_count.DayCount):
    """A day count defined by a name and a year fraction function."""

    def __init__(self, name: str, fn: YearFractionFn) -> None:
        self._name = named.check_name(name)
        self._fn = fn

    @property
    def name(self) -> str:
        return self._name

    def calculate_year_fraction(
        self,
        first_date: _datetime.date,
        second_date: _datetime.date,
        schedule_info: day_count.ScheduleInfo,
    ) -> float:
        return self._fn(first_date, second_date, schedule_info)


class StandardDayCounts:
    """Standard day count conventions."""

    ONE_ONE = StandardDayCount("1/1", _one_one)
    """Always returns a year fraction of 1."""

    ACT_ACT_ISDA = StandardDayCount("Act/Act ISDA", _act_act_isda)
    """Actual days in each year over the length of that year."""

    ACT_360 = StandardDayCount("Act/360", _actual_over(360.0))
    """Actual days over 360."""

    ACT_364 = StandardDayCount("Act/364", _actual_over(364.0))
    """Actual days over 364."""

    ACT_365F = StandardDayCount("Act/365F", _actual_over(365.0))
    """Actual days over 365, ignoring leap years."""

    ACT_365_25 = StandardDayCount("Act/365.25", _actual_over(365.25))
    """Actual days over 365.25."""

    ACT_365_ACTUAL = StandardDayCount("Act/365 Actual", _act_365_actual)
    """Actual days over 366 if the period contains 29 February, else 365."""

    NL_365 = StandardDayCount("NL/365", _nl_365)
    """Actual days excluding 29 February, over 365."""

    THIRTY_360_ISDA = StandardDayCount("30/360 ISDA", _thirty_360_isda)
    """30/360 with the ISDA day of month rules."""

    THIRTY_E_360 = StandardDayCount("30E/360", _thirty_e_360)
    """30/360 with both days of month capped at 30 (Eurobond basis)."""

    THIRTY_E_360_ISDA = StandardDayCount("30E/360 ISDA", _thirty_e_360_isda)
    """30E/360 treating the end of February as day 30, except at maturity."""
