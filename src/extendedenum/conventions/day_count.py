"""
Day count conventions.

A day count converts a pair of dates into a year fraction, used when
calculating accrued interest. The standard conventions are declared in
extendedenum.conventions.day_counts; more can be added through configuration.
"""

from __future__ import annotations

import abc as _abc
import datetime as _datetime
import pathlib as _pathlib

import extendedenum.named as named
import extendedenum.registry as registry

DEFAULTS_DIR = _pathlib.Path(__file__).parent / "defaults"


class ScheduleInfo:
    """
    Information about the schedule, needed by some day counts.

    Every accessor raises NotImplementedError unless overridden; the
    end-of-month convention is in use by default.
    """

    @property
    def start_date(self) -> _datetime.date:
        """First date of the schedule (adjusted if the schedule adjusts)."""
        raise NotImplementedError("The start date of the schedule is required")

    @property
    def end_date(self) -> _datetime.date:
        """Last date of the schedule (adjusted if the schedule adjusts)."""
        raise NotImplementedError("The end date of the schedule is required")

    def period_end_date(self, date: _datetime.date) -> _datetime.date:
        """End date of the schedule period containing the date."""
        raise NotImplementedError("The end date of the schedule period is required")

    @property
    def is_end_of_month_convention(self) -> bool:
        """Whether the end-of-month convention is in use."""
        return True


class _SimpleScheduleInfo(ScheduleInfo):
    """Schedule info with the end-of-month convention switched off."""

    @property
    def is_end_of_month_convention(self) -> bool:
        return False


SIMPLE_SCHEDULE_INFO: ScheduleInfo = _SimpleScheduleInfo()


class DayCount(named.Named):
    """
    A convention defining how to calculate fractions of a year.

    Subclasses must implement:
    - name (property): Unique convention name
    - calculate_year_fraction(): The convention's formula

    All implementations must be immutable and thread-safe.
    """

    @staticmethod
    def of(name: str) -> DayCount:
        """
        Get a day count by unique or alternate name.

        Args:
            name: Name such as 'Act/360' (or an alternate such as 'Actual/360').

        Raises:
            TypeError: If name is not a string.
            NotFoundError: If the name is not known.
        """
        return ENUM_LOOKUP.lookup(named.check_name(name))

    @staticmethod
    def extended_enum() -> registry.ExtendedEnum[DayCount]:
        """Get the extended enum of all day counts."""
        return ENUM_LOOKUP

    def year_fraction(
        self,
        first_date: _datetime.date,
        second_date: _datetime.date,
        schedule_info: ScheduleInfo | None = None,
    ) -> float:
        """
        Get the year fraction between two dates.

        Args:
            first_date: The first date.
            second_date: The second date, on or after the first date.
            schedule_info: Schedule information; defaults to a schedule with
                the end-of-month convention off and nothing else known.

        Returns:
            The year fraction, zero or greater.

        Raises:
            ValueError: If the second date is before the first.
            NotImplementedError: If the convention needs schedule
                information that was not supplied.
        """
        if second_date < first_date:
            raise ValueError(
                f"Dates must be in time-line order: {first_date} > {second_date}"
            )
        if schedule_info is None:
            schedule_info = SIMPLE_SCHEDULE_INFO
        return self.calculate_year_fraction(first_date, second_date, schedule_info)

    @_abc.abstractmethod
    def calculate_year_fraction(
        self,
        first_date: _datetime.date,
        second_date: _datetime.date,
        schedule_info: ScheduleInfo,
    ) -> float:
        """Apply the convention to dates already known to be in order."""
        ...

    def __repr__(self) -> str:
        return f"DayCount[{self.name}]"


ENUM_LOOKUP: registry.ExtendedEnum[DayCount] = registry.ExtendedEnum(
    DayCount,
    bundled_dir=DEFAULTS_DIR,
)
