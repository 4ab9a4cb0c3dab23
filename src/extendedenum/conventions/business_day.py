"""
Business day conventions.

A business day convention moves a date that falls on a holiday to a nearby
business day. The standard conventions are declared in
extendedenum.conventions.business_day_conventions.
"""

from __future__ import annotations

import abc as _abc
import datetime as _datetime
import pathlib as _pathlib

import extendedenum.conventions.holiday as holiday
import extendedenum.named as named
import extendedenum.registry as registry

DEFAULTS_DIR = _pathlib.Path(__file__).parent / "defaults"


class BusinessDayConvention(named.Named):
    """
    A convention defining how to adjust a date if it is not a business day.

    Subclasses must implement:
    - name (property): Unique convention name
    - adjust(): Move a date to a business day

    All implementations must be immutable and thread-safe.
    """

    @staticmethod
    def of(name: str) -> BusinessDayConvention:
        """
        Get a business day convention by unique or alternate name.

        Raises:
            TypeError: If name is not a string.
            NotFoundError: If the name is not known.
        """
        return ENUM_LOOKUP.lookup(named.check_name(name))

    @staticmethod
    def extended_enum() -> registry.ExtendedEnum[BusinessDayConvention]:
        """Get the extended enum of all business day conventions."""
        return ENUM_LOOKUP

    @_abc.abstractmethod
    def adjust(
        self,
        date: _datetime.date,
        calendar: holiday.HolidayCalendar,
    ) -> _datetime.date:
        """
        Adjust the date according to the convention.

        Args:
            date: The date to adjust.
            calendar: Calendar defining business days.

        Returns:
            The adjusted date.
        """
        ...

    def __repr__(self) -> str:
        return f"BusinessDayConvention[{self.name}]"


ENUM_LOOKUP: registry.ExtendedEnum[BusinessDayConvention] = registry.ExtendedEnum(
    BusinessDayConvention,
    bundled_dir=DEFAULTS_DIR,
)
