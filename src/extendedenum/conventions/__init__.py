"""
Financial conventions catalogued as extended enums.

Each convention interface is its own named family with bundled default
configuration in the defaults/ directory.
"""

from extendedenum.conventions.business_day import BusinessDayConvention
from extendedenum.conventions.business_day_conventions import StandardBusinessDayConventions
from extendedenum.conventions.day_count import DayCount, ScheduleInfo
from extendedenum.conventions.day_counts import StandardDayCounts
from extendedenum.conventions.holiday import HolidayCalendar, HolidayCalendars

__all__ = [
    "BusinessDayConvention",
    "DayCount",
    "HolidayCalendar",
    "HolidayCalendars",
    "ScheduleInfo",
    "StandardBusinessDayConventions",
    "StandardDayCounts",
]
