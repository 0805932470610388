"""Fractional time and month differences between UTC instants.

Similar to a rounded `difference()` helper, but every unit returns a
fractional value the caller can round as it likes. Months are measured
against boundaries on the from-date's day and time of day in each month, with
missing days treated as zero-length "imaginary days".
"""

from .calendar_date import CalendarDate
from .difference import MILLISECONDS_PER_UNIT, UNITS, Unit, difference_utc
from .instant import (
    Instant,
    from_milliseconds,
    parse_datetime,
    parse_instant,
    to_milliseconds,
)
from .months import month_boundary_utc, month_difference_utc
from .util import DAY, HOUR, MILLISECOND, MINUTE, SECOND

__all__ = [
    "difference_utc",
    "month_difference_utc",
    "month_boundary_utc",
    "Unit",
    "UNITS",
    "MILLISECONDS_PER_UNIT",
    "Instant",
    "CalendarDate",
    "to_milliseconds",
    "from_milliseconds",
    "parse_instant",
    "parse_datetime",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
]
