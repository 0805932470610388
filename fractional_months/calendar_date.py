from dataclasses import dataclass

from fractional_months.util import DAY

# Days before each month (0-indexed) for non-leap years
_DAYS_BEFORE_MONTH = [0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334]
_DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

# Day counts of the proleptic Gregorian cycles
_DAYS_IN_400_YEARS = 146097
_DAYS_IN_100_YEARS = 36524
_DAYS_IN_4_YEARS = 1461

# Days from 0001-01-01 to 1970-01-01
_EPOCH_ORDINAL = 719162


def is_leap_year(year: int) -> bool:
    if year % 4 != 0:
        return False
    return year % 100 != 0 or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _days_before_year(year: int) -> int:
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _days_before_month(year: int, month: int) -> int:
    return _DAYS_BEFORE_MONTH[month - 1] + (month > 2 and is_leap_year(year))


def epoch_days(year: int, month: int, day: int) -> int:
    """Days from 1970-01-01 to the given date; `day` may run past the month's end."""
    return (
        _days_before_year(year)
        + _days_before_month(year, month)
        + day
        - 1
        - _EPOCH_ORDINAL
    )


def civil_date(days: int) -> tuple[int, int, int]:
    """Return (year, month, day) for a count of days from 1970-01-01."""
    # Floor division keeps the cycle remainders non-negative before year 1
    n400, n = divmod(days + _EPOCH_ORDINAL, _DAYS_IN_400_YEARS)
    year = n400 * 400 + 1
    n100, n = divmod(n, _DAYS_IN_100_YEARS)
    n4, n = divmod(n, _DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)
    year += n100 * 100 + n4 * 4 + n1

    # Last day of a leap year that closes a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return year - 1, 12, 31

    month = (n + 50) >> 5
    preceding = _days_before_month(year, month)
    if preceding > n:
        month -= 1
        preceding = _days_before_month(year, month)
    return year, month, n - preceding + 1


@dataclass(frozen=True, kw_only=True)
class CalendarDate:
    """UTC calendar position of an instant.

    `month` is 1-12 and `time_of_day` is milliseconds since midnight. Years
    follow the proleptic Gregorian calendar with no upper or lower limit.
    """

    year: int
    month: int
    day: int
    time_of_day: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"CalendarDate month must be 1-12, got {self.month}")
        if not 1 <= self.day <= 31:
            raise ValueError(f"CalendarDate day must be 1-31, got {self.day}")
        if not 0 <= self.time_of_day < DAY:
            raise ValueError(
                f"CalendarDate time_of_day must be in [0, {DAY}) milliseconds, "
                f"got {self.time_of_day}"
            )

    def __str__(self) -> str:
        """Human-friendly ISO-like rendering."""
        seconds, millis = divmod(self.time_of_day, 1000)
        minutes, seconds = divmod(seconds, 60)
        hours, minutes = divmod(minutes, 60)
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}Z"
        )

    @classmethod
    def from_instant(cls, instant: int) -> "CalendarDate":
        days, time_of_day = divmod(instant, DAY)
        year, month, day = civil_date(days)
        return cls(year=year, month=month, day=day, time_of_day=time_of_day)

    @property
    def month_number(self) -> int:
        """Months elapsed since January of year 0."""
        return self.year * 12 + self.month - 1

    def months_until(self, other: "CalendarDate") -> int:
        """Calendar-month delta, ignoring day and time of day."""
        return other.month_number - self.month_number

    def shift_months(self, months: int) -> tuple[int, int]:
        """Return (year, month) `months` calendar months from this date's month."""
        year, month_index = divmod(self.month_number + months, 12)
        return year, month_index + 1

    def month_start(self, months: int = 0) -> int:
        """Return the first instant (ms) of the month `months` months from this one."""
        year, month = self.shift_months(months)
        return epoch_days(year, month, 1) * DAY
