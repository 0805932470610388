from typing import Literal, TypeAlias, get_args

from typing_extensions import assert_never

from fractional_months.instant import Instant, to_milliseconds
from fractional_months.months import month_difference_utc
from fractional_months.util import DAY, HOUR, MILLISECOND, MINUTE, SECOND

Unit: TypeAlias = Literal[
    "milliseconds", "seconds", "minutes", "hours", "days", "months"
]

UNITS: tuple[Unit, ...] = get_args(Unit)

# Fixed-length units only; months are computed on the calendar
MILLISECONDS_PER_UNIT = {
    "milliseconds": MILLISECOND,
    "seconds": SECOND,
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
}


def difference_utc(from_: Instant, to: Instant, unit: Unit) -> float:
    """
    Return the signed difference from `from_` to `to`, in fractional `unit`s.

    Fixed-length units divide the elapsed milliseconds without rounding.
    "months" uses calendar months via `month_difference_utc`.

    Args:
        from_: Instant the difference is measured from
        to: Instant the difference is measured to
        unit: One of "milliseconds", "seconds", "minutes", "hours", "days",
            "months"

    Returns:
        Difference in the requested unit; negative when `to` is before `from_`

    Raises:
        ValueError: If unit isn't one of UNITS

    Example:
        >>> from datetime import date
        >>> difference_utc(date(2024, 1, 1), date(2024, 2, 1), "months")
        1.0
        >>> difference_utc(date(2024, 1, 1), date(2024, 2, 1), "days")
        31.0
    """
    if unit not in UNITS:
        valid = ", ".join(UNITS)
        raise ValueError(f"Invalid unit: {unit!r}\nValid units: {valid}\n")

    match unit:
        case "months":
            return month_difference_utc(from_, to)
        case "milliseconds" | "seconds" | "minutes" | "hours" | "days":
            delta = to_milliseconds(to, "to") - to_milliseconds(from_, "from_")
            return delta / MILLISECONDS_PER_UNIT[unit]
        case _:
            assert_never(unit)
