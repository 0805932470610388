"""Fractional month differences between UTC instants.

Months vary in length, so a fraction of a month can't be computed by dividing
elapsed time by an average month. Instead, the instant being measured is
placed between the two month boundaries that bracket it, and its position is
interpolated linearly in real elapsed time. Boundaries fall on the from-date's
day and time of day in each month, so whole-month differences are always
exact integers.

Boundaries that land on days a month doesn't have (e.g. February 30) are
treated as "imaginary days" of zero length that sit after the last real
millisecond of the month and before the next month starts:

    >>> jan30 = parse_instant("2024-01-30T12:34:56Z")
    >>> 0.999999999 < month_difference_utc(jan30, parse_instant("2024-02-29T23:59:59.999Z")) < 1
    True
    >>> 1 < month_difference_utc(jan30, parse_instant("2024-03-01T00:00:00Z")) < 1.000000001
    True
"""

import math

from fractional_months.calendar_date import CalendarDate
from fractional_months.instant import Instant, to_milliseconds, to_position
from fractional_months.logging import get_logger
from fractional_months.util import DAY

logger = get_logger(__name__)

# Imaginary days sit half a millisecond before the following month starts,
# strictly between the month's last real instant and the next month's first.
_IMAGINARY_DAY_OFFSET = 0.5


def _boundary(origin: CalendarDate, months: int) -> float:
    """Position in milliseconds of the boundary `months` months from `origin`."""
    target_start = origin.month_start(months)
    following_start = origin.month_start(months + 1)

    # Day-of-month carry: a missing day rolls over into the following month
    boundary = target_start + (origin.day - 1) * DAY + origin.time_of_day
    if boundary >= following_start:
        return following_start - _IMAGINARY_DAY_OFFSET

    return float(boundary)


def month_boundary_utc(from_: Instant, months: int) -> float:
    """
    Return the instant `months` calendar months from `from_`, in milliseconds.

    The boundary keeps `from_`'s day of month and time of day. When that day
    doesn't exist in the target month, the boundary lies on an imaginary
    zero-length day at the end of the month, represented as half a
    millisecond before the following month begins. No whole-millisecond
    instant coincides with an imaginary boundary, but the position itself can
    be passed back to `month_difference_utc`.

    Args:
        from_: Reference instant (int milliseconds, aware datetime, or date)
        months: Number of calendar months to move, negative to go back

    Returns:
        Boundary position in milliseconds since the epoch (UTC)

    Example:
        >>> month_boundary_utc(parse_instant("2024-01-10T12:00:00Z"), 1)
        1707566400000.0
    """
    if isinstance(months, bool) or not isinstance(months, int):
        raise TypeError(
            f"months must be an int, got {type(months).__name__!r}: {months!r}"
        )

    origin = CalendarDate.from_instant(to_milliseconds(from_, "from_"))
    return _boundary(origin, months)


def month_difference_utc(from_: Instant, to: Instant) -> float:
    """
    Return the signed fractional number of months from `from_` to `to`.

    Differences of exact multiples of one month are exact integers. Other
    differences are fractional, and negative when `to` is earlier than
    `from_`. `to` may also be a fractional position, such as an imaginary
    boundary from `month_boundary_utc`. Callers choose how to round, e.g.
    `math.floor` buckets instants into month-long integer indexes.

    Args:
        from_: Instant the months are counted from
        to: Instant or finite millisecond position the months are counted to

    Returns:
        Fractional month difference

    Example:
        >>> jan10 = parse_instant("2024-01-10T12:00:00.000Z")
        >>> feb10 = parse_instant("2024-02-10T12:00:00.000Z")
        >>> month_difference_utc(jan10, feb10)
        1.0
        >>> month_difference_utc(feb10, jan10)
        -1.0
    """
    start = to_milliseconds(from_, "from_")
    end = to_position(to, "to")
    if start == end:
        return 0.0

    origin = CalendarDate.from_instant(start)

    # The boundary for the calendar-month delta always falls in `to`'s month,
    # so `to` is bracketed by it and one of its neighbours.
    estimate = origin.months_until(CalendarDate.from_instant(math.floor(end)))
    estimate_boundary = _boundary(origin, estimate)
    if end >= estimate_boundary:
        lower = estimate
        lower_boundary = estimate_boundary
        upper_boundary = _boundary(origin, estimate + 1)
    else:
        lower = estimate - 1
        lower_boundary = _boundary(origin, lower)
        upper_boundary = estimate_boundary

    span = upper_boundary - lower_boundary
    fraction = (end - lower_boundary) / span if span else 0.0

    logger.debug(
        "month difference %s -> %s: bracket [%d, %d], fraction %r",
        origin,
        end,
        lower,
        lower + 1,
        fraction,
    )
    return lower + fraction
