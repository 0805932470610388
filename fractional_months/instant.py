"""Conversions between instants and datetimes.

An instant is a signed count of milliseconds since 1970-01-01T00:00:00Z.
Public functions accept anything that names an instant unambiguously and
normalize it with `to_milliseconds`.
"""

import math
from datetime import date, datetime, time, timedelta, timezone
from typing import TypeAlias

from dateutil.parser import isoparse

from fractional_months.logging import get_logger

logger = get_logger(__name__)

Instant: TypeAlias = int | float | datetime | date

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def to_milliseconds(value: Instant, name: str = "instant") -> int:
    """Convert an instant to integer milliseconds since the Unix epoch (UTC).

    Accepts:
    - int: Passed through as-is (milliseconds)
    - float: Must be finite and integral
    - datetime: Must be timezone-aware; sub-millisecond precision is floored
    - date: Converted to midnight UTC of that day

    Raises:
        TypeError: If value is an unsupported type or a naive datetime
        ValueError: If value is a non-finite or fractional float
    """
    if isinstance(value, bool):
        raise TypeError(
            f"{name} must be int milliseconds, datetime, or date, got bool: {value!r}"
        )
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{name} must be a finite millisecond count, got {value!r}")
        if not value.is_integer():
            raise ValueError(
                f"{name} must be a whole number of milliseconds, got {value!r}\n"
                f"Hint: round before passing, e.g. round({value!r})"
            )
        return int(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"{name} must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return (value - EPOCH) // _ONE_MILLISECOND
    if isinstance(value, date):
        midnight = datetime.combine(value, time.min, tzinfo=timezone.utc)
        return (midnight - EPOCH) // _ONE_MILLISECOND
    raise TypeError(
        f"{name} must be int, float, datetime, or date.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  1704067200000  # int (Unix milliseconds)\n"
        f"  datetime(2024, 1, 1, tzinfo=timezone.utc)  # timezone-aware datetime\n"
        f"  date(2024, 1, 1)  # midnight UTC"
    )


def to_position(value: Instant, name: str = "instant") -> int | float:
    """Like `to_milliseconds`, but finite fractional floats pass through unchanged.

    Positions between whole milliseconds, such as imaginary month boundaries,
    are valid points to measure to.
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{name} must be a finite millisecond count, got {value!r}")
        return value
    return to_milliseconds(value, name)


def from_milliseconds(milliseconds: int) -> datetime:
    """Return the UTC datetime for an instant."""
    return EPOCH + timedelta(milliseconds=milliseconds)


def parse_datetime(text: str, offset: int = 0) -> datetime:
    """Parse an ISO-8601 string into an aware UTC datetime, shifted by `offset` ms.

    Strings without a UTC offset are read as UTC. Raises ValueError on
    malformed input rather than returning an unusable value.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected an ISO-8601 string, got {type(text).__name__!r}")

    try:
        parsed = isoparse(text)
    except (ValueError, OverflowError) as exc:
        logger.debug("Rejected ISO-8601 input %r: %s", text, exc)
        raise ValueError(
            f"Invalid date: {text!r}\n"
            f"Expected ISO-8601, e.g. '2024-01-10' or '2024-01-10T12:00:00.000Z'"
        ) from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc) + timedelta(milliseconds=offset)


def parse_instant(text: str, offset: int = 0) -> int:
    """Parse an ISO-8601 string into milliseconds since the epoch, plus `offset` ms."""
    return to_milliseconds(parse_datetime(text, offset))
