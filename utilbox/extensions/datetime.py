# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""Datetime utilities for period boundaries, calendar arithmetic and time-of-day comparison.

A naive datetime is treated as a local wall-clock reading. Aware datetimes keep
their own timezone. Calendar arithmetic rolls overflowing fields over into the
next unit, so adding one month to January 31st lands on March 3rd (or 2nd in
leap years) rather than raising.
"""

from datetime import UTC, date, datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

from utilbox.settings import Settings

# Reference date used to compare the time-of-day portion of two datetimes.
TIME_REFERENCE_DATE = date(1970, 1, 1)


def _normalized(year: int, month: int = 1, day: int = 1, *, base: datetime | None = None) -> datetime:
    """Build a datetime from possibly out-of-range fields, rolling them over.

    Month overflow carries into the year, day overflow into the month. Day 0 is the
    last day of the previous month. Time and tzinfo are taken from ``base``, or
    midnight without timezone when ``base`` is None.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    day_one = date(year, month, 1) + timedelta(days=day - 1)
    if base is None:
        return datetime(day_one.year, day_one.month, day_one.day)
    return base.replace(year=day_one.year, month=day_one.month, day=day_one.day)


def _midnight(year: int, month: int, day: int, dt: datetime) -> datetime:
    return _normalized(year, month, day, base=dt).replace(hour=0, minute=0, second=0, microsecond=0)


def local_timezone() -> tzinfo:
    """Return the timezone treated as local.

    Uses ``Settings.local_timezone`` when configured, otherwise the zone of the system clock.

    Returns:
        The local timezone.
    """
    if Settings.local_timezone is not None:
        return ZoneInfo(Settings.local_timezone)
    system_tz = datetime.now().astimezone().tzinfo
    if system_tz is None:
        return UTC
    return system_tz


def to_local(dt: datetime) -> datetime:
    """Convert a datetime to the local timezone.

    Args:
        dt: Datetime to convert. A naive value is already local and only gets the
            local tzinfo attached.

    Returns:
        Timezone-aware datetime in the local timezone.
    """
    if Settings.local_timezone is None:
        # astimezone() with no argument resolves the system offset valid at that instant
        return dt.astimezone()
    zone = local_timezone()
    if dt.tzinfo is None:
        return dt.replace(tzinfo=zone)
    return dt.astimezone(zone)


def start_of_day(dt: datetime) -> datetime:
    """Return the start of the day (00:00:00), keeping the timezone."""
    return _midnight(dt.year, dt.month, dt.day, dt)


def start_of_week(dt: datetime) -> datetime:
    """Return the Monday on or before ``dt`` at 00:00:00, keeping the timezone."""
    return _midnight(dt.year, dt.month, dt.day - (dt.isoweekday() - 1), dt)


def start_of_month(dt: datetime) -> datetime:
    """Return the first day of the month at 00:00:00, keeping the timezone."""
    return _midnight(dt.year, dt.month, 1, dt)


def start_of_year(dt: datetime) -> datetime:
    """Return January 1st of the year at 00:00:00, keeping the timezone."""
    return _midnight(dt.year, 1, 1, dt)


def days_in_month(dt: datetime) -> int:
    """Return the number of days in the month of ``dt``.

    Example:
        >>> days_in_month(datetime(2024, 2, 10))
        29
        >>> days_in_month(datetime(2023, 2, 10))
        28
    """
    return _normalized(dt.year, dt.month + 1, 0).day


def day_minute(dt: datetime) -> int:
    """Return the number of minutes since midnight, ignoring seconds."""
    return dt.hour * 60 + dt.minute


def add_days(dt: datetime, days: int) -> datetime:
    """Shift the day field by ``days``, rolling over into months and years.

    Args:
        dt: Datetime to shift.
        days: Number of days to add, may be negative.

    Returns:
        New datetime with the same wall-clock time and timezone.
    """
    return _normalized(dt.year, dt.month, dt.day + days, base=dt)


def add_months(dt: datetime, months: int) -> datetime:
    """Shift the month field by ``months``, rolling over into years.

    A day that does not exist in the target month overflows into the next month.

    Args:
        dt: Datetime to shift.
        months: Number of months to add, may be negative.

    Returns:
        New datetime with the same wall-clock time and timezone.

    Example:
        >>> add_months(datetime(2025, 9, 4, 14, 30), 2)
        datetime.datetime(2025, 11, 4, 14, 30)
        >>> add_months(datetime(2025, 1, 31), 1)
        datetime.datetime(2025, 3, 3, 0, 0)
    """
    return _normalized(dt.year, dt.month + months, dt.day, base=dt)


def add_years(dt: datetime, years: int) -> datetime:
    """Shift the year field by ``years``. February 29th in a non-leap target year becomes March 1st.

    Args:
        dt: Datetime to shift.
        years: Number of years to add, may be negative.

    Returns:
        New datetime with the same wall-clock time and timezone.
    """
    return _normalized(dt.year + years, dt.month, dt.day, base=dt)


def as_utc(dt: datetime) -> datetime:
    """Reinterpret the local wall-clock reading of ``dt`` as UTC.

    This is not a timezone conversion: the local UTC offset in effect at that instant is
    added back after converting to UTC, so the hour and minute stay the same while the
    result is tagged UTC.

    Args:
        dt: Datetime to reinterpret. Naive values are local readings.

    Returns:
        Datetime with tzinfo UTC and the local wall-clock time of ``dt``.

    Example:
        >>> # with Settings.local_timezone == "Europe/Amsterdam"
        >>> as_utc(datetime(2025, 7, 1, 14, 30))  # doctest: +SKIP
        datetime.datetime(2025, 7, 1, 14, 30, tzinfo=datetime.timezone.utc)
    """
    local = to_local(dt)
    offset = local.utcoffset() or timedelta(0)
    return local.astimezone(UTC) + offset


def _time_of_day(dt: datetime, *, localize: bool) -> datetime:
    moved = dt.replace(year=TIME_REFERENCE_DATE.year, month=TIME_REFERENCE_DATE.month, day=TIME_REFERENCE_DATE.day)
    if localize and moved.tzinfo is None:
        # Localize after moving so the offset is the one valid on the reference date
        return to_local(moved)
    return moved


def _time_pair(dt: datetime, other: datetime) -> tuple[datetime, datetime]:
    # Mixing naive and aware values: the naive side is a local reading
    localize = (dt.tzinfo is None) != (other.tzinfo is None)
    return _time_of_day(dt, localize=localize), _time_of_day(other, localize=localize)


def is_time_equal(dt: datetime, other: datetime) -> bool:
    """Check whether two datetimes have the same time of day, ignoring the date.

    Args:
        dt: First datetime.
        other: Datetime to compare with.

    Returns:
        True if both times denote the same instant on the reference date.
    """
    this_time, other_time = _time_pair(dt, other)
    return this_time == other_time


def is_time_before(dt: datetime, other: datetime) -> bool:
    """Check whether the time of day of ``dt`` is before that of ``other``, ignoring the date."""
    this_time, other_time = _time_pair(dt, other)
    return this_time < other_time


def is_time_after(dt: datetime, other: datetime) -> bool:
    """Check whether the time of day of ``dt`` is after that of ``other``, ignoring the date."""
    this_time, other_time = _time_pair(dt, other)
    return this_time > other_time


__all__ = [
    "TIME_REFERENCE_DATE",
    "add_days",
    "add_months",
    "add_years",
    "as_utc",
    "day_minute",
    "days_in_month",
    "is_time_after",
    "is_time_before",
    "is_time_equal",
    "local_timezone",
    "start_of_day",
    "start_of_month",
    "start_of_week",
    "start_of_year",
    "to_local",
]
