# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""String utilities for capitalization, numeric formatting cleanup and lenient date parsing."""

import re
from datetime import datetime

from utilbox.exceptions import EmptyStringError
from utilbox.extensions.datetime import to_local
from utilbox.logging.logger_factory import get_logger

logger = get_logger(__name__)

_DECIMAL_POINT_ZEROS = re.compile(r"\.0+\Z")
_FRACTION_TRAILING_ZEROS = re.compile(r"(\..*?)0+\Z")


def _try_parse_datetime(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        logger.debug("Could not parse datetime string", value=value)
        return None


def capitalize(value: str) -> str:
    """Return ``value`` with its first character upper-cased and the rest unchanged.

    Unlike ``str.capitalize`` the remainder is not lower-cased.

    Raises:
        EmptyStringError: If ``value`` is empty.

    Example:
        >>> capitalize("hello wORLD")
        'Hello wORLD'
    """
    if not value:
        raise EmptyStringError("Cannot capitalize an empty string")
    return value.upper()[0] + value[1:]


def clear_trailing_zeros(value: str) -> str:
    """Remove trailing zeros after the decimal point, and the point itself if nothing remains.

    Example:
        >>> clear_trailing_zeros("12.3400"), clear_trailing_zeros("15.000"), clear_trailing_zeros("100")
        ('12.34', '15', '100')
    """
    if _DECIMAL_POINT_ZEROS.search(value):
        return _DECIMAL_POINT_ZEROS.sub("", value)
    return _FRACTION_TRAILING_ZEROS.sub(r"\1", value)


def to_local_date(value: str) -> datetime | None:
    """Parse an ISO 8601 string and convert it to local time.

    Args:
        value: String to parse. Strings without an offset are already local.

    Returns:
        Naive datetime holding the local wall-clock reading, or None if the string cannot
        be parsed.
    """
    parsed = _try_parse_datetime(value)
    if parsed is None:
        return None
    return to_local(parsed).replace(tzinfo=None)


def to_date_ignore_timezone(value: str) -> datetime | None:
    """Parse an ISO 8601 string after dropping everything from the first ``+`` onwards.

    Only a ``+hh:mm`` offset is removed. A trailing ``Z`` or a negative offset is kept
    and parsed as such.

    Returns:
        The parsed datetime, or None if the remaining string cannot be parsed.

    Example:
        >>> to_date_ignore_timezone("2023-08-30T12:34:56+02:00")
        datetime.datetime(2023, 8, 30, 12, 34, 56)
    """
    return _try_parse_datetime(value.split("+", 1)[0])


__all__ = [
    "capitalize",
    "clear_trailing_zeros",
    "to_date_ignore_timezone",
    "to_local_date",
]
