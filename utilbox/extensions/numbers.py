# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""Number utilities for safe division, currency scaling and order-of-magnitude estimates."""

import math

from utilbox.logging.logger_factory import get_logger

logger = get_logger(__name__)


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def divisor[N: (int, float)](value: N | None) -> N | int:
    """Return ``value`` for use as a denominator, or 1 when it is None or zero.

    The numeric type of a zero input is kept, so ``0.0`` yields ``1.0``.

    Example:
        >>> divisor(None), divisor(0), divisor(0.0), divisor(4)
        (1, 1, 1.0, 4)
    """
    if value is None:
        return 1
    if value == 0:
        return type(value)(1)
    return value


def cents(value: float | None) -> float:
    """Return the value multiplied by 100, treating None as 0."""
    return float((value or 0) * 100)


def magnitude(value: float) -> int:
    """Return the order of magnitude of a number.

    Zero, NaN and infinite values return 1. Values with an absolute value below 1
    return the rounded base-10 logarithm multiplied by the sign of the value. Other
    values return the rounded base-10 logarithm minus 1. Rounding is half away from zero.

    Args:
        value: Number to inspect.

    Returns:
        The order of magnitude.

    Example:
        >>> magnitude(123), magnitude(999), magnitude(0.05), magnitude(0)
        (1, 2, -1, 1)
    """
    if value == 0 or math.isnan(value) or math.isinf(value):
        logger.debug("Degenerate input for magnitude, returning 1", value=value)
        return 1
    exponent = _round_half_away_from_zero(math.log10(abs(value)))
    if abs(value) < 1:
        return exponent * int(math.copysign(1, value))
    return exponent - 1


def floor_to_factor(value: float, factor: float) -> float:
    """Floor a number to a multiple of ``factor`` using truncating division.

    Truncation is toward zero, so negative values move up: ``floor_to_factor(-7, 5)``
    is ``-5.0``.

    Args:
        value: Number to floor.
        factor: Factor to floor to.

    Returns:
        The floored value as a float.

    Raises:
        ZeroDivisionError: If ``factor`` is zero.

    Example:
        >>> floor_to_factor(123, 10), floor_to_factor(87, 25)
        (120.0, 75.0)
    """
    if isinstance(value, int) and isinstance(factor, int):
        quotient = abs(value) // abs(factor)
        if (value < 0) != (factor < 0):
            quotient = -quotient
    else:
        quotient = math.trunc(value / factor)
    return float(quotient * factor)


__all__ = [
    "cents",
    "divisor",
    "floor_to_factor",
    "magnitude",
]
