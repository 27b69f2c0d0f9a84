# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""Tests for number extensions."""

import math

import pytest

from utilbox.extensions.numbers import cents, divisor, floor_to_factor, magnitude


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param(None, 1, id="none"),
        pytest.param(0, 1, id="int_zero"),
        pytest.param(0.0, 1.0, id="float_zero"),
        pytest.param(5, 5, id="int"),
        pytest.param(-2.5, -2.5, id="negative_float"),
    ],
)
def test_divisor(value: float | None, expected: float):
    # Arrange / Act
    result = divisor(value)

    # Assert
    assert result == expected
    assert result != 0
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param(None, 0.0, id="none"),
        pytest.param(1.25, 125.0, id="float"),
        pytest.param(-0.5, -50.0, id="negative"),
        pytest.param(3, 300.0, id="int"),
    ],
)
def test_cents(value: float | None, expected: float):
    # Arrange / Act
    result = cents(value)

    # Assert
    assert result == pytest.approx(expected)
    assert isinstance(result, float)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param(123, 1, id="hundreds"),
        pytest.param(999, 2, id="rounds_up"),
        pytest.param(1, -1, id="one"),
        pytest.param(10, 0, id="ten"),
        pytest.param(-123, 1, id="negative_large"),
        pytest.param(0.05, -1, id="small"),
        pytest.param(-0.05, 1, id="negative_small_flips_sign"),
        pytest.param(0.001, -3, id="thousandth"),
        pytest.param(0, 1, id="zero"),
        pytest.param(math.nan, 1, id="nan"),
        pytest.param(math.inf, 1, id="inf"),
        pytest.param(-math.inf, 1, id="negative_inf"),
    ],
)
def test_magnitude(value: float, expected: int):
    # Arrange / Act
    result = magnitude(value)

    # Assert
    assert result == expected


@pytest.mark.parametrize(
    ("value", "factor", "expected"),
    [
        pytest.param(123, 10, 120.0, id="tens"),
        pytest.param(87, 25, 75.0, id="quarters"),
        pytest.param(100, 25, 100.0, id="already_multiple"),
        pytest.param(-7, 5, -5.0, id="negative_truncates_toward_zero"),
        pytest.param(7, -5, 5.0, id="negative_factor"),
        pytest.param(12.7, 0.5, 12.5, id="float_factor"),
        pytest.param(-12.7, 5, -10.0, id="negative_float"),
    ],
)
def test_floor_to_factor(value: float, factor: float, expected: float):
    # Arrange / Act
    result = floor_to_factor(value, factor)

    # Assert
    assert result == pytest.approx(expected)
    assert isinstance(result, float)


def test_floor_to_factor_zero_factor():
    # Arrange / Act / Assert
    with pytest.raises(ZeroDivisionError):
        floor_to_factor(10, 0)
