# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""Result types shared by the extension functions."""

from typing import NamedTuple


class MapEntry[K, V](NamedTuple):
    """A single key-value pair taken from a mapping.

    Example:
        >>> entry = MapEntry("a", 1)
        >>> entry.key, entry.value
        ('a', 1)
    """

    key: K
    value: V


class OddEven[T](NamedTuple):
    """Elements of a list split by index parity.

    Attributes:
        odd: Elements at odd indices (1, 3, 5, ...).
        even: Elements at even indices (0, 2, 4, ...).
    """

    odd: list[T]
    even: list[T]


__all__ = [
    "MapEntry",
    "OddEven",
]
