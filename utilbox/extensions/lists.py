# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""List utilities for conditional appends, parity partitioning and separator insertion."""

from utilbox.types import OddEven


def add_if[T](items: list[T], element: T, *, is_condition_met: bool) -> None:
    """Append ``element`` to ``items`` in place when ``is_condition_met`` is True.

    Args:
        items: List to append to.
        element: Element to append.
        is_condition_met: Whether the element should be appended.
    """
    if is_condition_met:
        items.append(element)


def odd_even[T](items: list[T]) -> OddEven[T]:
    """Split a list by index parity.

    Returns:
        ``OddEven`` holding the elements at odd indices in ``odd`` and those at even
        indices (starting with index 0) in ``even``, each in their original order.

    Example:
        >>> odd_even([1, 2, 3, 4, 5])
        OddEven(odd=[2, 4], even=[1, 3, 5])
    """
    return OddEven(odd=items[1::2], even=items[0::2])


def insert_between[T](items: list[T], element: T) -> list[T]:
    """Return a new list with ``element`` inserted between each pair of adjacent elements.

    Lists with fewer than two elements are returned as an unchanged copy.

    Example:
        >>> insert_between([10, 20, 30], 0)
        [10, 0, 20, 0, 30]
    """
    if len(items) < 2:
        return list(items)
    result: list[T] = [items[0]]
    for item in items[1:]:
        result.extend((element, item))
    return result


__all__ = [
    "add_if",
    "insert_between",
    "odd_even",
]
