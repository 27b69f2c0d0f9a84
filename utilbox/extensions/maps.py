# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""Mapping utilities for filtering, first-match lookups and key/value transformation.

Every predicate is called as ``test(key, value)``. Lookups follow the iteration order
of the mapping, and transformations return new dictionaries in that same order.
"""

from collections.abc import Callable, Mapping

from utilbox.exceptions import NoMatchingElementError
from utilbox.types import MapEntry

type EntryTest[K, V] = Callable[[K, V], bool]


def _negate[K, V](test: EntryTest[K, V]) -> EntryTest[K, V]:
    return lambda key, value: not test(key, value)


def where[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> dict[K, V]:
    """Return a new dict with the entries that satisfy ``test``.

    Example:
        >>> where({1: "Alice", 2: "Bob", 3: "Charlie"}, lambda key, _: key % 2 == 0)
        {2: 'Bob'}
    """
    return {key: value for key, value in mapping.items() if test(key, value)}


def where_not[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> dict[K, V]:
    """Return a new dict with the entries that do not satisfy ``test``."""
    return where(mapping, _negate(test))


def first_where_or_none[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> MapEntry[K, V] | None:
    """Return the first entry that satisfies ``test``, or None if there is none."""
    for key, value in mapping.items():
        if test(key, value):
            return MapEntry(key, value)
    return None


def first_where[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> MapEntry[K, V]:
    """Return the first entry that satisfies ``test``.

    Args:
        mapping: Mapping to search.
        test: Predicate called with each key and value.

    Returns:
        The first matching entry in iteration order.

    Raises:
        NoMatchingElementError: If no entry satisfies the condition.
    """
    entry = first_where_or_none(mapping, test)
    if entry is None:
        raise NoMatchingElementError
    return entry


def first_where_not[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> MapEntry[K, V]:
    """Return the first entry that does not satisfy ``test``.

    Raises:
        NoMatchingElementError: If all entries satisfy the condition.
    """
    return first_where(mapping, _negate(test))


def first_where_not_or_none[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> MapEntry[K, V] | None:
    """Return the first entry that does not satisfy ``test``, or None if there is none."""
    return first_where_or_none(mapping, _negate(test))


def first_key_where[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> K:
    """Return the key of the first entry that satisfies ``test``.

    Raises:
        NoMatchingElementError: If no entry satisfies the condition.
    """
    return first_where(mapping, test).key


def first_key_where_not[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> K:
    """Return the key of the first entry that does not satisfy ``test``.

    Raises:
        NoMatchingElementError: If all entries satisfy the condition.
    """
    return first_where_not(mapping, test).key


def first_key_where_or_none[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> K | None:
    entry = first_where_or_none(mapping, test)
    return entry.key if entry is not None else None


def first_key_where_not_or_none[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> K | None:
    entry = first_where_not_or_none(mapping, test)
    return entry.key if entry is not None else None


def first_value_where[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> V:
    """Return the value of the first entry that satisfies ``test``.

    Raises:
        NoMatchingElementError: If no entry satisfies the condition.
    """
    return first_where(mapping, test).value


def first_value_where_not[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> V:
    """Return the value of the first entry that does not satisfy ``test``.

    Raises:
        NoMatchingElementError: If all entries satisfy the condition.
    """
    return first_where_not(mapping, test).value


def first_value_where_or_none[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> V | None:
    entry = first_where_or_none(mapping, test)
    return entry.value if entry is not None else None


def first_value_where_not_or_none[K, V](mapping: Mapping[K, V], test: EntryTest[K, V]) -> V | None:
    entry = first_where_not_or_none(mapping, test)
    return entry.value if entry is not None else None


def map_values[K, V, NV](mapping: Mapping[K, V], transform: Callable[[V], NV]) -> dict[K, NV]:
    """Return a new dict with the same keys and each value replaced by ``transform(value)``."""
    return {key: transform(value) for key, value in mapping.items()}


def map_keys[K, V, NK](mapping: Mapping[K, V], transform: Callable[[K], NK]) -> dict[NK, V]:
    """Return a new dict with the same values and each key replaced by ``transform(key)``.

    When ``transform`` maps distinct keys to the same new key, the entry that comes
    later in iteration order wins.

    Example:
        >>> map_keys({"a": 1, "A": 2}, str.lower)
        {'a': 2}
    """
    return {transform(key): value for key, value in mapping.items()}


def map_to_list[K, V, L](mapping: Mapping[K, V], transform: Callable[[K, V], L]) -> list[L]:
    """Return a list of ``transform(key, value)`` for every entry, in iteration order."""
    return [transform(key, value) for key, value in mapping.items()]


__all__ = [
    "EntryTest",
    "first_key_where",
    "first_key_where_not",
    "first_key_where_not_or_none",
    "first_key_where_or_none",
    "first_value_where",
    "first_value_where_not",
    "first_value_where_not_or_none",
    "first_value_where_or_none",
    "first_where",
    "first_where_not",
    "first_where_not_or_none",
    "first_where_or_none",
    "map_keys",
    "map_to_list",
    "map_values",
    "where",
    "where_not",
]
