# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""Iterable utilities for indexed mapping, filtering and lazy element processing.

Functions returning an ``Iterator`` are generators: elements are produced on demand,
callbacks run in iteration order exactly once per consumed element, and a consumer
that stops early leaves the remaining elements unevaluated. The ``*_to_list``
variants materialize their result eagerly.
"""

from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Protocol


class FirstLastMapper[T, R](Protocol):
    def __call__(self, *, element: T, is_first: bool, is_last: bool) -> R: ...


class IndexedFirstLastMapper[T, R](Protocol):
    def __call__(self, *, index: int, element: T, is_first: bool, is_last: bool) -> R: ...


def _as_sequence[T](items: Iterable[T]) -> Sequence[T]:
    if isinstance(items, Sequence):
        return items
    return list(items)


def map_to_list[T, R](items: Iterable[T], mapping_fn: Callable[[T], R]) -> list[R]:
    """Map each element and collect the results in a list.

    Example:
        >>> map_to_list([10, 20, 30, 40], lambda x: x * 2)
        [20, 40, 60, 80]
    """
    return [mapping_fn(element) for element in items]


def map_indexed[T, R](items: Iterable[T], mapping_fn: Callable[[int, T], R]) -> Iterator[R]:
    """Lazily map each element together with its zero-based index.

    Args:
        items: Elements to map.
        mapping_fn: Called as ``mapping_fn(index, element)``.

    Yields:
        The mapped values in iteration order.
    """
    for index, element in enumerate(items):
        yield mapping_fn(index, element)


def map_indexed_to_list[T, R](items: Iterable[T], mapping_fn: Callable[[int, T], R]) -> list[R]:
    """Map each element together with its zero-based index and collect the results in a list.

    Example:
        >>> map_indexed_to_list(["a", "b"], lambda i, x: f"{i}:{x}")
        ['0:a', '1:b']
    """
    return list(map_indexed(items, mapping_fn))


def map_with_first_last[T, R](items: Iterable[T], mapping_fn: FirstLastMapper[T, R]) -> Iterator[R]:
    """Lazily map each element, telling the mapping function whether it is the first or last one.

    The length of ``items`` must be known, so an iterable that is not a sequence is
    materialized when iteration starts. Infinite iterables are not supported.

    Args:
        items: Elements to map.
        mapping_fn: Called with the keyword arguments ``element``, ``is_first`` and ``is_last``.
            Both flags are True for a single-element sequence.

    Yields:
        The mapped values in iteration order.

    Example:
        >>> list(map_with_first_last([1, 2, 3], lambda element, is_first, is_last: (element, is_first, is_last)))
        [(1, True, False), (2, False, False), (3, False, True)]
    """
    sequence = _as_sequence(items)
    last_index = len(sequence) - 1
    for index, element in enumerate(sequence):
        yield mapping_fn(element=element, is_first=index == 0, is_last=index == last_index)


def map_indexed_with_first_last[T, R](items: Iterable[T], mapping_fn: IndexedFirstLastMapper[T, R]) -> Iterator[R]:
    """Lazily map each element with its index and first/last flags.

    Args:
        items: Elements to map. Materialized when iteration starts if not a sequence.
        mapping_fn: Called with the keyword arguments ``index``, ``element``, ``is_first``
            and ``is_last``.

    Yields:
        The mapped values in iteration order.
    """
    sequence = _as_sequence(items)
    last_index = len(sequence) - 1
    for index, element in enumerate(sequence):
        yield mapping_fn(index=index, element=element, is_first=index == 0, is_last=index == last_index)


def where_to_list[T](items: Iterable[T], test: Callable[[T], bool]) -> list[T]:
    """Return a list of the elements that satisfy ``test``."""
    return [element for element in items if test(element)]


def where_indexed[T](items: Iterable[T], test: Callable[[int, T], bool]) -> Iterator[T]:
    """Lazily yield the elements for which ``test(index, element)`` is True."""
    for index, element in enumerate(items):
        if test(index, element):
            yield element


def where_to_list_indexed[T](items: Iterable[T], test: Callable[[int, T], bool]) -> list[T]:
    """Return a list of the elements for which ``test(index, element)`` is True.

    Example:
        >>> where_to_list_indexed(["a", "b", "c", "d"], lambda i, _: i % 2 == 0)
        ['a', 'c']
    """
    return list(where_indexed(items, test))


def where_not[T](items: Iterable[T], test: Callable[[T], bool]) -> Iterator[T]:
    """Lazily yield the elements that do not satisfy ``test``."""
    for element in items:
        if not test(element):
            yield element


def where_not_to_list[T](items: Iterable[T], test: Callable[[T], bool]) -> list[T]:
    """Return a list of the elements that do not satisfy ``test``."""
    return list(where_not(items, test))


def peek[T](items: Iterable[T], action: Callable[[T], object]) -> Iterator[T]:
    """Lazily yield every element after passing it to ``action``.

    ``action`` runs when the element is consumed, not up front, so a consumer that
    stops early only triggers it for the elements it pulled.

    Args:
        items: Elements to pass through.
        action: Side effect to run for each element.

    Yields:
        The original elements, unchanged.
    """
    for element in items:
        action(element)
        yield element


def last_or_none[T](items: Iterable[T]) -> T | None:
    """Return the last element, or None if ``items`` is empty.

    Example:
        >>> last_or_none([10, 20, 40])
        40
        >>> last_or_none([]) is None
        True
    """
    if isinstance(items, Sequence):
        return items[-1] if items else None
    tail = deque(items, maxlen=1)
    return tail[0] if tail else None


def replace_where[T](items: Iterable[T], test: Callable[[T], bool], replace_with: Callable[[T], T]) -> Iterator[T]:
    """Lazily substitute the elements that satisfy ``test`` by ``replace_with(element)``.

    Args:
        items: Elements to process.
        test: Selects the elements to replace.
        replace_with: Produces the replacement for a selected element.

    Yields:
        The replaced or original elements, in their original order.
    """
    for element in items:
        if test(element):
            yield replace_with(element)
        else:
            yield element


__all__ = [
    "FirstLastMapper",
    "IndexedFirstLastMapper",
    "last_or_none",
    "map_indexed",
    "map_indexed_to_list",
    "map_indexed_with_first_last",
    "map_to_list",
    "map_with_first_last",
    "peek",
    "replace_where",
    "where_indexed",
    "where_not",
    "where_not_to_list",
    "where_to_list",
    "where_to_list_indexed",
]
