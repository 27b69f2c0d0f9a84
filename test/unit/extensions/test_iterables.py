# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""Tests for iterable extensions."""

from collections.abc import Iterator
from itertools import count, islice
from typing import Any

import pytest

from utilbox.extensions.iterables import (
    last_or_none,
    map_indexed,
    map_indexed_to_list,
    map_indexed_with_first_last,
    map_to_list,
    map_with_first_last,
    peek,
    replace_where,
    where_indexed,
    where_not,
    where_not_to_list,
    where_to_list,
    where_to_list_indexed,
)


def test_map_to_list():
    # Arrange / Act
    result = map_to_list([10, 20, 30, 40], lambda x: x * 2)

    # Assert
    assert result == [20, 40, 60, 80]


def test_map_indexed_to_list():
    # Arrange / Act
    result = map_indexed_to_list(iter(["a", "b", "c"]), lambda index, element: f"{index}{element}")

    # Assert
    assert result == ["0a", "1b", "2c"]


def test_map_indexed_is_lazy_on_infinite_input():
    # Arrange
    indexed = map_indexed(count(10), lambda index, element: index + element)

    # Act
    result = list(islice(indexed, 3))

    # Assert
    assert result == [10, 12, 14]


@pytest.mark.parametrize(
    ("items", "expected"),
    [
        pytest.param([], [], id="empty"),
        pytest.param(["a"], [("a", True, True)], id="single_element_is_first_and_last"),
        pytest.param(["a", "b"], [("a", True, False), ("b", False, True)], id="two_elements"),
        pytest.param(
            (x for x in "abc"),
            [("a", True, False), ("b", False, False), ("c", False, True)],
            id="generator_input",
        ),
    ],
)
def test_map_with_first_last(items: Any, expected: list[tuple[str, bool, bool]]):
    # Arrange / Act
    result = list(
        map_with_first_last(items, lambda element, is_first, is_last: (element, is_first, is_last))
    )

    # Assert
    assert result == expected


def test_map_indexed_with_first_last():
    # Arrange
    def describe(*, index: int, element: str, is_first: bool, is_last: bool) -> str:
        marker = "first" if is_first else "last" if is_last else "middle"
        return f"{index}:{element}:{marker}"

    # Act
    result = list(map_indexed_with_first_last(["x", "y", "z"], describe))

    # Assert
    assert result == ["0:x:first", "1:y:middle", "2:z:last"]


def test_map_with_first_last_defers_work_until_iterated():
    # Arrange
    calls: list[int] = []

    # Act
    mapped = map_with_first_last([1, 2, 3], lambda element, is_first, is_last: calls.append(element))

    # Assert
    assert calls == []
    next(mapped)
    assert calls == [1]


def test_where_variants():
    # Arrange
    items = [10, 20, 30, 40]

    # Act / Assert
    assert where_to_list(items, lambda x: x > 20) == [30, 40]
    assert where_not_to_list(items, lambda x: x > 20) == [10, 20]
    assert list(where_not(iter(items), lambda x: x > 20)) == [10, 20]
    assert list(where_indexed(items, lambda index, _: index % 2 == 1)) == [20, 40]
    assert where_to_list_indexed(items, lambda index, element: index + element > 22) == [30, 40]


def test_where_not_is_lazy():
    # Arrange
    seen: list[int] = []

    def is_even(x: int) -> bool:
        seen.append(x)
        return x % 2 == 0

    # Act
    result = next(where_not(count(2), is_even))

    # Assert
    assert result == 3
    assert seen == [2, 3]


def test_peek_runs_action_once_per_consumed_element():
    # Arrange
    seen: list[int] = []
    peeked = peek([1, 2, 3, 4], seen.append)

    # Act
    assert seen == []
    first_two = list(islice(peeked, 2))

    # Assert
    assert first_two == [1, 2]
    assert seen == [1, 2]


def test_peek_interleaves_with_consumer():
    # Arrange
    events: list[str] = []

    def consume(iterator: Iterator[int]) -> None:
        for element in iterator:
            events.append(f"consume {element}")

    # Act
    consume(peek([1, 2], lambda element: events.append(f"peek {element}")))

    # Assert
    assert events == ["peek 1", "consume 1", "peek 2", "consume 2"]


@pytest.mark.parametrize(
    ("items", "expected"),
    [
        pytest.param([], None, id="empty_list"),
        pytest.param([40], 40, id="single_element"),
        pytest.param([10, 20, 40], 40, id="list"),
        pytest.param(iter([]), None, id="empty_iterator"),
        pytest.param(iter([1, 2, 3]), 3, id="iterator"),
        pytest.param(range(5), 4, id="range"),
        pytest.param("abc", "c", id="string"),
    ],
)
def test_last_or_none(items: Any, expected: Any):
    # Arrange / Act
    result = last_or_none(items)

    # Assert
    assert result == expected


def test_replace_where():
    # Arrange
    items = [1, -2, 3, -4]

    # Act
    result = replace_where(items, lambda x: x < 0, abs)

    # Assert
    assert isinstance(result, Iterator)
    assert list(result) == [1, 2, 3, 4]
    assert items == [1, -2, 3, -4]
