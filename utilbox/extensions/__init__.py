# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""Extension functions grouped by the built-in type they operate on.

Each module holds free functions taking the value as their first argument. Names
such as ``where_not`` or ``map_to_list`` exist for several types, so import the
module rather than the function when using more than one group:

    >>> from utilbox.extensions import iterables, maps
    >>> iterables.where_not_to_list([1, 2, 3], lambda x: x > 1)
    [1]
    >>> maps.where_not({1: "a", 2: "b"}, lambda key, _: key > 1)
    {1: 'a'}
"""

from utilbox.extensions import datetime, iterables, lists, maps, numbers, strings

__all__ = [
    "datetime",
    "iterables",
    "lists",
    "maps",
    "numbers",
    "strings",
]
