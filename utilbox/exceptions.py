# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""Utilbox custom exceptions.

Hard failures raised by the extension functions. Each subclasses the closest
builtin exception so callers can catch either the specific or the generic type.
"""


class NoMatchingElementError(LookupError):
    """No element satisfies the given condition."""

    def __init__(
        self,
        message: str = "No element satisfies the condition",
    ):
        self.message = message
        super().__init__(self.message)


class EmptyStringError(IndexError):
    """Operation requires a non-empty string."""

    def __init__(
        self,
        message: str = "String is empty",
    ):
        self.message = message
        super().__init__(self.message)
