# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""Convenience operations for built-in date/time, collection, number and string types."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("utilbox")
except PackageNotFoundError:
    # package is not installed
    pass
