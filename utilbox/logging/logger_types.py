# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

from enum import StrEnum


class LoggerType(StrEnum):
    STANDARD = "logging"
    STRUCTLOG = "structlog"
