# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

from utilbox.logging.base_logger import BaseLogger
from utilbox.logging.logger_types import LoggerType
from utilbox.logging.standard_logger import StandardLogger
from utilbox.logging.structlog_logger import StructlogLogger
from utilbox.settings import Settings


def get_logger(name: str, logger_type: str | None = None) -> BaseLogger:
    """Create a logger of the configured type.

    Args:
        name: Name of the logger, usually the module's ``__name__``.
        logger_type: Backend to use. Defaults to ``Settings.logger_type``.

    Returns:
        A logger implementing the BaseLogger interface.

    Raises:
        ValueError: If the logger type is unknown.
    """
    logger_type = logger_type or Settings.logger_type
    if logger_type == LoggerType.STANDARD:
        return StandardLogger(name)
    elif logger_type == LoggerType.STRUCTLOG:
        return StructlogLogger(name)
    else:
        raise ValueError(f"Unknown logger type: {logger_type}")
