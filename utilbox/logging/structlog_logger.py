# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

import logging
from typing import Any

import structlog

from utilbox.logging.base_logger import BaseLogger
from utilbox.settings import Settings


class StructlogLogger(BaseLogger):
    """Logger backed by structlog.

    Uses the processors and logger factory of the host's structlog configuration
    without changing it. Only the level filter comes from ``Settings.log_level``.
    """

    def __init__(self, name: str, bound_logger: Any = None):
        if bound_logger is None:
            # A None logger defers processors and factory to the configuration in place at first use
            bound_logger = structlog.wrap_logger(
                None,
                wrapper_class=structlog.make_filtering_bound_logger(
                    logging.getLevelName(Settings.log_level)
                ),
                logger_factory_args=(name,),
            )
        self.name = name
        self.logger = bound_logger

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(message, **kwargs)

    def bind(self, **kwargs: Any) -> "StructlogLogger":
        return StructlogLogger(self.name, self.logger.bind(**kwargs))
