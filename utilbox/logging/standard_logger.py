# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

import logging
from typing import Any

from utilbox.logging.base_logger import BaseLogger
from utilbox.settings import Settings


class StandardLogger(BaseLogger):
    """Logger backed by the standard library. Keyword fields are attached as record attributes."""

    def __init__(self, name: str, **context: Any):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(Settings.log_level)
        self.context = context

    def debug(self, message: str, **kwargs: Any) -> None:
        self.logger.debug(message, extra={**self.context, **kwargs})

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(message, extra={**self.context, **kwargs})

    def bind(self, **kwargs: Any) -> "StandardLogger":
        return StandardLogger(self.logger.name, **{**self.context, **kwargs})
