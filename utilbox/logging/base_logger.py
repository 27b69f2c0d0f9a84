# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

from abc import ABC, abstractmethod
from typing import Any


class BaseLogger(ABC):
    """Logger interface used by the extension modules.

    Only the levels the library emits are part of the interface: debug for soft
    absences, info for anything a caller may want to see by default.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def bind(self, **kwargs: Any) -> "BaseLogger":
        pass
