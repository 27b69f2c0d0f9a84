# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

from functools import lru_cache

from utilbox.app_settings import AppSettings


@lru_cache
def _get_app_settings() -> AppSettings:
    return AppSettings()


Settings = _get_app_settings()
