# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utilbox.logging.logger_types import LoggerType


class AppSettings(BaseSettings):
    """Global app settings."""

    model_config = SettingsConfigDict(
        env_prefix="utilbox_", env_file=".env", extra="ignore"
    )

    logger_type: LoggerType = Field(
        LoggerType.STRUCTLOG,
        description="The type of logger to use.",
    )

    # Logging settings.
    log_level: str = Field("INFO", description="Log level used for logging statements.")

    # Timezone treated as local wall-clock time. Falls back to the system zone.
    local_timezone: str | None = Field(
        None,
        description="IANA timezone name used as the local timezone, e.g. 'Europe/Amsterdam'.",
    )

    @field_validator("local_timezone")
    @classmethod
    def _validate_local_timezone(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value
