# SPDX-FileCopyrightText: 2025 Contributors to the utilbox project <utilbox@users.noreply.github.com>
#
# SPDX-License-Identifier: MPL-2.0

"""Tests for the logger factory and its backends."""

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from utilbox.logging.base_logger import BaseLogger
from utilbox.logging.logger_factory import get_logger
from utilbox.logging.logger_types import LoggerType
from utilbox.logging.standard_logger import StandardLogger
from utilbox.logging.structlog_logger import StructlogLogger
from utilbox.settings import Settings


@pytest.mark.parametrize(
    ("logger_type", "expected_class"),
    [
        pytest.param(LoggerType.STANDARD, StandardLogger, id="standard"),
        pytest.param(LoggerType.STRUCTLOG, StructlogLogger, id="structlog"),
        pytest.param("logging", StandardLogger, id="standard_by_value"),
    ],
)
def test_get_logger_returns_requested_type(logger_type: str, expected_class: type[BaseLogger]):
    # Arrange / Act
    logger = get_logger("utilbox.test", logger_type)

    # Assert
    assert isinstance(logger, expected_class)


def test_get_logger_defaults_to_settings(monkeypatch: pytest.MonkeyPatch):
    # Arrange
    monkeypatch.setattr(Settings, "logger_type", LoggerType.STANDARD)

    # Act
    logger = get_logger("utilbox.test")

    # Assert
    assert isinstance(logger, StandardLogger)


def test_get_logger_unknown_type():
    # Arrange / Act / Assert
    with pytest.raises(ValueError, match="Unknown logger type: print"):
        get_logger("utilbox.test", "print")


def test_standard_logger_passes_fields_as_extra(caplog: pytest.LogCaptureFixture):
    # Arrange
    logger = get_logger("utilbox.test.standard", LoggerType.STANDARD).bind(source="parser")

    # Act
    with caplog.at_level(logging.INFO, logger="utilbox.test.standard"):
        logger.info("Parsed value", value="2023-08-30")

    # Assert
    record = caplog.records[-1]
    assert record.getMessage() == "Parsed value"
    assert record.value == "2023-08-30"
    assert record.source == "parser"


def test_structlog_logger_leaves_host_configuration_untouched():
    # Arrange
    before = structlog.get_config()

    # Act
    StructlogLogger("utilbox.test.structlog")

    # Assert
    assert structlog.get_config() == before


def test_structlog_logger_filters_below_configured_level(monkeypatch: pytest.MonkeyPatch):
    # Arrange
    monkeypatch.setattr(Settings, "log_level", "INFO")
    logger = StructlogLogger("utilbox.test.structlog").bind(source="parser")

    # Act
    with capture_logs() as logs:
        logger.debug("Hidden")
        logger.info("Parsed value", value=1)

    # Assert
    assert len(logs) == 1
    assert logs[0]["event"] == "Parsed value"
    assert logs[0]["value"] == 1
    assert logs[0]["source"] == "parser"
