"""Tests for icalviewer_lite.lite_logging module."""

import logging
import os
from unittest.mock import patch

import pytest

from icalviewer_lite.lite_logging import (
    PACKAGE_LOGGERS,
    SUPPRESSED_LOGGERS,
    configure_lite_logging,
    get_logging_status,
)

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def restore_logger_levels():
    """Restore logger levels touched by these tests."""
    names = ["", *PACKAGE_LOGGERS, *SUPPRESSED_LOGGERS]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


class TestConfigureLiteLogging:
    """Tests for configure_lite_logging function."""

    def test_default_production_mode(self):
        configure_lite_logging()

        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("icalviewer_lite").level == logging.INFO
        assert logging.getLogger("asyncio").level == logging.WARNING

    def test_debug_mode(self):
        configure_lite_logging(debug_mode=True)

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("icalviewer_lite").level == logging.DEBUG
        # Third-party loggers stay suppressed
        assert logging.getLogger("asyncio").level == logging.WARNING

    def test_force_debug_override(self):
        configure_lite_logging(debug_mode=False, force_debug=True)

        assert logging.getLogger("icalviewer_lite").level == logging.DEBUG

    @patch.dict(os.environ, {"ICALVIEWER_DEBUG": "1"})
    def test_env_debug_override(self):
        configure_lite_logging(debug_mode=False)

        assert logging.getLogger().level == logging.DEBUG

    @patch.dict(os.environ, {"ICALVIEWER_LOG_LEVEL": "WARNING"})
    def test_env_log_level_override(self):
        configure_lite_logging()

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("icalviewer_lite").level == logging.WARNING

    def test_level_name_applies_to_package_loggers(self):
        configure_lite_logging(level_name="ERROR")

        assert logging.getLogger().level == logging.ERROR
        for name in PACKAGE_LOGGERS:
            assert logging.getLogger(name).level == logging.ERROR

    def test_level_name_is_case_insensitive(self):
        configure_lite_logging(level_name="warning")

        assert logging.getLogger("icalviewer_lite.calendar.lite_parser").level == logging.WARNING

    def test_unknown_level_name_falls_back_to_info(self):
        configure_lite_logging(level_name="LOUD")

        assert logging.getLogger("icalviewer_lite").level == logging.INFO

    def test_debug_mode_wins_over_level_name(self):
        configure_lite_logging(debug_mode=True, level_name="ERROR")

        assert logging.getLogger("icalviewer_lite").level == logging.DEBUG

    @patch.dict(os.environ, {"ICALVIEWER_LOG_LEVEL": "DEBUG"})
    def test_env_log_level_wins_over_level_name(self):
        configure_lite_logging(level_name="ERROR")

        assert logging.getLogger("icalviewer_lite").level == logging.DEBUG

    def test_package_records_below_level_are_dropped(self, caplog):
        configure_lite_logging(level_name="ERROR")

        logging.getLogger("icalviewer_lite.calendar.lite_parser").info("Parsed 1 events")
        logging.getLogger("icalviewer_lite.calendar.lite_parser").error("Read failed")

        assert [r.getMessage() for r in caplog.records] == ["Read failed"]


class TestGetLoggingStatus:
    """Tests for get_logging_status."""

    def test_get_logging_status(self):
        configure_lite_logging()

        status = get_logging_status()

        assert status["root"] == "INFO"
        assert status["icalviewer_lite"] == "INFO"
        assert status["yaml"] == "WARNING"

    def test_status_reflects_configured_level(self):
        configure_lite_logging(level_name="ERROR")

        assert get_logging_status()["icalviewer_lite"] == "ERROR"
