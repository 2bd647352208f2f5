# ABOUTME: Tests for logging configuration module
# ABOUTME: Validates dual-mode logging setup and third-party library suppression

import logging
import os
from pathlib import Path
from unittest.mock import patch

from anno_consumption.utils.logging import console
from anno_consumption.utils.logging.config import (
    LoggingMode,
    configure_logging,
    detect_logging_mode,
    get_logging_status,
)


class TestDetectLoggingMode:
    """Test logging mode detection logic."""

    def test_detect_mode_from_env_production(self):
        with patch.dict(os.environ, {"ANNO_CONSUMPTION_LOG_MODE": "production"}):
            assert detect_logging_mode() == LoggingMode.PRODUCTION

    def test_detect_mode_from_env_invalid(self):
        with (
            patch.dict(os.environ, {"ANNO_CONSUMPTION_LOG_MODE": "invalid"}),
            patch("sys.stdout.isatty", return_value=True),
        ):
            assert detect_logging_mode() == LoggingMode.INTERACTIVE

    def test_detect_mode_from_tty_production(self):
        with patch.dict(os.environ, {}, clear=True), patch("sys.stdout.isatty", return_value=False):
            assert detect_logging_mode() == LoggingMode.PRODUCTION


class TestConfigureLogging:
    """Test logging configuration functionality."""

    def teardown_method(self):
        for logger_name in ["", "httpx", "httpcore", "asyncio", "urllib3", "py.warnings"]:
            logger = logging.getLogger(logger_name)
            logger.setLevel(logging.NOTSET)
        logging.captureWarnings(False)

    def test_configure_interactive_mode(self):
        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO")

        assert Path("logs").exists()
        assert console._console_enabled is True
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_configure_production_mode_disables_console_lines(self):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="INFO")

        assert console._console_enabled is False
        assert not Path("logs").exists()

    def test_configure_custom_log_level(self):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_status_lines_reach_log_file(self):
        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO", log_file="custom.log")

        console.log_status(console.Severity.WARNING, "Farmer page returned HTTP 404")

        assert "Farmer page returned HTTP 404" in Path("custom.log").read_text(encoding="utf-8")


class TestGetLoggingStatus:
    def test_get_status_interactive_mode(self):
        with patch("anno_consumption.utils.logging.config.detect_logging_mode") as mock_detect:
            mock_detect.return_value = LoggingMode.INTERACTIVE
            Path("logs").mkdir()

            status = get_logging_status()

            assert status["mode"] == LoggingMode.INTERACTIVE
            assert status["log_directory"] is not None
            assert status["log_files"]["main"].endswith("anno-consumption.log")
            assert "httpx" in status["third_party_suppressed"]

    def test_get_status_production_mode(self):
        with patch("anno_consumption.utils.logging.config.detect_logging_mode") as mock_detect:
            mock_detect.return_value = LoggingMode.PRODUCTION

            status = get_logging_status()

            assert status["log_files"]["main"] is None
            assert status["log_files"]["errors"] is None
