# ABOUTME: Simplified logging configuration using loguru and structlog
# ABOUTME: Dual-mode operation: interactive CLI vs production JSON logging

import logging
import os
import sys
from pathlib import Path
from typing import Any

import structlog
from loguru import logger

from .console import set_console_output

LOG_DIR = Path("logs")

SUPPRESSED_LOGGERS = ["httpx", "httpcore", "asyncio", "urllib3"]


class LoggingMode:
    """Logging mode constants."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


def detect_logging_mode() -> str:
    """Detect whether we're running in interactive or production mode."""
    mode = os.getenv("ANNO_CONSUMPTION_LOG_MODE")
    if mode and mode.lower() in [LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION]:
        return mode.lower()

    return LoggingMode.INTERACTIVE if sys.stdout.isatty() else LoggingMode.PRODUCTION


def setup_third_party_logging() -> None:
    """Configure third-party library logging to avoid CLI interference."""
    for logger_name in SUPPRESSED_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


def setup_structlog(log_level: str) -> None:
    """Filter structlog output to ``log_level`` and keep it off stdout."""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def configure_logging(mode: str | None = None, log_level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging using loguru.

    Args:
        mode: Logging mode (interactive/production), auto-detected if None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Custom log file path, uses default if None
    """
    if mode is None:
        mode = detect_logging_mode()

    set_console_output(mode == LoggingMode.INTERACTIVE)
    setup_third_party_logging()
    setup_structlog(log_level)

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(numeric_level)

    # Remove default loguru handler
    logger.remove()

    if mode == LoggingMode.INTERACTIVE:
        # Interactive mode: status lines go to the console via rich, loguru only writes files
        try:
            LOG_DIR.mkdir(exist_ok=True)
        except OSError:
            logger.add(sys.stdout, level=log_level, format="{time} | {level} | {name} | {message}", serialize=True)
            return

        log_file_path = log_file or str(LOG_DIR / "anno-consumption.log")

        logger.add(
            log_file_path,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="10 MB",
            retention="7 days",
        )

        # Errors only
        logger.add(
            LOG_DIR / "errors.log",
            level="ERROR",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            backtrace=True,
            diagnose=True,
        )
    else:
        # Production mode: JSON to stdout
        logger.add(sys.stdout, level=log_level, format="{time} | {level} | {name} | {message}", serialize=True)


def get_logging_status() -> dict[str, Any]:
    """Get current logging configuration status."""
    mode = detect_logging_mode()
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "log_directory": str(LOG_DIR.absolute()) if LOG_DIR.exists() else None,
        "log_files": {
            "main": str(LOG_DIR / "anno-consumption.log") if interactive else None,
            "errors": str(LOG_DIR / "errors.log") if interactive else None,
        },
        "third_party_suppressed": SUPPRESSED_LOGGERS + ["py.warnings"],
    }
