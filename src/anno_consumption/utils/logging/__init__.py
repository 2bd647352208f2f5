# ABOUTME: Logging configuration, colored status output and structured logger helpers
# ABOUTME: Provides rich console status lines and structured logging for the pipeline

from .config import LoggingMode, configure_logging, get_logging_status
from .console import Severity, echo_plain, format_status, log_status, set_console_output
from .utils import get_logger, log_fetch_step, with_pipeline_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "get_logging_status",
    # Status lines
    "Severity",
    "echo_plain",
    "format_status",
    "log_status",
    "set_console_output",
    # Utilities
    "get_logger",
    "log_fetch_step",
    "with_pipeline_context",
]
