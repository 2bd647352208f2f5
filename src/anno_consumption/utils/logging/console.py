# ABOUTME: Colored [INFO]/[WARNING]/[ERROR] status lines for pipeline phase transitions
# ABOUTME: Prints through a rich console and mirrors every line into the loguru sinks

from enum import Enum

from loguru import logger
from rich.console import Console
from rich.text import Text

console = Console(highlight=False)

# Production mode keeps stdout for JSON records only
_console_enabled = True


def set_console_output(enabled: bool) -> None:
    global _console_enabled
    _console_enabled = enabled


class Severity(str, Enum):
    """Status line severities with their prefix and console color."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def color(self) -> str:
        return _COLORS[self]

    @property
    def prefix(self) -> str:
        return f"[{self.value}]"


_COLORS = {
    Severity.INFO: "green",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


def format_status(severity: Severity, message: str) -> Text:
    """Build the styled status line; ``Text`` keeps brackets in the message literal."""
    return Text(f"{severity.prefix} {message}", style=severity.color)


def log_status(severity: Severity, message: str, out: Console | None = None) -> None:
    """Print a colored status line and forward it to loguru.

    Args:
        severity: Line severity, selects prefix and color
        message: Human-readable status message
        out: Console to print on, defaults to the shared module console
    """
    if _console_enabled:
        (out or console).print(format_status(severity, message))
    logger.log(severity.value, message)


def echo_plain(message: str, out: Console | None = None) -> None:
    """Print a line verbatim, without markup or highlighting."""
    if _console_enabled:
        (out or console).print(message, markup=False, highlight=False, soft_wrap=True)
