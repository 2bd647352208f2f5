import io

import pytest
from rich.console import Console

from anno_consumption.utils.logging.console import (
    Severity,
    echo_plain,
    format_status,
    log_status,
    set_console_output,
)


def _buffer_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, highlight=False), buffer


@pytest.mark.parametrize(
    "severity,prefix,color",
    [
        (Severity.INFO, "[INFO]", "green"),
        (Severity.WARNING, "[WARNING]", "yellow"),
        (Severity.ERROR, "[ERROR]", "red"),
    ],
)
def test_format_status(severity, prefix, color):
    line = format_status(severity, "Finding Tables")
    assert line.plain == f"{prefix} Finding Tables"
    assert str(line.style) == color


def test_log_status_keeps_brackets_literal():
    out, buffer = _buffer_console()
    log_status(Severity.INFO, "[bold]not markup[/bold]", out=out)
    assert buffer.getvalue() == "[INFO] [bold]not markup[/bold]\n"


def test_echo_plain_prints_row_repr_verbatim():
    out, buffer = _buffer_console()
    echo_plain("['Fish', '0.0025']", out=out)
    assert buffer.getvalue() == "['Fish', '0.0025']\n"


def test_console_output_can_be_disabled():
    out, buffer = _buffer_console()
    set_console_output(False)
    log_status(Severity.ERROR, "hidden", out=out)
    echo_plain("hidden", out=out)
    assert buffer.getvalue() == ""
