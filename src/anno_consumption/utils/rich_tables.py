# ABOUTME: Rich table utilities for styled status displays in the CLI
# ABOUTME: Provides table generators for logging, cache and pull summary output

from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a two-column key-value table.

    Args:
        title: Table title
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, no_wrap=False)
    table.add_column("Value", style=value_style, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table."""
    logging_data = {
        "Mode": status["mode"].title(),
        "Log Directory": status["log_directory"] or "N/A (production mode)",
        "Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    if status["log_files"]["main"]:
        logging_data["Main Log"] = status["log_files"]["main"]
    if status["log_files"]["errors"]:
        logging_data["Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def create_cache_status_table(status: dict[str, Any]) -> Table:
    """Create a page cache status table from ``PageCache.describe()`` output."""
    cache_data = {
        "Path": status["path"],
        "Format": status["format"],
        "Present": "yes" if status["exists"] else "no",
    }
    if status["exists"]:
        cache_data["Size (bytes)"] = str(status["size_bytes"])
        cache_data["Fragments"] = str(status["fragment_count"])

    return create_key_value_table(title="Page Cache", data=cache_data)


def create_pull_summary_table(result: Any) -> Table:
    """Create a per-category row count table for a finished pull.

    Args:
        result: PullResult of the run
    """
    table = Table(
        title="[bold cyan]Parsed Residences[/bold cyan]",
        box=ROUNDED,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
    )
    table.add_column("Residence", style="bold blue")
    table.add_column("Rows", style="green", justify="right")

    for parsed in result.tables:
        table.add_row(parsed.category, str(len(parsed.rows)))

    table.add_row("Total", str(result.row_count), style="bold")
    return table


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing and style.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()  # Add spacing before
    console.print(table)
    console.print()  # Add spacing after
