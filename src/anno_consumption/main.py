# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands for pulling residence consumption tables and inspecting the cache

import asyncclick as click
from rich.console import Console

from anno_consumption.config import get_config
from anno_consumption.core.service import ConsumptionDataSource, ConsumptionPullService
from anno_consumption.extraction.base import ExtractionError
from anno_consumption.persistence import PageCache
from anno_consumption.utils.logging import (
    LoggingMode,
    Severity,
    configure_logging,
    get_logging_status,
    log_status,
    with_pipeline_context,
)
from anno_consumption.utils.rich_tables import (
    create_cache_status_table,
    create_logging_status_table,
    create_pull_summary_table,
    print_rich_table,
)

console = Console()


@click.command()
@click.option("--refresh", is_flag=True, help="Delete the page cache and download fresh data")
@click.option("--fail-fast", is_flag=True, help="Abort on the first residence page that cannot be fetched")
@click.pass_context
async def pull(ctx, refresh: bool, fail_fast: bool):
    """
    Pull residence consumption tables from the Anno 1800 wiki.

    Uses the local page cache when present, otherwise downloads every
    residence page. Parsed rows are written to the output file.
    """
    await _pull_async(refresh, fail_fast, ctx.obj["json_output"])


async def _pull_async(refresh: bool, fail_fast: bool, json_output: bool):
    """Run the pull pipeline and report the outcome."""
    failure: Exception | None = None

    with with_pipeline_context("consumption_pull", refresh=refresh) as logger:
        config = get_config()
        source = ConsumptionDataSource(config=config, fail_fast=True if fail_fast else None)
        service = ConsumptionPullService(source=source, config=config)

        try:
            result = await service.pull(refresh=refresh)
        except (ExtractionError, OSError) as e:
            logger.error("Pull failed", error=str(e), error_type=type(e).__name__)
            log_status(Severity.ERROR, str(e))
            failure = e
        finally:
            await service.close()

        if failure is None:
            logger.info(
                "Pull complete",
                row_count=result.row_count,
                tables=result.categories_parsed,
                from_cache=result.from_cache,
                output_path=str(result.output_path),
            )

            if not json_output:
                print_rich_table(console, create_pull_summary_table(result))
                if result.failed_categories:
                    console.print(f"[yellow]Failed residences: {', '.join(result.failed_categories)}[/yellow]")

    # The pipeline context logs any exception leaving it; the failure is already logged
    if failure is not None:
        raise click.exceptions.Exit(1)


@click.command(name="cache-status")
def cache_status():
    """
    Show where the page cache lives and what it holds.
    """
    try:
        status = PageCache(get_config()).describe()
    except ExtractionError as e:
        log_status(Severity.ERROR, str(e))
        raise click.exceptions.Exit(1)

    print_rich_table(console, create_cache_status_table(status))


@click.command(name="clear-cache")
def clear_cache():
    """
    Delete the page cache so the next pull downloads fresh data.
    """
    cache = PageCache(get_config())
    if cache.clear():
        log_status(Severity.INFO, f"Removed {cache.path}")
    else:
        log_status(Severity.WARNING, f"No cache at {cache.path}")


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    Show current logging configuration and status.
    """
    status = get_logging_status()
    print_rich_table(console, create_logging_status_table(status))


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON logs instead of colored status lines")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    Anno Consumption - residence needs from the Anno 1800 wiki

    Downloads every residence page, keeps the consumption tables and
    writes their rows to a plain-text dump.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    _initialize_logging(json, log_level, log_file)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(pull)
app.add_command(cache_status)
app.add_command(clear_cache)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
