# ABOUTME: High-level service API for the residence consumption pipeline
# ABOUTME: Cache-first table loading, table classification, row parsing and output writing

from __future__ import annotations

from collections.abc import Collection, Iterable

from anno_consumption.config import Config, get_config
from anno_consumption.core.models import LoadedTables, ParsedTable, PullResult
from anno_consumption.extraction.base import FetchError, TableSource
from anno_consumption.extraction.tables import classify_table, parse_rows
from anno_consumption.extraction.wiki import WikiTableFetcher
from anno_consumption.persistence import PageCache, format_row, write_rows
from anno_consumption.utils.logging import Severity, echo_plain, get_logger, log_status

logger = get_logger(__name__)


def collect_tables(fragments: Iterable[str], categories: Collection[str]) -> list[ParsedTable]:
    """Classify every fragment and parse the rows of those matching a category."""
    tables = []
    for fragment in fragments:
        category = classify_table(fragment, categories)
        if category is None:
            continue

        table = ParsedTable(category=category, rows=parse_rows(fragment))
        log_status(Severity.INFO, f"{category} parsed")
        logger.debug("Parsed table", category=category, row_count=len(table.rows))
        tables.append(table)
    return tables


class ConsumptionDataSource:
    """Produces raw table fragments, from the page cache when present or else from the wiki."""

    def __init__(
        self,
        fetcher: TableSource | None = None,
        cache: PageCache | None = None,
        config: Config | None = None,
        fail_fast: bool | None = None,
    ):
        self.config = config or get_config()
        self.fetcher = fetcher or WikiTableFetcher(config=self.config)
        self.cache = cache or PageCache(self.config)
        self.fail_fast = self.config.fail_fast if fail_fast is None else fail_fast
        self.logger = get_logger(__name__)

    async def load(self, categories: Iterable[str], refresh: bool = False) -> LoadedTables:
        """Return every table fragment for ``categories``.

        An existing cache is trusted as complete. Otherwise each category is fetched
        in order and the cache is written once, only if every category succeeded.

        Raises:
            FetchError: On the first failed category when ``fail_fast`` is set
        """
        if refresh and self.cache.clear():
            log_status(Severity.INFO, "Cleared cached data")

        if self.cache.exists():
            log_status(Severity.INFO, "Loading data from file")
            return LoadedTables(fragments=self.cache.load(), from_cache=True)

        tables: dict[str, list[str]] = {}
        failed: list[str] = []

        for category in categories:
            try:
                tables[category] = await self.fetcher.fetch_tables(category)
            except FetchError as e:
                if self.fail_fast:
                    raise
                log_status(Severity.ERROR, f"Skipping {category}: {e.reason}")
                self.logger.error("Category fetch failed", category=category, url=e.url, error=e.reason)
                failed.append(category)

        if failed:
            log_status(Severity.WARNING, f"Cache not written, {len(failed)} categories failed")
        else:
            self.cache.save(tables)

        fragments = [fragment for category_tables in tables.values() for fragment in category_tables]
        return LoadedTables(fragments=fragments, from_cache=False, failed_categories=failed)

    async def close(self) -> None:
        close = getattr(self.fetcher, "close", None)
        if close is not None:
            await close()


class ConsumptionPullService:
    """Runs the whole pull: load fragments, keep residence tables, write the row dump."""

    def __init__(self, source: ConsumptionDataSource | None = None, config: Config | None = None):
        self.config = config or get_config()
        self.source = source or ConsumptionDataSource(config=self.config)
        self.logger = get_logger(__name__)

    def ensure_directories(self) -> None:
        self.config.temp_dir.mkdir(parents=True, exist_ok=True)
        self.config.data_dir.mkdir(parents=True, exist_ok=True)

    async def pull(self, refresh: bool = False) -> PullResult:
        """Run the pipeline once and return everything it parsed."""
        self.ensure_directories()
        categories = self.config.categories

        loaded = await self.source.load(categories, refresh=refresh)
        self.logger.info(
            "Loaded table fragments",
            fragment_count=len(loaded.fragments),
            from_cache=loaded.from_cache,
            failed_categories=loaded.failed_categories,
        )

        log_status(Severity.INFO, "Finding Tables")
        tables = collect_tables(loaded.fragments, set(categories))

        result = PullResult(
            tables=tables,
            fragment_count=len(loaded.fragments),
            from_cache=loaded.from_cache,
            failed_categories=loaded.failed_categories,
            output_path=self.config.output_path,
        )

        write_rows(self.config.output_path, result.rows)
        for row in result.rows:
            echo_plain(format_row(row))

        log_status(Severity.INFO, f"{result.row_count} rows loaded")
        return result

    async def close(self) -> None:
        await self.source.close()
