# ABOUTME: Protocols and error types shared by the wiki fetcher and the page cache
# ABOUTME: Defines the table source interface used by the consumption pipeline

from typing import Protocol


class TableSource(Protocol):
    """Protocol for anything that yields the raw table fragments of one category page."""

    async def fetch_tables(self, category: str) -> list[str]:
        """Return every table fragment on the category's page, in document order.

        Raises:
            FetchError: If the page cannot be fetched or decoded
        """
        ...


class ExtractionError(Exception):
    """Base class for failures while producing raw table data."""

    pass


class FetchError(ExtractionError):
    """Raised when a category page cannot be fetched or read as text."""

    def __init__(self, category: str, url: str, reason: str):
        super().__init__(f"Failed to fetch {category} from {url}: {reason}")
        self.category = category
        self.url = url
        self.reason = reason


class CacheError(ExtractionError):
    """Raised when the on-disk page cache cannot be decoded."""

    pass
