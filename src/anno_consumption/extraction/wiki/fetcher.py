import httpx

from anno_consumption.config import Config, get_config
from anno_consumption.extraction.base import FetchError
from anno_consumption.extraction.patterns import extract_tag
from anno_consumption.utils.logging import Severity, get_logger, log_fetch_step, log_status


class WikiTableFetcher:
    """Fetches residence pages from the Anno 1800 wiki and splits them into table fragments.
    Holds an httpx client that can be injected for testing."""

    def __init__(self, client: httpx.AsyncClient | None = None, config: Config | None = None):
        self.config = config or get_config()
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": self.config.user_agent}
        )
        self.logger = get_logger(__name__)

    def residence_url(self, category: str) -> str:
        return self.config.residence_url(category)

    async def fetch_tables(self, category: str) -> list[str]:
        """Fetch a category page and return every ``<table>`` fragment on it.

        Tables are not filtered here; all of them are returned in document order.
        """
        url = self.residence_url(category)
        log_status(Severity.INFO, f"Downloading data for {category}")

        html = await self._get_page_html(url, category)
        tables = extract_tag(html.replace("\n", ""), "table")

        self.logger.info("Extracted page tables", category=category, url=url, table_count=len(tables))
        return tables

    @log_fetch_step("get_page_html")
    async def _get_page_html(self, url: str, category: str) -> str:
        """GET ``url`` and return its body as text.

        Non-success statuses are not raised; the body is still parsed.
        """
        try:
            response = await self.http_client.get(url, follow_redirects=True)
            html = response.text
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeDecodeError) as e:
            raise FetchError(category, url, str(e)) from e

        if not response.is_success:
            log_status(Severity.WARNING, f"{category} page returned HTTP {response.status_code}")

        self.logger.debug("Fetched page", category=category, status_code=response.status_code, length=len(html))
        return html

    async def close(self) -> None:
        await self.http_client.aclose()
