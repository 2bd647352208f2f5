# ABOUTME: On-disk cache of raw wiki table fragments, written once and trusted on later runs
# ABOUTME: Supports the delimiter-joined text layout and a category-labeled JSON layout

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from anno_consumption.config import Config, get_config
from anno_consumption.extraction.base import CacheError
from anno_consumption.utils.logging import Severity, get_logger, log_status


class CacheSnapshot(BaseModel):
    """Table fragments keyed by the residence category whose page they came from."""

    tables: dict[str, list[str]] = Field(default_factory=dict)

    def fragments(self) -> list[str]:
        """All fragments flattened in category insertion order."""
        return [fragment for tables in self.tables.values() for fragment in tables]


def encode_delimited(fragments: list[str], delimiter: str = "|") -> str:
    return delimiter.join(fragments)


def decode_delimited(text: str, delimiter: str = "|") -> list[str]:
    """Split a delimited cache blob back into fragments.

    A fragment that itself contains the delimiter comes back as several pieces.
    """
    return text.split(delimiter)


class PageCache:
    """Reads and writes the page cache in the configured format."""

    def __init__(self, config: Config | None = None):
        self.config = config or get_config()
        self.logger = get_logger(__name__)

    @property
    def path(self) -> Path:
        return self.config.cache_path

    @property
    def is_labeled(self) -> bool:
        return self.config.cache_format == "labeled"

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> list[str]:
        """Load every cached fragment in file order.

        Raises:
            CacheError: If the file is not UTF-8 or a labeled cache is not valid JSON for a snapshot
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise CacheError(f"Unreadable cache file {self.path}: {e}") from e

        if self.is_labeled:
            try:
                fragments = CacheSnapshot.model_validate_json(text).fragments()
            except ValidationError as e:
                raise CacheError(f"Malformed cache file {self.path}: {e}") from e
        else:
            fragments = decode_delimited(text, self.config.cache_delimiter)

        self.logger.debug("Loaded page cache", path=str(self.path), fragment_count=len(fragments))
        return fragments

    def save(self, tables: dict[str, list[str]]) -> Path:
        """Write all categories' fragments to the cache file, replacing any previous one."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        snapshot = CacheSnapshot(tables=tables)
        if self.is_labeled:
            content = snapshot.model_dump_json()
        else:
            fragments = snapshot.fragments()
            delimiter = self.config.cache_delimiter
            if any(delimiter in fragment for fragment in fragments):
                log_status(
                    Severity.WARNING,
                    f"Cached content contains '{delimiter}', those tables will be split when reloaded",
                )
            content = encode_delimited(fragments, delimiter)

        self.path.write_text(content, encoding="utf-8")
        self.logger.info("Saved page cache", path=str(self.path), categories=len(tables), size=len(content))
        return self.path

    def clear(self) -> bool:
        """Delete the cache file. Returns whether a file was removed."""
        if not self.exists():
            return False
        self.path.unlink()
        self.logger.info("Cleared page cache", path=str(self.path))
        return True

    def describe(self) -> dict[str, Any]:
        """Summarize the cache for status displays."""
        status: dict[str, Any] = {
            "path": str(self.path),
            "format": self.config.cache_format,
            "exists": self.exists(),
            "size_bytes": None,
            "fragment_count": None,
        }
        if status["exists"]:
            status["size_bytes"] = self.path.stat().st_size
            status["fragment_count"] = len(self.load())
        return status
