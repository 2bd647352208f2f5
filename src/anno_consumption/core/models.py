# ABOUTME: Domain models for the consumption pipeline - parsed tables and run results
# ABOUTME: Results are returned explicitly instead of accumulated in shared state

from pathlib import Path

from pydantic import BaseModel, Field

Row = list[str]


class ParsedTable(BaseModel):
    """A wiki table matched to a residence category, with its header-bearing rows."""

    category: str = Field(description="Residence category the table was matched to")
    rows: list[Row] = Field(default_factory=list, description="Header cells followed by data cells, per row")


class LoadedTables(BaseModel):
    """Raw table fragments produced by the content source for one run."""

    fragments: list[str] = Field(default_factory=list)
    from_cache: bool = False
    failed_categories: list[str] = Field(default_factory=list)


class PullResult(BaseModel):
    """Outcome of a full consumption pull."""

    tables: list[ParsedTable] = Field(default_factory=list)
    fragment_count: int = 0
    from_cache: bool = False
    failed_categories: list[str] = Field(default_factory=list)
    output_path: Path | None = None

    @property
    def rows(self) -> list[Row]:
        return [row for table in self.tables for row in table.rows]

    @property
    def row_count(self) -> int:
        return sum(len(table.rows) for table in self.tables)

    @property
    def categories_parsed(self) -> list[str]:
        return [table.category for table in self.tables]
