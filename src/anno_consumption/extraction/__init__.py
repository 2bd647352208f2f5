# ABOUTME: Raw data extraction layer - wiki fetching and pattern-based table parsing
# ABOUTME: Pipeline Stage 1: Wiki pages → table fragments → rows of cell values

"""
Extraction Layer: Get table data out of wiki pages

This layer handles:
- Fetching residence pages over HTTP
- Regex-based extraction of tag-delimited fragments
- Classifying tables by residence and parsing their rows

Data Flow: Wiki HTML → Table fragments → persistence/ and core/
"""

from .base import CacheError, ExtractionError, FetchError, TableSource
from .patterns import extract, extract_tag, strip_tags
from .tables import classify_table, parse_rows, singularize, table_title

__all__ = [
    "CacheError",
    "ExtractionError",
    "FetchError",
    "TableSource",
    "classify_table",
    "extract",
    "extract_tag",
    "parse_rows",
    "singularize",
    "strip_tags",
    "table_title",
]
