# ABOUTME: File persistence layer for the page cache and the parsed row dump
# ABOUTME: Pipeline Stage 2: Table fragments → cache file, rows → output file

"""
Persistence Layer: Save and reload pipeline data on disk

This layer handles:
- The raw page cache (delimited text or labeled JSON)
- The human-readable dump of parsed rows

Data Flow: extraction/ fragments → Cache file → core/ pipeline → Output file
"""

from .cache import CacheSnapshot, PageCache, decode_delimited, encode_delimited
from .output import format_row, write_rows

__all__ = [
    "CacheSnapshot",
    "PageCache",
    "decode_delimited",
    "encode_delimited",
    "format_row",
    "write_rows",
]
