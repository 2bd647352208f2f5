# ABOUTME: Business logic and orchestration layer
# ABOUTME: Pipeline Stage 3: Table fragments → parsed residence tables → row dump

"""
Core Layer: Pipeline orchestration

This layer handles:
- Cache-first loading of raw table fragments
- Selecting residence tables and parsing their rows
- Returning run results and writing the output file

Data Flow: extraction/ and persistence/ → Parsed tables → Output file
"""

from .models import LoadedTables, ParsedTable, PullResult, Row

# Import service on-demand to avoid circular imports
# Use: from anno_consumption.core.service import ConsumptionPullService

__all__ = [
    "LoadedTables",
    "ParsedTable",
    "PullResult",
    "Row",
]
