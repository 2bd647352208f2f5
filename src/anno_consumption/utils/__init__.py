# ABOUTME: Cross-cutting utilities and shared infrastructure
# ABOUTME: Supporting services: logging, status output, rich tables

"""
Utils Layer: Shared infrastructure and cross-cutting concerns

This layer provides:
- Logging configuration and colored status lines
- Rich table rendering for CLI status commands

Data Flow: Supporting services for all other layers
"""

from . import logging

__all__ = [
    "logging",
]
