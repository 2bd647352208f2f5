from .fetcher import WikiTableFetcher

__all__ = ["WikiTableFetcher"]
