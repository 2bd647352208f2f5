# ABOUTME: Anno 1800 residence consumption scraper
# ABOUTME: Fetches wiki residence pages, extracts their tables and dumps the parsed rows

__version__ = "0.1.0"
