"""
Fetcher component for the timezone scraper.

This sub-package is responsible for downloading the raw bytes of the
documentation page over HTTP.
"""
from .http_fetcher import HttpFetcher

__all__ = [
    "HttpFetcher",
]
