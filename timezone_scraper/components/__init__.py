"""
Components sub-package for the timezone scraper.

This package contains the pipeline stages: downloading the page, extracting
and filtering its tables, and writing the results.

The `__all__` variable defines the public API of this sub-package,
making key components directly importable from `timezone_scraper.components`.
"""

from .fetcher.http_fetcher import HttpFetcher
from .extractor.extractor_manager import ExtractorManager
from .storage.delimited_writer import DelimitedWriter
from .storage.listing_generator import ListingGenerator

__all__ = [
    "HttpFetcher",
    "ExtractorManager",
    "DelimitedWriter",
    "ListingGenerator",
]
