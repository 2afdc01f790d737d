"""
Storage component for the timezone scraper.

This sub-package writes the extracted records to a delimited file and
generates the timezone array listing from that file.
"""
from .delimited_writer import DelimitedWriter
from .listing_generator import ListingGenerator

__all__ = [
    "DelimitedWriter",
    "ListingGenerator",
]
