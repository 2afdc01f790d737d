"""
Timezone scraper: extracts the CXone Studio timezone table from its
documentation page into a delimited file and a `VALID_TIMEZONES` listing.
"""
__version__ = "0.1.0"
