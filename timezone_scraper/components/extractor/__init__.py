"""
Extractor component for the timezone scraper.

This sub-package tokenizes the downloaded HTML into tables of flattened rows,
selects tables by keyword and normalizes rows into records.
"""
from .table_parser import ParserState, TableParser, decode_markup, extract_tables
from .table_filter import filter_tables_by_keyword
from .cell_normalizer import clean_cells, normalize_row, normalize_tables, split_row
from .extractor_manager import ExtractorManager

__all__ = [
    "ParserState",
    "TableParser",
    "decode_markup",
    "extract_tables",
    "filter_tables_by_keyword",
    "clean_cells",
    "normalize_row",
    "normalize_tables",
    "split_row",
    "ExtractorManager",
]
