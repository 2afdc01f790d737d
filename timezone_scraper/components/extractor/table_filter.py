"""
Keyword-based table selection.
"""
from typing import List

from timezone_scraper.components.extractor.table_parser import Table
from timezone_scraper.core.logger import get_logger

logger = get_logger(__name__)


def table_contains(table: Table, keyword: str) -> bool:
    """True if any flattened row of `table` contains `keyword` (case-sensitive)."""
    return any(keyword in row for row in table)


def filter_tables_by_keyword(tables: List[Table], keyword: str) -> List[Table]:
    """
    Keeps the tables in which at least one flattened row contains `keyword`.

    Tables are tested independently and survivors keep their input order.
    No match anywhere yields an empty list.
    """
    filtered = [table for table in tables if table_contains(table, keyword)]
    logger.info(f"{len(filtered)} of {len(tables)} tables contain '{keyword}'")
    return filtered
