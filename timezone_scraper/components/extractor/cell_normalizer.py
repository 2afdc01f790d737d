"""
Turns flattened rows back into records of clean cell values.

A flattened row holds one entry per text token, joined by the delimiter.
Whitespace between cells produced empty entries, so a real cell boundary
appears as two consecutive delimiters, while several text tokens of one cell
(e.g. text around a <br> or a link) stay separated by a single delimiter.
A cell whose only content is an empty string cannot be told apart from that
whitespace, and is dropped with it.
"""
from typing import Iterable, List

from timezone_scraper.components.extractor.table_parser import Table

NON_BREAKING_SPACE = "\u00a0"

Record = List[str]


def split_row(row: str, delimiter: str) -> List[str]:
    """Splits a flattened row on the doubled delimiter and strips each piece."""
    return [cell.strip() for cell in row.split(delimiter * 2)]


def clean_cell(cell: str, delimiter: str) -> str:
    cell = cell.replace(delimiter, " ")
    cell = cell.replace(NON_BREAKING_SPACE, " ")
    cell = cell.replace("  ", " ")
    return cell.strip()


def clean_cells(cells: Iterable[str], delimiter: str) -> Record:
    """
    Cleans each cell and returns a new list without the cells left empty.

    Delimiters and non-breaking spaces become ordinary spaces and double
    spaces are collapsed once, so records of one table may differ in width.
    """
    cleaned = (clean_cell(cell, delimiter) for cell in cells)
    return [cell for cell in cleaned if cell]


def normalize_row(row: str, delimiter: str) -> Record:
    return clean_cells(split_row(row, delimiter), delimiter)


def normalize_tables(tables: Iterable[Table], delimiter: str) -> List[Record]:
    """Normalizes every row of every table into one list of records, in order."""
    return [normalize_row(row, delimiter) for table in tables for row in table]
