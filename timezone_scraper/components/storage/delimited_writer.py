"""
Delimited-file output for extracted tables.

This module provides the `DelimitedWriter` class, which normalizes the rows of
the selected tables into records and writes them with the `csv` module. The
first record is treated as the header and gets an extra, configurable column
label appended to it.
"""
import csv
from typing import List, Optional, TYPE_CHECKING

from timezone_scraper.components.extractor.cell_normalizer import Record, normalize_tables
from timezone_scraper.components.extractor.table_parser import Table
from timezone_scraper.core.exceptions import WriteError
from timezone_scraper.core.logger import get_logger

if TYPE_CHECKING:
    from timezone_scraper.core.config import ConfigurationManager

logger = get_logger(__name__)


class DelimitedWriter:
    """
    Writes normalized table rows to a UTF-8 delimited file.
    """
    DEFAULT_EXTRA_COLUMN = "Additional Notes"

    def __init__(self, config: Optional['ConfigurationManager'] = None):
        """
        Initializes the DelimitedWriter.

        Args:
            config (Optional[ConfigurationManager]): Used to read
                `components.writer.extra_column`. If None, defaults are used.
        """
        if config:
            self.extra_column = config.get('components.writer.extra_column', self.DEFAULT_EXTRA_COLUMN)
        else:
            self.extra_column = self.DEFAULT_EXTRA_COLUMN

    def build_records(self, tables: List[Table], delimiter: str) -> List[Record]:
        """
        Normalizes all rows and appends the extra column label to the header record.

        Raises:
            WriteError: If the tables hold no rows, leaving no header.
        """
        records = normalize_tables(tables, delimiter)
        if not records:
            raise WriteError("no table rows to write")
        records[0] = records[0] + [self.extra_column]
        return records

    def write(self, tables: List[Table], path: str, delimiter: str) -> int:
        """
        Writes the header and every remaining record to `path`.

        Records may differ in width; each is written as is.

        Args:
            tables (List[Table]): Tables of flattened rows.
            path (str): Destination file, overwritten if it exists.
            delimiter (str): Single-character field separator, also the
                separator the rows were flattened with.

        Returns:
            int: The number of records written, header included.

        Raises:
            WriteError: If the delimiter is not one character, there is
                nothing to write, or the file cannot be created, written or flushed.
        """
        if len(delimiter) != 1:
            raise WriteError(f"delimiter must be a single character, got {delimiter!r}")

        records = self.build_records(tables, delimiter)

        try:
            with open(path, 'w', newline='', encoding='utf-8') as f:
                writer = csv.writer(f, delimiter=delimiter, lineterminator='\n')
                writer.writerows(records)
        except (OSError, csv.Error) as e:
            logger.error(f"Failed to write delimited file '{path}': {e}")
            raise WriteError(f"failed to write delimited file '{path}'", original_exception=e) from e

        logger.info(f"Wrote {len(records)} records to {path}")
        return len(records)
