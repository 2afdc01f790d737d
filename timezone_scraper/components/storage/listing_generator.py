"""
Generates the timezone array listing from the delimited file.

The listing is a small source-like text file: a comment line naming the page
the data came from, then one `VALID_TIMEZONES[<n>] = "<value>"` line per data
record, taking the first field of each record. This stage is best-effort:
its failures are logged and never abort the run.
"""
import csv
from typing import List, Optional, TYPE_CHECKING

from timezone_scraper.core.exceptions import ReadbackError
from timezone_scraper.core.logger import get_logger

if TYPE_CHECKING:
    from timezone_scraper.core.config import ConfigurationManager

logger = get_logger(__name__)


class ListingGenerator:
    """
    Reads a delimited file back and writes the assignment listing.
    """
    DEFAULT_ARRAY_NAME = "VALID_TIMEZONES"
    DEFAULT_COMMENT_PREFIX = "//"

    def __init__(self, config: Optional['ConfigurationManager'] = None):
        if config:
            self.array_name = config.get('components.listing.array_name', self.DEFAULT_ARRAY_NAME)
            self.comment_prefix = config.get('components.listing.comment_prefix', self.DEFAULT_COMMENT_PREFIX)
        else:
            self.array_name = self.DEFAULT_ARRAY_NAME
            self.comment_prefix = self.DEFAULT_COMMENT_PREFIX

    def read_records(self, csv_path: str, delimiter: str) -> List[List[str]]:
        """
        Reads every non-blank record of the delimited file; widths may vary.

        Raises:
            ReadbackError: If the file cannot be opened or parsed.
        """
        try:
            with open(csv_path, 'r', newline='', encoding='utf-8') as f:
                reader = csv.reader(f, delimiter=delimiter)
                return [record for record in reader if record]
        except OSError as e:
            raise ReadbackError(f"error opening file '{csv_path}'", original_exception=e) from e
        except (csv.Error, UnicodeDecodeError, TypeError) as e:
            raise ReadbackError(f"error reading delimited file '{csv_path}'", original_exception=e) from e

    def format_lines(self, records: List[List[str]], source_url: str) -> List[str]:
        """Builds the listing lines; the header record is skipped and numbering starts at 1."""
        lines = [f"{self.comment_prefix} {source_url}\n"]
        for index, record in enumerate(records[1:], start=1):
            lines.append(f'{self.array_name}[{index}] = "{record[0]}"\n')
        return lines

    def generate(self, csv_path: str, delimiter: str, txt_path: str, source_url: str) -> bool:
        """
        Writes the listing for `csv_path` to `txt_path`.

        Args:
            csv_path (str): The delimited file written earlier in the run.
            delimiter (str): Its field separator.
            txt_path (str): Destination of the listing.
            source_url (str): Recorded in the leading comment line.

        Returns:
            bool: True if the listing was written, False if any step failed.
                Failures are logged, never raised.
        """
        try:
            records = self.read_records(csv_path, delimiter)
            lines = self.format_lines(records, source_url)
            try:
                with open(txt_path, 'w', encoding='utf-8') as f:
                    f.writelines(lines)
            except OSError as e:
                raise ReadbackError(f"error creating file '{txt_path}'", original_exception=e) from e
        except ReadbackError as e:
            logger.error(str(e))
            return False

        logger.info(f"Wrote {len(lines) - 1} {self.array_name} entries to {txt_path}")
        return True
