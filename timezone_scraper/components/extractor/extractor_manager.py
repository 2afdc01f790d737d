from typing import List, Optional, TYPE_CHECKING, Union

from timezone_scraper.components.extractor.table_filter import filter_tables_by_keyword
from timezone_scraper.components.extractor.table_parser import Table, extract_tables
from timezone_scraper.core.logger import get_logger

if TYPE_CHECKING:
    from timezone_scraper.core.config import ConfigurationManager

logger = get_logger(__name__)


class ExtractorManager:
    """
    Coordinates table extraction and keyword filtering for a downloaded page.
    """
    def __init__(self, config: Optional['ConfigurationManager'] = None):
        self.config = config
        self.tables_found = 0

    def extract(self, body: Union[bytes, str], delimiter: str, keyword: str) -> List[Table]:
        """
        Extracts all tables from `body` and keeps those containing `keyword`.

        Args:
            body (Union[bytes, str]): The downloaded page.
            delimiter (str): Joins the text entries of each flattened row.
            keyword (str): Case-sensitive substring selecting tables.

        Returns:
            List[Table]: The matching tables, in document order. Possibly empty.

        Raises:
            ParseError: If the page cannot be decoded or tokenized.
        """
        tables = extract_tables(body, delimiter)
        self.tables_found = len(tables)
        filtered = filter_tables_by_keyword(tables, keyword)
        if not filtered:
            logger.warning(f"No table among {len(tables)} contains the keyword '{keyword}'.")
        return filtered
