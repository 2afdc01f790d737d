from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from timezone_scraper.components.extractor.extractor_manager import ExtractorManager
from timezone_scraper.components.fetcher.http_fetcher import HttpFetcher
from timezone_scraper.components.storage.delimited_writer import DelimitedWriter
from timezone_scraper.components.storage.listing_generator import ListingGenerator
from timezone_scraper.core.exceptions import DownloadError, ParseError, WriteError
from timezone_scraper.core.logger import get_logger

if TYPE_CHECKING:
    from timezone_scraper.core.config import ConfigurationManager

logger = get_logger(__name__)


@dataclass
class PipelineResult:
    """Counts reported by a completed run."""
    tables_found: int
    tables_kept: int
    records_written: int
    listing_written: bool


class ScrapingManager:
    """
    Runs the scraping pipeline: download, table extraction, keyword filtering,
    delimited output and the timezone listing.

    The first stages are fatal on error; the listing stage only logs.
    """
    def __init__(self, config: Optional['ConfigurationManager'] = None):
        """
        Initializes the ScrapingManager and its components.

        Args:
            config (Optional[ConfigurationManager]): Passed on to every component
                for its own settings. If None, components use their defaults.
        """
        self.config = config
        self.fetcher = HttpFetcher(config=self.config)
        self.extractor_manager = ExtractorManager(config=self.config)
        self.writer = DelimitedWriter(config=self.config)
        self.listing_generator = ListingGenerator(config=self.config)
        logger.debug("ScrapingManager initialized.")

    def run(self, url: str, csv_path: str, delimiter: str, txt_path: str, keyword: str) -> PipelineResult:
        """
        Executes one complete run.

        Args:
            url (str): The page to download.
            csv_path (str): Destination of the delimited file.
            delimiter (str): Single-character field separator.
            txt_path (str): Destination of the listing.
            keyword (str): Case-sensitive substring selecting tables.

        Returns:
            PipelineResult: Table and record counts and whether the listing was written.

        Raises:
            DownloadError: If the page cannot be downloaded.
            ParseError: If the page cannot be tokenized.
            WriteError: If the delimited file cannot be written.
        """
        logger.info(f"Starting run for {url}")

        try:
            with self.fetcher as fetcher:
                body = fetcher.download(url)
        except DownloadError as e:
            logger.error(f"Error downloading HTML: {e.message}")
            raise

        try:
            tables = self.extractor_manager.extract(body, delimiter, keyword)
        except ParseError as e:
            logger.error(f"Error extracting tables: {e.message}")
            raise

        try:
            records_written = self.writer.write(tables, csv_path, delimiter)
        except WriteError as e:
            logger.error(f"Error writing tables to delimited file: {e.message}")
            raise

        listing_written = self.listing_generator.generate(csv_path, delimiter, txt_path, url)
        if not listing_written:
            logger.warning(f"Listing {txt_path} was not written; continuing.")

        result = PipelineResult(
            tables_found=self.extractor_manager.tables_found,
            tables_kept=len(tables),
            records_written=records_written,
            listing_written=listing_written,
        )
        logger.info(f"Run finished: {result}")
        return result
