import pytest
from unittest.mock import MagicMock, patch

from timezone_scraper.core.manager import PipelineResult, ScrapingManager
from timezone_scraper.core.exceptions import DownloadError, ParseError, WriteError


# Mock the logger used in ScrapingManager to prevent console output during tests
@pytest.fixture(autouse=True)
def mock_manager_logger():
    with patch('timezone_scraper.core.manager.logger', MagicMock()) as mock_log:
        yield mock_log


@pytest.fixture
def scraping_manager_mocker():
    """
    Provides a ScrapingManager whose components are mocks, patched where
    ScrapingManager imports them.
    """
    mock_fetcher = MagicMock()
    mock_fetcher.__enter__.return_value = mock_fetcher
    mock_extractor = MagicMock()
    mock_writer = MagicMock()
    mock_listing = MagicMock()

    with patch('timezone_scraper.core.manager.HttpFetcher', return_value=mock_fetcher), \
         patch('timezone_scraper.core.manager.ExtractorManager', return_value=mock_extractor), \
         patch('timezone_scraper.core.manager.DelimitedWriter', return_value=mock_writer), \
         patch('timezone_scraper.core.manager.ListingGenerator', return_value=mock_listing):
        manager = ScrapingManager(config=None)
        yield manager, mock_fetcher, mock_extractor, mock_writer, mock_listing


RUN_ARGS = ("http://example.com/tz.htm", "out.csv", "\t", "out.txt", "DST")


def test_run_success_flow(scraping_manager_mocker):
    manager, mock_fetcher, mock_extractor, mock_writer, mock_listing = scraping_manager_mocker
    mock_fetcher.download.return_value = b"<html/>"
    mock_extractor.extract.return_value = [["row"]]
    mock_extractor.tables_found = 4
    mock_writer.write.return_value = 12
    mock_listing.generate.return_value = True

    result = manager.run(*RUN_ARGS)

    mock_fetcher.download.assert_called_once_with("http://example.com/tz.htm")
    mock_extractor.extract.assert_called_once_with(b"<html/>", "\t", "DST")
    mock_writer.write.assert_called_once_with([["row"]], "out.csv", "\t")
    mock_listing.generate.assert_called_once_with("out.csv", "\t", "out.txt", "http://example.com/tz.htm")
    assert result == PipelineResult(tables_found=4, tables_kept=1, records_written=12, listing_written=True)


def test_download_error_is_fatal(scraping_manager_mocker, mock_manager_logger):
    manager, mock_fetcher, mock_extractor, mock_writer, mock_listing = scraping_manager_mocker
    mock_fetcher.download.side_effect = DownloadError("unexpected status code: 404", status_code=404)

    with pytest.raises(DownloadError):
        manager.run(*RUN_ARGS)

    mock_extractor.extract.assert_not_called()
    mock_writer.write.assert_not_called()
    mock_listing.generate.assert_not_called()
    assert "Error downloading HTML" in mock_manager_logger.error.call_args[0][0]


def test_parse_error_is_fatal(scraping_manager_mocker):
    manager, mock_fetcher, mock_extractor, mock_writer, mock_listing = scraping_manager_mocker
    mock_fetcher.download.return_value = b"<html/>"
    mock_extractor.extract.side_effect = ParseError("HTML tokenizer failed")

    with pytest.raises(ParseError):
        manager.run(*RUN_ARGS)

    mock_writer.write.assert_not_called()
    mock_listing.generate.assert_not_called()


def test_write_error_is_fatal(scraping_manager_mocker):
    manager, mock_fetcher, mock_extractor, mock_writer, mock_listing = scraping_manager_mocker
    mock_fetcher.download.return_value = b"<html/>"
    mock_extractor.extract.return_value = []
    mock_writer.write.side_effect = WriteError("no table rows to write")

    with pytest.raises(WriteError):
        manager.run(*RUN_ARGS)

    mock_listing.generate.assert_not_called()


def test_listing_failure_is_not_fatal(scraping_manager_mocker, mock_manager_logger):
    manager, mock_fetcher, mock_extractor, mock_writer, mock_listing = scraping_manager_mocker
    mock_fetcher.download.return_value = b"<html/>"
    mock_extractor.extract.return_value = [["row"]]
    mock_extractor.tables_found = 1
    mock_writer.write.return_value = 1
    mock_listing.generate.return_value = False

    result = manager.run(*RUN_ARGS)

    assert result.listing_written is False
    mock_manager_logger.warning.assert_called_once()


def test_run_end_to_end_with_real_components(tmp_path, timezone_page):
    csv_path = tmp_path / "cxone_timezones.csv"
    txt_path = tmp_path / "cxone_timezones_array.txt"
    url = "https://help.example.com/timezone.htm"

    with patch('timezone_scraper.components.fetcher.http_fetcher.HttpFetcher.download',
               return_value=timezone_page.encode("utf-8")):
        result = ScrapingManager(config=None).run(url, str(csv_path), "\t", str(txt_path), "DST")

    assert result == PipelineResult(tables_found=2, tables_kept=1, records_written=3, listing_written=True)
    assert csv_path.read_text(encoding="utf-8") == (
        "Timezone\tDST\tAdditional Notes\n"
        "America/New_York\tYes\n"
        "Europe/Zürich\tYes (CET)\n"
    )
    assert txt_path.read_text(encoding="utf-8") == (
        f"// {url}\n"
        'VALID_TIMEZONES[1] = "America/New_York"\n'
        'VALID_TIMEZONES[2] = "Europe/Zürich"\n'
    )


def test_run_end_to_end_listing_failure_keeps_delimited_output(tmp_path, timezone_page):
    csv_path = tmp_path / "cxone_timezones.csv"
    txt_path = tmp_path / "missing_dir" / "cxone_timezones_array.txt"

    with patch('timezone_scraper.components.fetcher.http_fetcher.HttpFetcher.download',
               return_value=timezone_page.encode("utf-8")):
        result = ScrapingManager(config=None).run("http://x", str(csv_path), "\t", str(txt_path), "DST")

    assert result.listing_written is False
    assert csv_path.exists()
