import pytest
from unittest.mock import MagicMock, patch

from timezone_scraper.components.storage.delimited_writer import DelimitedWriter
from timezone_scraper.core.exceptions import WriteError


@pytest.fixture(autouse=True)
def mock_delimited_writer_logger():
    with patch('timezone_scraper.components.storage.delimited_writer.logger', MagicMock()) as mock_log:
        yield mock_log


TABLES = [[
    "\tTimezone\t\tDST\t",
    "\tAmerica/New_York\t\tYes\t",
    "\tAmerica/Phoenix\t\t\t",
]]


def test_write_header_with_extra_column_and_records(tmp_path):
    path = tmp_path / "timezones.csv"
    count = DelimitedWriter().write(TABLES, str(path), "\t")
    assert count == 3
    assert path.read_text(encoding="utf-8") == (
        "Timezone\tDST\tAdditional Notes\n"
        "America/New_York\tYes\n"
        "America/Phoenix\n"
    )


def test_write_uses_configured_extra_column(tmp_path, mock_config):
    config = mock_config({"components": {"writer": {"extra_column": "Notes"}}})
    path = tmp_path / "timezones.csv"
    DelimitedWriter(config=config).write([["A||B"]], str(path), "|")
    assert path.read_text(encoding="utf-8") == "A|B|Notes\n"


def test_rows_of_all_tables_are_written_in_order(tmp_path):
    path = tmp_path / "timezones.csv"
    DelimitedWriter().write([["H1||H2"], ["x||y", "z"]], str(path), "|")
    assert path.read_text(encoding="utf-8").splitlines() == ["H1|H2|Additional Notes", "x|y", "z"]


def test_write_is_utf8(tmp_path):
    path = tmp_path / "timezones.csv"
    DelimitedWriter().write([["Timezone", "Europe/Zürich"]], str(path), ",")
    assert "Europe/Zürich" in path.read_bytes().decode("utf-8")


def test_unwritable_path_raises_write_error(tmp_path):
    path = tmp_path / "missing_dir" / "timezones.csv"
    with pytest.raises(WriteError) as excinfo:
        DelimitedWriter().write(TABLES, str(path), "\t")
    assert isinstance(excinfo.value.original_exception, OSError)
    assert excinfo.value.component_name == "Storage"


def test_no_rows_raises_write_error(tmp_path):
    path = tmp_path / "timezones.csv"
    with pytest.raises(WriteError):
        DelimitedWriter().write([], str(path), "\t")
    assert not path.exists()


def test_multi_character_delimiter_raises_write_error(tmp_path):
    with pytest.raises(WriteError) as excinfo:
        DelimitedWriter().write(TABLES, str(tmp_path / "out.csv"), "||")
    assert "single character" in str(excinfo.value)


def test_build_records_does_not_write(tmp_path):
    records = DelimitedWriter().build_records(TABLES, "\t")
    assert records[0] == ["Timezone", "DST", "Additional Notes"]
    assert records[2] == ["America/Phoenix"]
    assert list(tmp_path.iterdir()) == []
