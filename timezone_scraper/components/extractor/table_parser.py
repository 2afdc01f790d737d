"""
Streaming HTML table extraction.

This module provides `TableParser`, an `html.parser.HTMLParser` subclass that
turns start-tag, end-tag and text events into tables, and the `extract_tables`
helper that decodes a downloaded page and feeds it through the parser.

Each table is returned as a list of flattened rows: every text token seen
inside a `<tr>` is stripped and the resulting strings are joined with the
delimiter. Whitespace-only text between cells still contributes an empty
entry, so a boundary between two cells shows up as a doubled delimiter; the
cell normalizer relies on that. Nested tables and rowspan/colspan are not
supported.
"""
import enum
from html.parser import HTMLParser
from typing import List, Optional, Union

from bs4 import UnicodeDammit

from timezone_scraper.core.exceptions import ParseError
from timezone_scraper.core.logger import get_logger

logger = get_logger(__name__)

Table = List[str]


class ParserState(enum.Enum):
    OUTSIDE = "outside"
    IN_TABLE = "in_table"
    IN_ROW = "in_row"


class TableParser(HTMLParser):
    """
    Push-driven table extractor with three states: OUTSIDE, IN_TABLE, IN_ROW.

    Transitions:
        OUTSIDE  + <table>  -> IN_TABLE
        IN_TABLE + <tr>     -> IN_ROW
        IN_ROW   + text     -> IN_ROW (entry appended)
        IN_ROW   + </tr>    -> IN_TABLE (row flattened and appended)
        IN_TABLE + </table> -> OUTSIDE (table appended to `tables`)

    Every other event leaves the state unchanged. `close()` flushes a row or
    table still open when the input ends.

    Attributes:
        delimiter (str): Joins the text entries of a row.
        tables (List[Table]): Completed tables, in document order.
        state (ParserState): Current state.
    """

    def __init__(self, delimiter: str):
        super().__init__(convert_charrefs=True)
        self.delimiter = delimiter
        self.tables: List[Table] = []
        self.state = ParserState.OUTSIDE
        self._current_table: Table = []
        self._current_row: List[str] = []

    def handle_starttag(self, tag, attrs):
        if self.state is ParserState.OUTSIDE and tag == "table":
            self._current_table = []
            self.state = ParserState.IN_TABLE
        elif self.state is ParserState.IN_TABLE and tag == "tr":
            self._current_row = []
            self.state = ParserState.IN_ROW

    def handle_endtag(self, tag):
        if self.state is ParserState.IN_ROW and tag == "tr":
            self._finish_row()
        elif self.state is ParserState.IN_TABLE and tag == "table":
            self._finish_table()

    def handle_data(self, data):
        if self.state is ParserState.IN_ROW:
            self._current_row.append(data.strip())

    def close(self):
        super().close()
        # End of input: keep whatever was open.
        if self.state is ParserState.IN_ROW:
            self._finish_row()
        if self.state is ParserState.IN_TABLE:
            self._finish_table()

    def _finish_row(self):
        self._current_table.append(self.delimiter.join(self._current_row))
        self._current_row = []
        self.state = ParserState.IN_TABLE

    def _finish_table(self):
        self.tables.append(self._current_table)
        self._current_table = []
        self.state = ParserState.OUTSIDE


def decode_markup(body: Union[bytes, str]) -> str:
    """
    Decodes a raw page body to text using the declared or sniffed encoding.

    Raises:
        ParseError: If no encoding decodes the body.
    """
    if isinstance(body, str):
        return body
    dammit = UnicodeDammit(body, is_html=True)
    if dammit.unicode_markup is None:
        raise ParseError("unable to determine the character encoding of the page")
    logger.debug(f"Decoded page body as {dammit.original_encoding}")
    return dammit.unicode_markup


def extract_tables(body: Union[bytes, str], delimiter: str, parser: Optional[TableParser] = None) -> List[Table]:
    """
    Extracts every table of an HTML document as lists of flattened rows.

    Args:
        body (Union[bytes, str]): The raw page, as downloaded or already decoded.
        delimiter (str): Joins the text entries of each row.
        parser (Optional[TableParser]): A fresh parser to use instead of a new one.

    Returns:
        List[Table]: One entry per `<table>`, each a list of flattened rows.

    Raises:
        ParseError: If the body cannot be decoded or the tokenizer fails.
    """
    markup = decode_markup(body)
    parser = parser or TableParser(delimiter)
    try:
        parser.feed(markup)
        parser.close()
    except (AssertionError, ValueError) as e:
        logger.error(f"HTML tokenizer failed: {e}")
        raise ParseError("HTML tokenizer failed", original_exception=e) from e
    logger.info(f"Extracted {len(parser.tables)} tables")
    return parser.tables
