"""
Downloads web pages over HTTP.

This module provides the `HttpFetcher` class, a context manager around a
`requests.Session` that issues a single GET per call and returns the raw
response body. Request headers can be supplied through the application's
configuration.
"""
import requests
from typing import Dict, Optional, TYPE_CHECKING

from timezone_scraper.core.exceptions import DownloadError
from timezone_scraper.core.logger import get_logger

if TYPE_CHECKING:
    from timezone_scraper.core.config import ConfigurationManager

logger = get_logger(__name__)


class HttpFetcher:
    """
    Context manager for HTTP downloads.

    Entering the context opens a `requests.Session` carrying the configured
    headers; leaving it closes the session. `download()` may also be called
    outside a `with` block, in which case a session is opened and closed
    around the single request.

    There are no retries and no timeout beyond the transport defaults.

    Attributes:
        headers (Dict[str, str]): Extra request headers sent with every request.
        session (Optional[requests.Session]): The open session, if inside a `with` block.
    """

    def __init__(self, config: Optional['ConfigurationManager'] = None):
        """
        Initializes the HttpFetcher.

        Args:
            config (Optional[ConfigurationManager]): Used to read
                `components.fetcher.headers`. If None, no extra headers are sent.
        """
        headers = config.get('components.fetcher.headers', {}) if config else {}
        self.headers: Dict[str, str] = dict(headers or {})
        self.session: Optional[requests.Session] = None
        logger.debug(f"HttpFetcher configured with headers: {sorted(self.headers)}")

    def __enter__(self) -> 'HttpFetcher':
        self.session = self._new_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            self.session.close()
        self.session = None

    def _new_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update(self.headers)
        return session

    def download(self, url: str) -> bytes:
        """
        Issues an HTTP GET for `url` and returns the full response body.

        Args:
            url (str): The page to download.

        Returns:
            bytes: The raw response body.

        Raises:
            DownloadError: On a transport failure (carrying the underlying
                exception) or a status code outside 2xx (carrying `status_code`).
        """
        if self.session is not None:
            return self._get(self.session, url)
        with self._new_session() as session:
            return self._get(session, url)

    def _get(self, session: requests.Session, url: str) -> bytes:
        logger.info(f"Downloading {url}")
        try:
            response = session.get(url)
        except requests.RequestException as e:
            logger.error(f"Failed to make GET request to '{url}': {e}")
            raise DownloadError(f"failed to make GET request to '{url}'", original_exception=e)

        # The body is read eagerly by session.get(); close() only releases the connection.
        try:
            if not 200 <= response.status_code < 300:
                logger.error(f"Unexpected status code {response.status_code} from '{url}'")
                raise DownloadError(f"unexpected status code: {response.status_code}", status_code=response.status_code)
            body = response.content
        finally:
            response.close()

        logger.info(f"Downloaded {len(body)} bytes from {url}")
        return body
