"""
HTTP page fetcher.

Downloads listing and payroll item pages with a single curl_cffi session
impersonating a real browser. There is no retry: any transport error or
non-200 status is raised as FetchError.
"""

import logging
from typing import Optional

from curl_cffi import requests
from curl_cffi.requests import exceptions as requests_exceptions

import scraper_config
from errors import FetchError

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches pages over plain HTTP GET."""

    def __init__(self, impersonate: str = scraper_config.IMPERSONATE,
                 timeout: Optional[float] = scraper_config.REQUEST_TIMEOUT):
        """
        Initialize the fetcher.

        Args:
            impersonate: curl_cffi browser profile
            timeout: Request timeout in seconds (None = no timeout)
        """
        self.impersonate = impersonate
        self.timeout = timeout

        # Use curl_cffi with Chrome impersonation to look like a regular browser
        self.session = requests.Session()

    @classmethod
    def from_config(cls, config) -> 'PageFetcher':
        """Build a fetcher from a ScraperConfig."""
        return cls(impersonate=config.impersonate, timeout=config.timeout)

    def fetch(self, url: str) -> str:
        """
        Download a page.

        Args:
            url: URL to fetch

        Returns:
            HTML content

        Raises:
            FetchError: On transport failure or a status other than 200
        """
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, impersonate=self.impersonate,
                                        timeout=self.timeout)
        except requests_exceptions.RequestException as e:
            raise FetchError(url, f"error downloading page: {e}") from e

        if response.status_code != 200:
            raise FetchError(url, f"invalid status code: {response.status_code}",
                             status_code=response.status_code)

        return response.text

    def close(self) -> None:
        """Release the HTTP session."""
        try:
            self.session.close()
        except Exception as e:
            logger.warning(f"Error closing session: {e}")
