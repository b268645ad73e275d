"""
Exceptions raised by the payroll scraper.
"""

from typing import Optional


class ScraperError(Exception):
    """Base class for scraper failures."""


class FetchError(ScraperError):
    """A page could not be downloaded (transport error or bad status)."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{message} ({url})")
        self.url = url
        self.status_code = status_code


class InputError(ScraperError):
    """The list of item URLs could not be read."""


class ParseError(ScraperError):
    """A downloaded page could not be turned into links or a record."""

    def __init__(self, url: str, message: str):
        super().__init__(f"{message} ({url})")
        self.url = url
