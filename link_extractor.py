"""
Link Extractor - walks the paginated payroll listing.

This module implements the link extraction mode, which:
1. Fetches listing pages starting at page 1
2. Extracts payroll item links for the requested year
3. Writes each link on its own line
4. Stops at the first page without matching links

The portal does not return an error for pages past the end of the
listing, only a page with zero links, so an empty page is the stop signal.
"""

import logging
from typing import TextIO

from errors import ParseError
from extractors.listing_page import build_page_url, extract_year_links
from fetcher import PageFetcher
from run_config import ScraperConfig

logger = logging.getLogger(__name__)


class LinkExtractor:
    """
    Paginated listing walker.

    Prints the links of every payroll item page matching the year filter.
    """

    def __init__(self, config: ScraperConfig, fetcher: PageFetcher, output: TextIO):
        """
        Initialize the link extractor.

        Args:
            config: Run configuration
            fetcher: Page fetcher
            output: Stream receiving one link per line
        """
        self.config = config
        self.fetcher = fetcher
        self.output = output

        # Statistics
        self.stats = {
            'listing_pages_visited': 0,
            'links_found': 0
        }

    def extract_page(self, page: int) -> int:
        """
        Process one listing page.

        Args:
            page: Page number

        Returns:
            Number of links written for this page

        Raises:
            FetchError: If the page can't be downloaded
            ParseError: If the page can't be parsed
        """
        url = build_page_url(self.config.listing_url, page, self.config.page_param)
        logger.info(f"[Page {page}] Processing listing page: {url}")

        html = self.fetcher.fetch(url)
        try:
            links = extract_year_links(html, self.config.year)
        except Exception as e:
            raise ParseError(url, f"error parsing listing page: {e}") from e

        for link in links:
            self.output.write(link + "\n")

        logger.info(f"  Found {len(links)} links")
        self.stats['listing_pages_visited'] += 1
        self.stats['links_found'] += len(links)
        return len(links)

    def _should_stop(self) -> bool:
        """
        Check if the page limit has been reached.

        Returns:
            True if we should stop, False otherwise
        """
        if self.config.max_pages:
            if self.stats['listing_pages_visited'] >= self.config.max_pages:
                logger.info(f"Reached max_pages limit: {self.config.max_pages}")
                return True
        return False

    def run(self) -> int:
        """
        Main extraction loop.

        Returns:
            Total number of links written
        """
        logger.info("Starting link extraction")
        logger.info(f"Listing URL: {self.config.listing_url}")
        logger.info(f"Year filter: {self.config.year or '(all years)'}")
        if self.config.max_pages:
            logger.info(f"Max pages: {self.config.max_pages}")

        page = self.config.start_page
        while self.extract_page(page) > 0:
            if self._should_stop():
                break
            page += 1

        self.output.flush()

        logger.info("=" * 60)
        logger.info("Link extraction complete!")
        logger.info(f"Listing pages visited: {self.stats['listing_pages_visited']}")
        logger.info(f"Links found: {self.stats['links_found']}")
        logger.info("=" * 60)

        return self.stats['links_found']


def run_link_extraction(config: ScraperConfig, output: TextIO) -> int:
    """
    Run link extraction with a fresh fetcher.

    Args:
        config: Run configuration
        output: Stream receiving the links

    Returns:
        Total number of links written
    """
    fetcher = PageFetcher.from_config(config)
    try:
        return LinkExtractor(config, fetcher, output).run()
    finally:
        fetcher.close()
