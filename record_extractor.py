"""
Record Extractor - turns payroll item pages into CSV rows.

Reads item page URLs (one per line), downloads each page, parses its
table into a payroll record and writes it as a CSV row under a fixed
header.
"""

import csv
import logging
from typing import Iterable, List, TextIO

import scraper_config
from errors import ScraperError, ParseError
from extractors.payroll_page import parse_payroll_table
from fetcher import PageFetcher
from run_config import ScraperConfig

logger = logging.getLogger(__name__)


def iter_urls(lines: Iterable[str]) -> Iterable[str]:
    """Yield the URLs of an input stream, skipping blank and comment lines."""
    for line in lines:
        line = line.strip()
        if line and not line.startswith('#'):
            yield line


class RecordExtractor:
    """Writes one CSV row per payroll item page."""

    def __init__(self, config: ScraperConfig, fetcher: PageFetcher, output: TextIO):
        self.config = config
        self.fetcher = fetcher
        self.writer = csv.writer(output, lineterminator="\n")
        self.output = output

        # Statistics
        self.stats = {
            'pages_processed': 0,
            'records_written': 0,
            'pages_failed': 0
        }

    def extract_record(self, url: str) -> List[str]:
        """
        Download and parse one payroll item page.

        Args:
            url: Item page URL

        Returns:
            Record fields in table row order

        Raises:
            FetchError: If the page can't be downloaded
            ParseError: If the table can't be parsed
        """
        html = self.fetcher.fetch(url)
        try:
            record = parse_payroll_table(html)
        except ValueError as e:
            raise ParseError(url, f"error parsing payroll table: {e}") from e

        if len(record) != len(scraper_config.CSV_HEADER):
            logger.warning(f"Record has {len(record)} fields, header has "
                           f"{len(scraper_config.CSV_HEADER)}: {url}")
        return record

    def run(self, lines: Iterable[str]) -> int:
        """
        Main extraction loop.

        Args:
            lines: Input lines, one URL per line

        Returns:
            Number of records written

        Raises:
            ScraperError: On the first failing page, unless continue_on_error is set
        """
        logger.info("Starting record extraction")
        if self.config.continue_on_error:
            logger.info("Failing pages will be skipped")

        self.writer.writerow(scraper_config.CSV_HEADER)

        for url in iter_urls(lines):
            logger.info(f"Processing: {url}")
            self.stats['pages_processed'] += 1

            try:
                record = self.extract_record(url)
            except ScraperError as e:
                if not self.config.continue_on_error:
                    raise
                logger.error(f"Skipping page: {e}")
                self.stats['pages_failed'] += 1
                continue

            self.writer.writerow(record)
            self.stats['records_written'] += 1

        self.output.flush()

        logger.info("=" * 60)
        logger.info("Record extraction complete!")
        logger.info(f"Pages processed: {self.stats['pages_processed']}")
        logger.info(f"Records written: {self.stats['records_written']}")
        if self.stats['pages_failed']:
            logger.info(f"Pages failed: {self.stats['pages_failed']}")
        logger.info("=" * 60)

        return self.stats['records_written']


def run_record_extraction(config: ScraperConfig, lines: Iterable[str], output: TextIO) -> int:
    """
    Run record extraction with a fresh fetcher.

    Args:
        config: Run configuration
        lines: Input lines, one URL per line
        output: Stream receiving the CSV

    Returns:
        Number of records written
    """
    fetcher = PageFetcher.from_config(config)
    try:
        return RecordExtractor(config, fetcher, output).run(lines)
    finally:
        fetcher.close()
