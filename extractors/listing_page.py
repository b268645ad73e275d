"""
Pure extraction functions for listing pages.

These functions are unit-testable and don't perform I/O.
Listing rows carry the link to their payroll item page inside an
onclick handler, e.g. onclick="window.location='http://...&ano=2020'".
An onclick without a link yields nothing rather than an empty link,
even when every year is requested, so no blank lines are printed.
"""

from typing import Iterable, List
from bs4 import BeautifulSoup
import re

import scraper_config

LINK_RE = re.compile(scraper_config.LINK_PATTERN)


def build_page_url(listing_url: str, page: int,
                   page_param: str = scraper_config.PAGE_PARAM) -> str:
    """
    Build the URL of a listing page.

    The portal takes the page number appended to the listing URL as
    "&<page_param>=<page>".

    Args:
        listing_url: Listing URL
        page: Page number (starting at 1)
        page_param: Query parameter name

    Returns:
        Listing page URL
    """
    return f"{listing_url}&{page_param}={page}"


def extract_onclick_links(html: str) -> List[str]:
    """
    Extract item links from the onclick attribute of table rows.

    Args:
        html: HTML content to parse

    Returns:
        Links in document order. Rows whose onclick has no link are skipped.
    """
    soup = BeautifulSoup(html, 'lxml')
    links = []

    for row in soup.find_all('tr', onclick=True):
        match = LINK_RE.search(row.get('onclick', ''))
        if match:
            links.append(match.group(0))

    return links


def filter_by_year(links: Iterable[str], year: str) -> List[str]:
    """
    Keep the links ending with the given year.

    The empty string is a suffix of every string, so year="" keeps all links.

    Args:
        links: Candidate links
        year: Year filter

    Returns:
        Matching links
    """
    return [link for link in links if link.endswith(year)]


def extract_year_links(html: str, year: str) -> List[str]:
    """
    Extract the item links of a listing page for one year.

    Args:
        html: Listing page HTML
        year: Year filter ("" = all years)

    Returns:
        Matching links in document order
    """
    return filter_by_year(extract_onclick_links(html), year)
