"""
Extractors for the payroll portal.

This package contains pure, unit-testable extraction functions
for pulling item links out of listing pages and payroll records
out of item pages.
"""

from .listing_page import (
    build_page_url,
    extract_onclick_links,
    filter_by_year,
    extract_year_links
)
from .payroll_page import (
    split_reference,
    normalize_money,
    parse_payroll_table
)

__all__ = [
    'build_page_url',
    'extract_onclick_links',
    'filter_by_year',
    'extract_year_links',
    'split_reference',
    'normalize_money',
    'parse_payroll_table'
]
