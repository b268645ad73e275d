"""
Pure extraction functions for payroll item pages.

An item page shows one payroll entry as a two column table
(label, value) preceded by a header row. The record is built
positionally, in the order the rows appear.
"""

from typing import List
from bs4 import BeautifulSoup

import scraper_config


def split_reference(value: str) -> List[str]:
    """
    Split a reference value like "2020 / 03" into its two parts.

    Args:
        value: Reference cell text

    Returns:
        The two parts, in split order

    Raises:
        ValueError: If the value has no separator
    """
    parts = value.split(scraper_config.REFERENCE_SEPARATOR)
    if len(parts) < 2:
        raise ValueError(f"Malformed reference value: {value!r}")
    return parts[:2]


def normalize_money(value: str) -> str:
    """
    Convert a currency string to a plain decimal string.

    "R$ 1.234,56" -> "1234.56"

    Args:
        value: Currency cell text (prefix, space, amount)

    Returns:
        Decimal string with "." as separator and no thousands separator

    Raises:
        ValueError: If the value has no amount after the prefix
    """
    tokens = value.split()
    if len(tokens) < 2:
        raise ValueError(f"Malformed money value: {value!r}")
    return tokens[1].replace(".", "").replace(",", ".")


def parse_payroll_table(html: str) -> List[str]:
    """
    Parse a payroll item page into a list of fields.

    Args:
        html: Item page HTML

    Returns:
        Field values in row order (CPF dropped, reference split in two,
        money normalized)

    Raises:
        ValueError: If a reference or money value is malformed
    """
    soup = BeautifulSoup(html, 'lxml')
    fields = []

    for index, row in enumerate(soup.find_all('tr')):
        # First row is the table header
        if index == 0:
            continue

        label_cell = row.find('td')
        if label_cell is None:
            # Rows without data cells still hold a position in the record
            fields.append("")
            continue

        label = label_cell.get_text().strip()
        if label in scraper_config.SKIPPED_LABELS:
            continue

        value_cell = label_cell.find_next_sibling('td')
        value = value_cell.get_text() if value_cell is not None else ""

        if label == scraper_config.REFERENCE_LABEL:
            fields.extend(split_reference(value.strip()))
        elif label in scraper_config.MONEY_LABELS:
            fields.append(normalize_money(value))
        else:
            fields.append(value)

    return fields
