"""
Run configuration for the payroll scraper.

Holds everything a run needs (mode, year filter, listing URL, limits)
in one object that is passed to each component. Values default to
scraper_config and may be overridden from a YAML file.
"""

from typing import List, Dict, Any, Optional
from dataclasses import dataclass
from pathlib import Path
import re
import yaml

import scraper_config

MODE_LINKS = 'links'
MODE_RECORDS = 'records'


@dataclass
class ScraperConfig:
    """
    Complete configuration for one scraper run.
    """
    mode: Optional[str] = None  # 'links', 'records' or None
    year: str = ""
    listing_url: str = scraper_config.LISTING_URL
    page_param: str = scraper_config.PAGE_PARAM
    start_page: int = scraper_config.START_PAGE
    max_pages: Optional[int] = scraper_config.MAX_PAGES
    timeout: Optional[float] = scraper_config.REQUEST_TIMEOUT
    impersonate: str = scraper_config.IMPERSONATE
    continue_on_error: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScraperConfig':
        """
        Create a ScraperConfig from a dictionary (loaded from YAML).

        Args:
            data: Dictionary from YAML file

        Returns:
            ScraperConfig instance

        Raises:
            ValueError: If a field is unknown or has the wrong type
        """
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config fields: {', '.join(unknown)}")

        config = cls()

        mode = data.get('mode', config.mode)
        if mode not in (None, MODE_LINKS, MODE_RECORDS):
            raise ValueError(f"Invalid mode: {mode}")
        config.mode = mode

        # Years are often written unquoted in YAML
        year = data.get('year', config.year)
        if year is None:
            year = ""
        if not isinstance(year, (str, int)) or isinstance(year, bool):
            raise ValueError("'year' must be a string")
        config.year = str(year)

        for name in ('listing_url', 'page_param', 'impersonate'):
            if name in data:
                value = data[name]
                if not isinstance(value, str) or not value.strip():
                    raise ValueError(f"'{name}' must be a non-empty string")
                setattr(config, name, value)

        if 'start_page' in data:
            start_page = data['start_page']
            if not isinstance(start_page, int) or isinstance(start_page, bool) or start_page < 0:
                raise ValueError("'start_page' must be a non-negative integer")
            config.start_page = start_page

        if 'max_pages' in data:
            max_pages = data['max_pages']
            if max_pages is not None and (not isinstance(max_pages, int)
                                          or isinstance(max_pages, bool) or max_pages < 1):
                raise ValueError("'max_pages' must be a positive integer or null")
            config.max_pages = max_pages

        if 'timeout' in data:
            timeout = data['timeout']
            if timeout is not None and (not isinstance(timeout, (int, float))
                                        or isinstance(timeout, bool) or timeout < 0):
                raise ValueError("'timeout' must be a non-negative number or null")
            # 0 disables the timeout
            config.timeout = timeout or None

        if 'continue_on_error' in data:
            if not isinstance(data['continue_on_error'], bool):
                raise ValueError("'continue_on_error' must be a boolean")
            config.continue_on_error = data['continue_on_error']

        return config


def load_config(file_path: str) -> ScraperConfig:
    """
    Load a run configuration from a YAML file.

    Args:
        file_path: Path to YAML config file

    Returns:
        ScraperConfig instance

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If config is invalid
        yaml.YAMLError: If YAML parsing fails
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a YAML dictionary")

    return ScraperConfig.from_dict(data)


def validate_config(config: ScraperConfig) -> List[str]:
    """
    Validate a config and return a list of warnings (not errors).

    Args:
        config: Config to validate

    Returns:
        List of warning messages (empty if no warnings)
    """
    warnings = []

    if not config.listing_url.startswith('http://') and not config.listing_url.startswith('https://'):
        warnings.append(f"Listing URL may be invalid (missing http/https): {config.listing_url}")

    if config.year and not re.fullmatch(r"\d{4}", config.year):
        warnings.append(f"Year filter is not a four digit year: {config.year}")

    if config.max_pages and config.max_pages > 1000:
        warnings.append(f"max_pages is very high: {config.max_pages}")

    if config.timeout is None:
        warnings.append("No request timeout - a hung request blocks the run")

    return warnings
