"""
Simple script to validate a scraper config file.

Usage:
    python validate_config.py configs/example.yaml
"""

import sys
import logging

import yaml

from run_config import load_config, validate_config

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 1:
        print("Usage: python validate_config.py <config_file>")
        sys.exit(1)

    config_file = argv[0]

    try:
        logger.info(f"Loading config: {config_file}")
        config = load_config(config_file)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        sys.exit(1)
    except (ValueError, yaml.YAMLError) as e:
        logger.error(f"Invalid config: {e}")
        sys.exit(1)

    logger.info("✓ Config loaded successfully")
    logger.info(f"  Mode: {config.mode or '(from command line)'}")
    logger.info(f"  Year: {config.year or '(all years)'}")
    logger.info(f"  Listing URL: {config.listing_url}")
    logger.info(f"  Page param: {config.page_param} (starting at {config.start_page})")
    if config.max_pages:
        logger.info(f"  Max pages: {config.max_pages}")
    logger.info(f"  Timeout: {config.timeout}")
    logger.info(f"  Impersonate: {config.impersonate}")
    logger.info(f"  Continue on error: {config.continue_on_error}")

    warnings = validate_config(config)
    if warnings:
        logger.warning("Validation warnings:")
        for warning in warnings:
            logger.warning(f"  - {warning}")
    else:
        logger.info("✓ No validation warnings")

    logger.info("")
    logger.info("Config is valid and ready to use!")
    logger.info(f"Run with: python scraper.py --config {config_file} -extrair_links")


if __name__ == '__main__':
    main()
