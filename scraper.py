"""
Câmara de Maceió payroll scraper

Scrapes the payroll disclosure portal of the Câmara Municipal de Maceió:
- Extracts the links to payroll item pages, filtered by year
- Turns a list of payroll item pages into a CSV file

Links and CSV go to standard output, logs go to standard error.
"""

import sys
import logging
import argparse

import yaml

from errors import ScraperError, FetchError, ParseError, InputError
from link_extractor import run_link_extraction
from record_extractor import run_record_extraction
from run_config import ScraperConfig, load_config, validate_config, MODE_LINKS, MODE_RECORDS

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_bool(value):
    """Parse a boolean flag value (-extrair_links=true, -processar-links=0)."""
    if value in ("1", "t", "T", "true", "TRUE", "True"):
        return True
    if value in ("0", "f", "F", "false", "FALSE", "False"):
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def build_parser():
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description='Payroll scraper for the Câmara Municipal de Maceió transparency portal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Extract links to the 2020 payroll pages
  python scraper.py -extrair_links -ano 2020 > links.txt

  # Turn the pages into a CSV file
  python scraper.py -processar-links < links.txt > folha.csv

  # Both steps at once
  python scraper.py -extrair_links -ano 2020 | python scraper.py -processar-links > folha.csv
        """
    )

    # Mode selection
    parser.add_argument('-extrair_links', '--extrair_links', type=parse_bool,
                        nargs='?', const=True, default=False, metavar='BOOL',
                        help='Only extract links to the payroll pages and print them to standard output')
    parser.add_argument('-processar-links', '--processar-links', dest='processar_links',
                        type=parse_bool, nargs='?', const=True, default=False, metavar='BOOL',
                        help='Process a list of payroll page links (one per line) read from standard input')

    # Filters
    parser.add_argument('-ano', '--ano', default=None,
                        help='Year of interest (default: all years)')

    # Run options
    parser.add_argument('--config', help='YAML file overriding the default settings')
    parser.add_argument('--max-pages', type=int, help='Maximum listing pages to walk')
    parser.add_argument('--continue-on-error', action='store_true',
                        help='Skip payroll pages that fail instead of aborting')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    return parser


def build_config(args):
    """
    Build the run configuration from the config file and the arguments.

    Command line arguments override values from the config file.
    """
    config = load_config(args.config) if args.config else ScraperConfig()

    if args.extrair_links:
        config.mode = MODE_LINKS
    elif args.processar_links:
        config.mode = MODE_RECORDS

    if args.ano is not None:
        config.year = args.ano
    if args.max_pages is not None:
        if args.max_pages < 1:
            raise ValueError("--max-pages must be a positive integer")
        config.max_pages = args.max_pages
    if args.continue_on_error:
        config.continue_on_error = True

    return config


def read_lines(stream):
    """Yield the lines of an input stream, turning read failures into InputError."""
    try:
        for line in stream:
            yield line
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"error reading standard input: {e}") from e


def main(argv=None):
    """Main entry point with argument parsing."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = build_config(args)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        sys.exit(1)
    except (ValueError, yaml.YAMLError) as e:
        logger.error(f"Invalid config: {e}")
        sys.exit(1)

    if config.mode is None:
        print("Nada a fazer. Escolha uma das opções:")
        parser.print_help()
        return

    for warning in validate_config(config):
        logger.warning(warning)

    # Route to appropriate mode
    try:
        if config.mode == MODE_LINKS:
            run_link_extraction(config, sys.stdout)
        else:
            run_record_extraction(config, read_lines(sys.stdin), sys.stdout)
    except FetchError as e:
        logger.error(f"Error downloading page: {e}")
        sys.exit(1)
    except ParseError as e:
        logger.error(f"Error parsing page: {e}")
        sys.exit(1)
    except ScraperError as e:
        logger.error(str(e))
        sys.exit(1)
    except OSError as e:
        logger.error(f"Error writing to standard output: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
