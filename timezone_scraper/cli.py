"""
Command line interface for the timezone scraper.

Downloads the timezone documentation page, writes the tables containing the
filter keyword to a delimited file and generates the `VALID_TIMEZONES` array
listing from it. Option defaults come from the `defaults` section of the
active configuration environment (see `config/development.yaml`).
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from timezone_scraper.core.config import ConfigError, ConfigurationManager, config_manager
from timezone_scraper.core.exceptions import DownloadError, ParseError, WriteError
from timezone_scraper.core.logger import get_logger, setup_logging
from timezone_scraper.core.manager import ScrapingManager

logger = get_logger("timezone_scraper.cli")

# Escapes accepted for --delimiter, since a literal tab is awkward to type.
DELIMITER_ESCAPES = {"\\t": "\t", "tab": "\t"}


def parse_delimiter(value: str) -> str:
    delimiter = DELIMITER_ESCAPES.get(value, value)
    if len(delimiter) != 1:
        raise argparse.ArgumentTypeError(f"delimiter must be a single character, got {value!r}")
    return delimiter


def build_parser(config: ConfigurationManager, parents: Optional[List[argparse.ArgumentParser]] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timezone-scraper",
        description="Extract the CXone Studio timezone table into a delimited file and an array listing.",
        parents=parents or [],
    )
    parser.add_argument("--url", default=config.get("defaults.url"), help="CXone Studio Timezone documentation webpage")
    parser.add_argument("--csv", default=config.get("defaults.csv"), help="Output delimited file of all CXone Studio timezones")
    parser.add_argument(
        "--delimiter",
        type=parse_delimiter,
        default=config.get("defaults.delimiter", "\t"),
        help="Output file delimiter (a single character; '\\t' for tab)",
    )
    parser.add_argument("--txt", default=config.get("defaults.txt"), help="Output text file array of all CXone Studio timezones")
    parser.add_argument("--filter", default=config.get("defaults.filter"), help="Select appropriate webpage table by filtered keyword")
    parser.add_argument("--log-level", dest="log_level", help="Override the configured log level (e.g. DEBUG)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    env_parser = argparse.ArgumentParser(add_help=False)
    env_parser.add_argument("--env", help="Configuration environment to load (default: APP_ENV or development)")
    known, _ = env_parser.parse_known_args(argv)
    if known.env:
        try:
            config_manager.load_config(known.env)
        except ConfigError as e:
            print(f"Error loading configuration: {e}", file=sys.stderr)
            return 2

    parser = build_parser(config_manager, parents=[env_parser])
    args = parser.parse_args(argv)
    for option in ("url", "csv", "txt", "filter"):
        if getattr(args, option) is None:
            parser.error(f"--{option} is required: no default in the '{config_manager.current_environment}' configuration")

    setup_logging(config_manager, level_override=args.log_level)

    manager = ScrapingManager(config=config_manager)
    try:
        result = manager.run(args.url, args.csv, args.delimiter, args.txt, args.filter)
    except DownloadError as e:
        print(f"Error downloading HTML: {e.message}", file=sys.stderr)
        return 1
    except ParseError as e:
        print(f"Error extracting tables: {e.message}", file=sys.stderr)
        return 1
    except WriteError as e:
        print(f"Error writing tables to CSV: {e.message}", file=sys.stderr)
        return 1

    logger.info(
        "Kept %d of %d tables; wrote %d records to %s",
        result.tables_kept, result.tables_found, result.records_written, args.csv,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
