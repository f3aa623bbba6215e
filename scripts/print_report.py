#!/usr/bin/env python3
"""Script to load the LEGO set collection and print the query report."""

import argparse
import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from brickset.infrastructure.json_repository import LegoSetRepository, LoadError
from brickset.application.lego_set_service import LegoSetService
from brickset.application.report import DEFAULT_MAX_TAGS, DEFAULT_PREFIX, write_report

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Print a report over the LEGO set collection.")
    parser.add_argument("--data-dir", help="Directory containing brickset.json (defaults to the bundled data)")
    parser.add_argument("--prefix", default=DEFAULT_PREFIX, help="Name prefix to search for")
    parser.add_argument("--max-tags", type=int, default=DEFAULT_MAX_TAGS, help="Maximum number of tags")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Load the sets and print every report section to stdout."""
    args = parse_args(argv)

    # Logging goes to stderr, stdout carries only the report
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        repository = LegoSetRepository(data_dir=args.data_dir)
    except LoadError as e:
        logger.error(f"Loading LEGO sets failed: {e}")
        return 1

    service = LegoSetService(repository)
    write_report(service, sys.stdout, prefix=args.prefix, max_tags=args.max_tags)
    return 0


if __name__ == "__main__":
    sys.exit(main())
