#!/usr/bin/env python3
"""
CLI script for generating date-range filter expressions
"""

import sys
import logging
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import Config
from src.date_range import InvalidPeriodError, format_filter_range
from src.exporters import EXPORTER_MAP, get_exporter
from src.processors import PeriodProcessor
from src.utils import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate date-range filter expressions for a calendar period",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Filter for a single day in JST
  python scripts/generate_filter.py 2023-06-08

  # Whole month in UTC on a custom field
  python scripts/generate_filter.py 2020-12 --offset 0 --field createdAt

  # Last 7 days up to and including 2023-06-08
  python scripts/generate_filter.py 2023-06-08 --range 7

  # Per-month filters for 2023, exported as JSON
  python scripts/generate_filter.py 2023 --breakdown --format json
        """
    )

    parser.add_argument(
        'period',
        help='Calendar period: YYYY, YYYY-MM or YYYY-MM-DD'
    )

    parser.add_argument(
        '--field',
        type=str,
        help='Field to filter on (default: DATE_RANGE_FIELD or publishedAt)'
    )

    parser.add_argument(
        '--range',
        type=int,
        help='Number of periods in the window (default: DATE_RANGE_RANGE or 1)'
    )

    parser.add_argument(
        '--offset',
        type=int,
        help='Timezone offset in hours (default: DATE_RANGE_TIMEZONE_OFFSET or 9)'
    )

    parser.add_argument(
        '--breakdown',
        action='store_true',
        help='Also generate one filter per day (or month, for years) and export them'
    )

    parser.add_argument(
        '--format',
        choices=sorted(EXPORTER_MAP),
        default='csv',
        help='Breakdown export format (default: csv)'
    )

    parser.add_argument(
        '--output',
        type=str,
        help='Breakdown output file (default: reports/filter_breakdown_<period>.<format>)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for CLI"""

    args = build_parser().parse_args(argv)

    log_level = "DEBUG" if args.verbose else "WARNING"
    setup_logging(level=log_level, verbose=args.verbose)

    try:
        config = Config.from_env()
        if args.field is not None:
            config.filter.field_name = args.field
        if args.range is not None:
            config.filter.range = args.range
        if args.offset is not None:
            config.filter.timezone_offset = args.offset
        config.export.format = args.format
        config.validate()

        options = config.filter.to_range_options()
        field_name = config.filter.field_name

        if not args.breakdown:
            print(format_filter_range(field_name, args.period, options))
            return 0

        breakdown = PeriodProcessor(options).process(field_name, args.period)
        print(breakdown.expression)
        for entry in breakdown.entries:
            print(f"{entry.label}\t{entry.expression}")

        output = args.output or str(
            Path(config.export.output_dir) / config.export.get_filename(breakdown.period.label)
        )
        path = get_exporter(config.export.format, Path(output)).export(breakdown)
        logger.info(f"Breakdown exported to {path}")
        return 0

    except InvalidPeriodError as e:
        logger.error(f"Invalid period '{args.period}': {e}")
        return 1
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
