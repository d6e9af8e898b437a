"""
CLI entry point for the Amazon affiliate link converter.

Converts a single Amazon product URL and prints the affiliate link,
optionally copying it to the clipboard.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from affiliate_converter.converter import AffiliateConverter, ConversionSuccess
from affiliate_converter.utils.clipboard import copy_to_clipboard
from affiliate_converter.utils.config_loader import get_affiliate_tag, load_config, load_env
from affiliate_converter.utils.logging_config import setup_logging


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed command line arguments.
    """
    parser = argparse.ArgumentParser(
        description="Amazon Affiliate Link Converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m affiliate_converter.main https://www.amazon.com/dp/B08N5WRWNW
    python -m affiliate_converter.main amazon.co.uk/gp/product/B07PGL2ZSL --copy
    python -m affiliate_converter.main https://amzn.to/B08N5WRWNW --json
        """,
    )

    parser.add_argument(
        "url",
        help="Amazon product URL to convert",
    )

    parser.add_argument(
        "--copy", "-C",
        action="store_true",
        help="Copy the affiliate link to the clipboard",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=Path("config/config.yaml"),
        help="Path to configuration file",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def run_cli(args: argparse.Namespace) -> int:
    """
    Run the conversion.

    Args:
        args: Parsed command line arguments.

    Returns:
        int: Exit code (0 for success, 1 if the URL could not be converted).
    """
    config = load_config(args.config)
    converter = AffiliateConverter(tag=get_affiliate_tag(config))

    result = converter.convert(args.url)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif isinstance(result, ConversionSuccess):
        print(f"\n✓ ASIN: {result.asin}")
        print(f"  Affiliate link: {result.affiliate_link}")
    else:
        print(f"\n✗ Error: {result.error}")

    if not isinstance(result, ConversionSuccess):
        return 1

    if args.copy:
        if asyncio.run(copy_to_clipboard(result.affiliate_link)):
            if not args.json:
                print("  Copied to clipboard.")
        else:
            logger.warning("Could not copy affiliate link to clipboard")
            if not args.json:
                print("  ⚠ Could not copy to clipboard.")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        int: Exit code.
    """
    load_env()

    args = parse_args(argv)

    log_level = "DEBUG" if args.verbose else "ERROR"
    setup_logging(level=log_level)

    try:
        return run_cli(args)
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.")
        return 130
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        print(f"\n✗ Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
