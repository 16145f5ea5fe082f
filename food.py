"""
Prints today's cafeteria menu to the terminal

Usage:
    food            short summary (dish names only)
    food --long     dish names with prices
"""
import argparse
import logging
import sys

from presenter.presenter import DisplayMode, present
from scraper.errors import MenuError
from scraper.scraper import MenuScraper

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    """Configure logging on stderr, stdout carries only the menu"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="food",
        usage="food [options]",
        description="Show today's cafeteria menu",
    )
    parser.add_argument(
        "-s", "--short",
        dest="mode",
        action="store_const",
        const=DisplayMode.SHORT,
        help="Prints short summary of todays menu (default)",
    )
    parser.add_argument(
        "-l", "--long",
        dest="mode",
        action="store_const",
        const=DisplayMode.LONG,
        help="Prints formatted summary of todays menu, prices included",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log fetch and parsing details to stderr",
    )
    parser.set_defaults(mode=DisplayMode.SHORT)
    return parser


def main(argv=None, scraper=None):
    """
    Run the CLI

    Args:
        argv: Argument list (sys.argv[1:] if None)
        scraper: MenuScraper to use (a default one if None)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    scraper = scraper or MenuScraper()

    try:
        page = scraper.scrape_menu()
    except MenuError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    present(page.date, page.items, args.mode)
    return 0


if __name__ == "__main__":
    sys.exit(main())
