"""
Beautiful Dogs - console entry point.

Boots logging and the application session, then reports what was loaded.

Usage:
    python -m beautiful_dogs
    python -m beautiful_dogs --config settings.json list
"""
import argparse
from typing import List, Optional

from loguru import logger

from beautiful_dogs.core.config import ConfigManager
from beautiful_dogs.core.locator import sl
from beautiful_dogs.core.logging import setup_logging
from beautiful_dogs.ui.viewmodels import OrdersViewModel


def list_catalog(locator) -> int:
    """Print every catalog item with its kind and asset status."""
    catalog = locator.catalog
    print(f"Media folder: {catalog.directory}")
    print(f"Found {len(catalog)} items ({len(catalog.images)} images, {len(catalog.videos)} videos)")

    for i, item in enumerate(catalog, 1):
        path = catalog.resolve_path(item)
        status = path if path else catalog.placeholder_text(item)
        print(f"  {i}. {item.identifier} [{item.kind.value}] {status}")
    return len(catalog)


def show_summary(locator) -> None:
    orders = OrdersViewModel(locator.cart, locator)
    print(f"Catalog items: {len(locator.catalog)}")
    print(f"Cart badge: {orders.badge_text or '-'} (total {orders.total})")
    print(f"Supabase client: {'configured' if locator.supabase else 'not configured'}")
    orders.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="beautiful_dogs",
        description="Beautiful Dogs - media catalog and cart",
    )
    parser.add_argument("--config", default="config.json", help="Path to config.json or .toml")

    subparsers = parser.add_subparsers(dest="command", help="Commands")
    subparsers.add_parser("list", help="List the media catalog")
    subparsers.add_parser("summary", help="Show catalog and cart summary")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Logging first so config load errors are visible
    general = ConfigManager(args.config).data.general
    setup_logging(debug_mode=general.debug_mode, log_dir=general.log_dir)

    sl.init(args.config)
    try:
        if args.command == "list":
            list_catalog(sl)
        else:
            show_summary(sl)
    except Exception as e:
        logger.exception(f"Command failed: {e}")
        return 2
    return 0
