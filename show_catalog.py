#!/usr/bin/env python3
"""
Show EONET categories with their recent events.

Usage:
    python show_catalog.py              # Events of the last 360 days
    python show_catalog.py 30           # Events of the last 30 days
    python show_catalog.py 30 --all     # List every event, not only the newest
    python show_catalog.py --debug      # Verbose logging
"""

import asyncio
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container  # noqa: E402
from eonet_client.categories import CategorySchema  # noqa: E402
from settings import DEFAULT_LOOKBACK_DAYS  # noqa: E402
from settings.logging import setup_logging  # noqa: E402

NEWEST_PER_CATEGORY = 3


async def load_catalog(days: int) -> list[CategorySchema]:
    """Fetch categories and events concurrently, then join them."""
    container.init()
    catalog = container.catalog
    _, events = await asyncio.gather(catalog.categories(), catalog.events(days))
    return await catalog.attach_events(events)


def print_catalog(categories: list[CategorySchema], days: int, show_all: bool = False) -> None:
    print("\n" + "=" * 60)
    print(f"EONET CATEGORIES (events of the last {days} days)")
    print("=" * 60)

    if not categories:
        print("\nNo categories available.\n")
        return

    for category in categories:
        print(f"\n{category.name} ({len(category.events)})")
        if category.description:
            print(f"  {category.description}")
        shown = category.events if show_all else category.events[-NEWEST_PER_CATEGORY:]
        for event in reversed(shown):
            status = "closed" if event.close_date else "open"
            print(f"  - {event.date:%Y-%m-%d} [{status}] {event.title}")

    print("\n" + "=" * 60 + "\n")


def main():
    args = sys.argv[1:]
    debug = "--debug" in args
    show_all = "--all" in args
    args = [a for a in args if a not in ("--debug", "--all")]

    if not args:
        days = DEFAULT_LOOKBACK_DAYS
    elif args[0].isdigit():
        days = int(args[0])
    else:
        print(__doc__)
        sys.exit(1)

    logger = setup_logging(level="DEBUG" if debug else "INFO", to_file=False)
    logger.info("Loading catalog for the last {} days", days)

    categories = asyncio.run(load_catalog(days))
    print_catalog(categories, days, show_all=show_all)


if __name__ == "__main__":
    main()
