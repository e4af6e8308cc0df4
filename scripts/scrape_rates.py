#!/usr/bin/env python3
"""
Hotel Rate Snapshot - lowest nightly rate in Kondapur, Hyderabad

Loads each booking site's search page for today -> tomorrow (2 adults,
1 room), picks the lowest rupee-like number from the rendered text and
writes every site's result to a single JSON snapshot.

Meant to be run by a scheduler (e.g. a periodic CI job that commits
rates.json).

Usage:
    python scripts/scrape_rates.py
    python scripts/scrape_rates.py -o data/rates.json
    python scripts/scrape_rates.py --sites booking,oyo --headed

Requirements:
    pip install playwright
    playwright install chromium
"""

import argparse
import asyncio
import sys

try:
    import playwright  # noqa: F401
except ImportError:
    print("Playwright not installed. Run: pip install playwright && playwright install chromium")
    sys.exit(1)

from hotelrates.errors import SerializationError
from hotelrates.registry import get_available_targets, get_targets, load_source_config
from hotelrates.runner import date_window, run


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Scrape lowest hotel rates into a JSON snapshot")
    parser.add_argument("-o", "--output", default="rates.json", help="Output JSON file (default: rates.json)")
    parser.add_argument(
        "--sites",
        help=f"Comma-separated site keys (default: all of {', '.join(get_available_targets())})",
    )
    parser.add_argument("--config", help="Per-site tunables file (default: data/rate-sources.json)")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    args = parse_args(argv)

    keys = [k.strip() for k in args.sites.split(",") if k.strip()] if args.sites else None
    config = load_source_config(args.config) if args.config else None
    try:
        targets = get_targets(keys, config=config)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    window = date_window()
    print(f"Check-in: {window.checkin}  Check-out: {window.checkout}")
    print(f"Sites: {', '.join(t.key for t in targets)}")
    print(f"Output: {args.output}")
    print()

    try:
        snapshot = await run(
            args.output, targets=targets, headless=not args.headed, window=window
        )
    except SerializationError as e:
        print(f"Error: {e}")
        return 1

    cheapest = snapshot.cheapest
    if cheapest:
        print(f"\nCheapest: ₹{cheapest.price:,} on {cheapest.name}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
