#!/usr/bin/env python3
"""
Sitemap Cache Refresh

Downloads every stale product sitemap shard into the local cache.

Usage:
    python3 scripts/refresh_sitemaps.py
    python3 scripts/refresh_sitemaps.py --data-dir /var/lib/techcards
"""

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from techcards.app import create_app
from techcards.common.log_config import setup_logging

load_dotenv(Path(__file__).parent.parent / ".env")


def main():
    parser = argparse.ArgumentParser(description="Refresh the product sitemap cache")
    parser.add_argument("--data-dir", help="Data directory (default: settings / TECHCARDS_DATA_DIR)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--quiet", action="store_true", help="Show only warnings and errors")

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    app = create_app(data_dir=args.data_dir)
    try:
        print("=" * 60)
        print("Sitemap Cache Refresh")
        print("=" * 60)
        print(f"  Index:  {app.cache.index_url}")

        refreshed = app.cache.refresh()
        cached = app.cache.list_cached()

        print(f"  Refreshed shards: {refreshed}")
        print(f"  Cached shards:    {len(cached)}")
    finally:
        app.close()


if __name__ == "__main__":
    main()
