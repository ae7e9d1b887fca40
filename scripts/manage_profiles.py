#!/usr/bin/env python3
"""
Feature Profile Management

Lists, shows and deletes saved feature profiles. Profiles are created
with generate_cards.py --save-profile. Also lists recently generated
documents.

Usage:
    python3 scripts/manage_profiles.py list
    python3 scripts/manage_profiles.py show drills
    python3 scripts/manage_profiles.py delete drills
    python3 scripts/manage_profiles.py recent
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
    parser = argparse.ArgumentParser(description="Manage saved feature profiles")
    parser.add_argument("command", choices=["list", "show", "delete", "recent"])
    parser.add_argument("name", nargs="?", help="Profile name (show/delete)")
    parser.add_argument("--data-dir", help="Data directory (default: settings / TECHCARDS_DATA_DIR)")
    parser.add_argument("--quiet", action="store_true", help="Show only warnings and errors")

    args = parser.parse_args()
    setup_logging(quiet=args.quiet)

    if args.command in ("show", "delete") and not args.name:
        parser.error(f"{args.command} needs a profile name")

    app = create_app(data_dir=args.data_dir)
    try:
        if args.command == "list":
            profiles = app.profiles.all()
            if not profiles:
                print("No saved profiles")
            for name, labels in sorted(profiles.items()):
                print(f"  {name} ({len(labels)} features)")

        elif args.command == "show":
            for label in app.profiles.get(args.name):
                print(f"  {label}")

        elif args.command == "delete":
            if app.profiles.delete(args.name):
                print(f"Deleted profile '{args.name}'")
            else:
                print(f"Profile '{args.name}' not found")
                sys.exit(1)

        elif args.command == "recent":
            for doc in app.archive.recent():
                print(f"  {doc['date']}  {doc['size']:>10}  {doc['filename']}")
    finally:
        app.close()


if __name__ == "__main__":
    main()
