#!/usr/bin/env python3
"""
Technical Card Generation

Looks up products by reference number (or product URL), extracts their
technical data and writes a printable HTML document with one card per
product.

Usage:
    python3 scripts/generate_cards.py 123456 654321
    python3 scripts/generate_cards.py --input refs.txt --format dense
    python3 scripts/generate_cards.py 123456 --list-features
    python3 scripts/generate_cards.py 123456 --features "Moc,Waga" --save-profile drills
    python3 scripts/generate_cards.py 123456 --profile drills
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from techcards.app import create_app
from techcards.common.log_config import setup_logging
from techcards.extraction import parse_reference_input
from techcards.rendering import get_supported_formats
from techcards.storage import generate_filename

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger(__name__)


def read_references(args) -> list:
    """Collect references from positional arguments and the input file."""
    text = " ".join(args.references)
    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            text += "\n" + f.read()
    return parse_reference_input(text)


def print_summary(result) -> None:
    print("\n" + "=" * 60)
    print("Lookup Summary")
    print("=" * 60)
    print(f"  Found:   {len(result.records)}")
    print(f"  Failed:  {len(result.failures)}")
    for failure in result.failures:
        print(f"     - {failure.reference}: {failure.reason}")


def main():
    parser = argparse.ArgumentParser(description="Generate printable technical data cards")
    parser.add_argument(
        "references",
        nargs="*",
        help="Reference numbers or product URLs"
    )
    parser.add_argument(
        "--input", "-i",
        help="File with references (whitespace, comma or newline separated)"
    )
    parser.add_argument(
        "--format", "-f",
        choices=get_supported_formats(),
        help="Page format (default from config/settings.yaml)"
    )
    parser.add_argument(
        "--features",
        help="Comma-separated attribute labels to show (default: all except excluded)"
    )
    parser.add_argument(
        "--profile", "-p",
        help="Use the feature selection saved under this profile name"
    )
    parser.add_argument(
        "--save-profile",
        help="Save the --features selection under this profile name"
    )
    parser.add_argument(
        "--list-features",
        action="store_true",
        help="Only list the attribute labels found for the products"
    )
    parser.add_argument(
        "--data-dir",
        help="Data directory for caches, profiles and output (default: settings / TECHCARDS_DATA_DIR)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    references = read_references(args)
    if not references:
        parser.error("Provide at least one reference number or product URL")

    app = create_app(data_dir=args.data_dir)
    try:
        result = app.extractor.process(references)
        print_summary(result)

        if not result.success:
            print("\nNo products found. Check the reference numbers.")
            sys.exit(1)

        if args.list_features:
            print(f"\nAvailable features ({len(result.available_features)}):")
            for label in result.available_features:
                print(f"  {label}")
            return

        selection = None
        if args.profile:
            if args.profile not in app.profiles.all():
                parser.error(f"Unknown profile: {args.profile}")
            selection = app.profiles.get(args.profile)
            print(f"\nProfile '{args.profile}': {len(selection)} features")
        if args.features is not None:
            selection = [label.strip() for label in args.features.split(",") if label.strip()]

        if args.save_profile:
            if selection is None:
                parser.error("--save-profile needs --features or --profile")
            if app.profiles.set(args.save_profile, selection):
                print(f"Saved profile '{args.save_profile}'")

        page_format = args.format or app.settings['default_page_format']
        document = app.renderer.render(result.records, selection, page_format)

        filename = generate_filename(result.found_references)
        if not app.archive.save(filename, document):
            print("\nCould not write the document.")
            sys.exit(1)

        print(f"\nDocument ({page_format}): {app.output_dir / filename}")
    finally:
        app.close()


if __name__ == "__main__":
    main()
