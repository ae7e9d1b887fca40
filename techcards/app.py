"""
Application wiring

Builds the fetcher, stores, cache, locator, parser, batch extractor and
renderer from settings, the way the command-line scripts need them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .common.config_loader import load_excluded_features, load_settings
from .common.http_client import HttpFetcher
from .discovery import ProductLocator
from .extraction import BatchExtractor, ProductPageParser
from .rendering import CardRenderer
from .storage import DocumentArchive, FileBlobStore, ProfileStore, SitemapCache

DATA_DIR_ENV = "TECHCARDS_DATA_DIR"


@dataclass
class Application:
    """All collaborators of one run."""
    settings: Dict[str, Any]
    fetcher: HttpFetcher
    cache: SitemapCache
    locator: ProductLocator
    extractor: BatchExtractor
    renderer: CardRenderer
    profiles: ProfileStore
    archive: DocumentArchive
    output_dir: Path

    def close(self) -> None:
        self.fetcher.close()


def resolve_data_dir(settings: Dict[str, Any], data_dir: Optional[str] = None) -> Path:
    """Pick the data directory: explicit argument, then environment, then settings."""
    return Path(data_dir or os.getenv(DATA_DIR_ENV) or settings['data_dir'])


def create_app(data_dir: Optional[str] = None, settings: Optional[Dict[str, Any]] = None) -> Application:
    """
    Build the application from settings.yaml.

    Args:
        data_dir: Override for the data directory
        settings: Pre-loaded settings (default: load_settings())

    Layout under the data directory:
        sitemap_cache/    one file per sitemap shard
        generated_files/  generated card documents
        profiles.json     saved feature profiles
    """
    settings = settings or load_settings()
    root = resolve_data_dir(settings, data_dir)

    fetcher = HttpFetcher(
        timeout=settings['request_timeout'],
        min_interval=settings['request_interval'],
    )
    cache = SitemapCache(
        FileBlobStore(root / "sitemap_cache"),
        fetcher,
        index_url=settings['sitemap_index_url'],
        ttl=settings['cache_ttl_seconds'],
    )
    locator = ProductLocator(cache, fetcher)
    parser = ProductPageParser(base_url=settings['base_url'], image_checker=fetcher.image_exists)
    output_dir = root / "generated_files"

    return Application(
        settings=settings,
        fetcher=fetcher,
        cache=cache,
        locator=locator,
        extractor=BatchExtractor(locator, fetcher, parser),
        renderer=CardRenderer(load_excluded_features()),
        profiles=ProfileStore(FileBlobStore(root)),
        archive=DocumentArchive(FileBlobStore(output_dir), max_files=settings['max_generated_files']),
        output_dir=output_dir,
    )
