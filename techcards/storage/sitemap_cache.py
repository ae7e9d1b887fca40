"""
Sitemap Cache

Keeps a local copy of every product sitemap shard listed in the
retailer's sitemap index, so product lookups don't download several
megabytes of XML each time.

Staleness is tracked per shard: one broken shard download leaves the
other shards' cached copies usable.
"""

from __future__ import annotations

import hashlib
import html
import logging
import re
import time
from typing import Callable, List, Optional

from ..common.constants import CACHE_TTL_SECONDS, SITEMAP_INDEX_URL
from ..models import SitemapShard
from .blob_store import BlobStore

logger = logging.getLogger(__name__)

# Only <loc> leaf values are needed, a regex scan is enough
LOC_PATTERN = re.compile(r'<loc>\s*(.*?)\s*</loc>', re.DOTALL)

SHARD_PREFIX = "sitemap_"


def extract_locations(xml: str) -> List[str]:
    """
    Extract all <loc> values from sitemap XML.

    Args:
        xml: Raw sitemap or sitemap index text

    Returns:
        Location URLs in document order, XML entities decoded
    """
    if not xml:
        return []
    return [html.unescape(loc) for loc in LOC_PATTERN.findall(xml) if loc]


def cache_key_for(url: str) -> str:
    """Return the stable storage name for a shard URL."""
    return f"{SHARD_PREFIX}{hashlib.md5(url.encode('utf-8')).hexdigest()}.xml"


class SitemapCache:
    """
    Time-based cache of sitemap shards on top of a BlobStore.

    Usage:
        cache = SitemapCache(FileBlobStore("data/sitemap_cache"), fetcher)
        cache.ensure_fresh()
        for shard in cache.list_cached():
            xml = cache.read_content(shard)
    """

    def __init__(
        self,
        store: BlobStore,
        fetcher,
        index_url: str = SITEMAP_INDEX_URL,
        ttl: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the cache.

        Args:
            store: Blob storage for shard contents
            fetcher: Object with fetch(url) -> Optional[str]
            index_url: URL of the sitemap index
            ttl: Maximum shard age in seconds before it is refreshed
            clock: Time source (seconds since epoch)
        """
        self.store = store
        self.fetcher = fetcher
        self.index_url = index_url
        self.ttl = ttl
        self.clock = clock

    def is_stale(self, url: str) -> bool:
        """Return True if the shard is missing or older than the TTL."""
        cached_at = self.store.mtime(cache_key_for(url))
        if cached_at is None:
            return True
        return self._is_expired(cached_at)

    def _is_expired(self, cached_at: float) -> bool:
        return self.clock() - cached_at > self.ttl

    def store_shard(self, url: str, content: str) -> bool:
        """
        Save shard content, replacing any previous copy.

        Returns:
            True on success, False if the write failed
        """
        key = cache_key_for(url)
        try:
            self.store.write_text(key, content)
        except OSError as e:
            logger.error("Could not write sitemap cache %s for %s: %s", key, url, e)
            return False

        logger.debug("Cached sitemap %s as %s", url, key)
        return True

    def list_cached(self) -> List[SitemapShard]:
        """Return handles for all cached shards, sorted by cache key."""
        shards = []
        for key in self.store.list(SHARD_PREFIX):
            cached_at = self.store.mtime(key)
            if cached_at is not None:
                shards.append(SitemapShard(cache_key=key, cached_at=cached_at))
        return shards

    def read_content(self, shard: SitemapShard) -> Optional[str]:
        """Return a cached shard's XML, or None if it can't be read."""
        try:
            return self.store.read_text(shard.cache_key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read cached sitemap %s: %s", shard.cache_key, e)
            return None

    def index_locations(self) -> Optional[List[str]]:
        """
        Fetch the sitemap index and list its shard URLs.

        Returns:
            Shard URLs, or None if the index could not be fetched
        """
        index_content = self.fetcher.fetch(self.index_url)
        if not index_content:
            logger.error("Could not fetch sitemap index %s", self.index_url)
            return None

        locations = extract_locations(index_content)
        logger.debug("Sitemap index lists %d shards", len(locations))
        return locations

    def refresh(self) -> int:
        """
        Download every stale shard listed in the index.

        Returns:
            Number of shards refreshed (0 if the index is unavailable)
        """
        locations = self.index_locations()
        if not locations:
            return 0

        updated_count = 0
        for shard_url in locations:
            if not self.is_stale(shard_url):
                continue

            content = self.fetcher.fetch(shard_url)
            if not content:
                logger.warning("Could not download sitemap shard %s", shard_url)
                continue

            if self.store_shard(shard_url, content):
                updated_count += 1

        logger.info("Refreshed %d of %d sitemap shards", updated_count, len(locations))
        return updated_count

    def ensure_fresh(self) -> bool:
        """
        Make sure the cache is populated and not older than the TTL.

        Bootstraps the cache when it is empty and refreshes stale shards
        otherwise. A failed refresh leaves the existing cache untouched.

        Returns:
            True if the cache is fresh or at least one shard was refreshed
        """
        cached = self.list_cached()
        if not cached:
            logger.info("Sitemap cache empty, downloading shards...")
            return self.refresh() > 0

        if any(self._is_expired(shard.cached_at) for shard in cached):
            logger.info("Sitemap cache stale, refreshing...")
            return self.refresh() > 0

        return True
