"""
Product Locator

Resolves a retailer reference number to its product page URL by
searching the sitemap shards: first the cached copies, then a live
pass over the sitemap index when the cache has no match.
"""

import logging
from typing import Optional

from ..storage.sitemap_cache import SitemapCache, extract_locations

logger = logging.getLogger(__name__)


def search_content(xml: Optional[str], reference: str) -> Optional[str]:
    """
    Find the first <loc> URL containing the reference.

    Args:
        xml: Raw sitemap shard text
        reference: Literal, case-sensitive substring to look for

    Returns:
        Matching URL, or None
    """
    if not xml or not reference or reference not in xml:
        return None

    for location in extract_locations(xml):
        if reference in location:
            return location.strip()

    return None


class ProductLocator:
    """
    Finds product URLs in the retailer's sitemaps.

    Usage:
        locator = ProductLocator(cache, fetcher)
        url = locator.locate("123456")
    """

    def __init__(self, cache: SitemapCache, fetcher):
        """
        Initialize the locator.

        Args:
            cache: Sitemap shard cache
            fetcher: Object with fetch(url) -> Optional[str], used for the live pass
        """
        self.cache = cache
        self.fetcher = fetcher

    def locate(self, reference: str) -> Optional[str]:
        """
        Resolve a reference to a product URL.

        Args:
            reference: Retailer reference number

        Returns:
            Product URL, or None if no sitemap lists it
        """
        reference = reference.strip() if reference else ""
        if not reference:
            return None

        # Best effort: a failed refresh still leaves the old cache usable
        if not self.cache.ensure_fresh():
            logger.warning("Sitemap cache could not be refreshed, using cached shards")

        url = self._search_cached(reference)
        if url:
            logger.debug("Found %s in cached sitemaps: %s", reference, url)
            return url

        logger.info("Reference %s not in cached sitemaps, searching online...", reference)
        return self._search_online(reference)

    def _search_cached(self, reference: str) -> Optional[str]:
        for shard in self.cache.list_cached():
            url = search_content(self.cache.read_content(shard), reference)
            if url:
                return url
        return None

    def _search_online(self, reference: str) -> Optional[str]:
        locations = self.cache.index_locations()
        if not locations:
            return None

        for shard_url in locations:
            content = self.fetcher.fetch(shard_url)
            if not content:
                logger.warning("Skipping unavailable sitemap shard %s", shard_url)
                continue

            url = search_content(content, reference)
            if url:
                # Next lookup of a product from the same shard hits the cache
                self.cache.store_shard(shard_url, content)
                logger.debug("Found %s in live sitemap %s: %s", reference, shard_url, url)
                return url

        logger.info("Reference %s not found in any sitemap", reference)
        return None
