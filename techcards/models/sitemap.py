"""
Sitemap cache data models.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SitemapShard:
    """
    Handle to one cached sitemap shard.

    The cache key is a one-way hash of the source URL, so handles
    enumerated from storage carry source_url=None.
    """
    cache_key: str
    cached_at: float
    source_url: Optional[str] = None
