"""
Persistent storage: blob stores, the sitemap shard cache, saved feature
profiles and the generated document archive.
"""

from .blob_store import BlobStore, FileBlobStore, MemoryBlobStore
from .document_archive import DocumentArchive, generate_filename
from .profile_store import ProfileStore
from .sitemap_cache import SitemapCache, cache_key_for, extract_locations

__all__ = [
    'BlobStore',
    'FileBlobStore',
    'MemoryBlobStore',
    'SitemapCache',
    'cache_key_for',
    'extract_locations',
    'ProfileStore',
    'DocumentArchive',
    'generate_filename',
]
