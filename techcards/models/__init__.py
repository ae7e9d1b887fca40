"""
Data models for product lookup, extraction and rendering.

This module contains pure data classes with no business logic.
"""

from .batch import BatchFailure, BatchResult
from .product import AttributeEntry, ProductError, ProductRecord
from .sitemap import SitemapShard

__all__ = [
    'AttributeEntry',
    'ProductRecord',
    'ProductError',
    'SitemapShard',
    'BatchFailure',
    'BatchResult',
]
