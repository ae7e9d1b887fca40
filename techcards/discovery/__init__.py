"""
Product URL discovery from the retailer's sitemaps.

Modules:
    product_locator - ProductLocator (reference number -> product URL)
"""

from .product_locator import ProductLocator, search_content

__all__ = [
    'ProductLocator',
    'search_content',
]
