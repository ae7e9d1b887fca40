"""
Printable card rendering.

Modules:
    card_renderer  - CardRenderer (records -> paginated HTML document)
    page_formats   - PageFormatProfile registry (compact, standard, dense)
    feature_filter - Attribute selection/exclusion rules
"""

from .card_renderer import CardRenderer, barcode_url
from .feature_filter import available_features, filter_attributes
from .page_formats import (
    DEFAULT_PAGE_FORMAT,
    PAGE_FORMATS,
    PageFormatProfile,
    get_page_format,
    get_supported_formats,
)

__all__ = [
    'CardRenderer',
    'barcode_url',
    'available_features',
    'filter_attributes',
    'PageFormatProfile',
    'PAGE_FORMATS',
    'DEFAULT_PAGE_FORMAT',
    'get_page_format',
    'get_supported_formats',
]
