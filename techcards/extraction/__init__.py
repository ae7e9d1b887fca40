"""
Product extraction modules.

Modules:
    page_parser     - ProductPageParser (product page HTML -> ProductRecord)
    batch_extractor - BatchExtractor (reference list -> records and failures)
    parsers         - Specialized parsers for images, pictograms and attributes
"""

from .batch_extractor import BatchExtractor, parse_reference_input, reference_from_url
from .page_parser import ProductPageParser
from .parsers import AttributeParser, ImageParser, PictogramParser

__all__ = [
    'ProductPageParser',
    'BatchExtractor',
    'parse_reference_input',
    'reference_from_url',
    'AttributeParser',
    'ImageParser',
    'PictogramParser',
]
