"""
Specialized parsers for product page extraction.

Each parser handles one part of the page:
- ImageParser: main product photo and brand logo
- PictogramParser: certification/feature icons
- AttributeParser: technical label/value attributes
- sections: locating the "product features" section
"""

from .attribute_parser import AttributeParser
from .image_parser import BRAND_IMAGE_STAGES, PRIMARY_IMAGE_STAGES, ImageParser, ImageStage
from .pictogram_parser import PictogramParser
from .sections import features_section_elements, find_features_heading

__all__ = [
    'AttributeParser',
    'ImageParser',
    'ImageStage',
    'PRIMARY_IMAGE_STAGES',
    'BRAND_IMAGE_STAGES',
    'PictogramParser',
    'features_section_elements',
    'find_features_heading',
]
