"""
Pictogram Parser

Collects the small certification/feature icons shown on a product page.
Icons come from three places that often overlap, so the result is
deduplicated:
- images inside the product details accordion
- any image whose file name ends in "_picto"
- images inside the product features section
"""

import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ...common.constants import BASE_URL
from ...common.text_utils import normalize_url

ACCORDION_SELECTOR = 'm-accordion[class*="b-product-details__accordion"]'

ICON_FILE_PATTERN = re.compile(r'\.(jpe?g|png|svg)(\?.*)?$', re.IGNORECASE)
PICTO_FILE_PATTERN = re.compile(r'_picto\.(jpe?g|png|svg)(\?.*)?$', re.IGNORECASE)
SECTION_IMAGE_PATTERN = re.compile(r'\.(svg|png|jpe?g)$', re.IGNORECASE)


class PictogramParser:
    """
    Parses pictogram icons from a product page.

    Usage:
        parser = PictogramParser(soup, features_section_elements(soup))
        icons = parser.extract_pictograms()
    """

    def __init__(self, soup: BeautifulSoup, section_elements: List[Tag], base_url: str = BASE_URL):
        """
        Initialize the pictogram parser.

        Args:
            soup: BeautifulSoup object of the page
            section_elements: Tags of the product features section
            base_url: Site base URL for root-relative image paths
        """
        self.soup = soup
        self.section_elements = section_elements
        self.base_url = base_url

    def extract_pictograms(self) -> List[str]:
        """
        Extract pictogram URLs.

        Returns:
            Absolute URLs, deduplicated, in first-seen order
        """
        sources = (
            self._from_accordion()
            + self._from_picto_names()
            + self._from_features_section()
        )

        urls = [normalize_url(src, self.base_url) for src in sources]
        return list(dict.fromkeys(url for url in urls if url))

    def _from_accordion(self) -> List[str]:
        found = []
        accordion = self.soup.select_one(ACCORDION_SELECTOR)
        if accordion:
            for img in accordion.find_all('img'):
                src = self._matching_source(img, ICON_FILE_PATTERN)
                if src:
                    found.append(src)
        return found

    def _from_picto_names(self) -> List[str]:
        found = []
        for img in self.soup.find_all('img'):
            src = self._matching_source(img, PICTO_FILE_PATTERN)
            if src:
                found.append(src)
        return found

    def _from_features_section(self) -> List[str]:
        found = []
        for element in self.section_elements:
            if element.name != 'img':
                continue
            src = element.get('src')
            if src and SECTION_IMAGE_PATTERN.search(src):
                found.append(src)
        return found

    @staticmethod
    def _matching_source(img: Tag, pattern: re.Pattern) -> Optional[str]:
        for attr in ('src', 'data-src'):
            value = img.get(attr)
            if value and pattern.search(value):
                return value
        return None
