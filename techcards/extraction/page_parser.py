"""
Product Page Parser

Turns a fetched product page into a ProductRecord.

Every field has its own extractor and degrades to an empty/absent value
when the page doesn't match the known markup, so a page never fails to
parse. The reference falls back from the page sku to the lookup hint to
the digits of the page URL. Fetch failures are handled by the caller.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from bs4 import BeautifulSoup

from ..common.constants import BASE_URL, DEFAULT_FEATURE_LABEL, DEFAULT_TITLE
from ..common.text_utils import clean_text, reference_from_url
from ..models import ProductRecord
from .parsers import AttributeParser, ImageParser, PictogramParser, features_section_elements

logger = logging.getLogger(__name__)


class ProductPageParser:
    """
    Parses product pages of the retailer.

    Usage:
        parser = ProductPageParser(image_checker=fetcher.image_exists)
        record = parser.parse(html, url, "123456")
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        image_checker: Optional[Callable[[str], bool]] = None,
        feature_label: str = DEFAULT_FEATURE_LABEL,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the page parser.

        Args:
            base_url: Site base URL for root-relative links
            image_checker: Verifies reference-based photo candidates (None = accept)
            feature_label: Label for feature list items without "label:" prefix
            clock: Source of the print timestamp
        """
        self.base_url = base_url
        self.image_checker = image_checker
        self.feature_label = feature_label
        self.clock = clock

    def parse(self, html: str, source_url: str, reference_hint: str) -> ProductRecord:
        """
        Extract a product record from page HTML.

        Args:
            html: Raw page HTML
            source_url: URL the page was fetched from
            reference_hint: Reference the page was looked up by

        Returns:
            ProductRecord (optional fields absent when not found)

        Raises:
            ValueError: If the page has no sku and both reference_hint and
                source_url are blank
        """
        soup = BeautifulSoup(html or "", "lxml")
        section = self._safe("features section", lambda: features_section_elements(soup), [])

        images = ImageParser(soup, reference_hint, self.base_url, self.image_checker)
        pictograms = PictogramParser(soup, section, self.base_url)
        attributes = AttributeParser(soup, section, self.feature_label)

        record = ProductRecord(
            title=self._safe("title", lambda: self.extract_title(soup), DEFAULT_TITLE),
            reference=self._resolve_reference(soup, source_url, reference_hint),
            source_url=source_url,
            primary_image=self._safe("primary image", images.extract_primary_image, None),
            brand_image=self._safe("brand image", images.extract_brand_image, None),
            pictograms=self._safe("pictograms", pictograms.extract_pictograms, []),
            attributes=self._safe("attributes", attributes.extract_attributes, []),
            print_timestamp=self.clock(),
        )

        logger.debug(
            "Parsed %s: %d attributes, %d pictograms, image=%s",
            record.reference, len(record.attributes), len(record.pictograms),
            "yes" if record.primary_image else "no",
        )
        return record

    def _resolve_reference(self, soup: BeautifulSoup, source_url: str, reference_hint: str) -> str:
        """Page sku first, then the lookup hint, then the digits of the page URL."""
        reference = self._safe("reference", lambda: self.extract_reference(soup), "")
        reference = reference or (reference_hint or "").strip() or reference_from_url(source_url)
        if not reference:
            raise ValueError("No product reference: page has no sku and no hint or URL was given")
        return reference

    @staticmethod
    def extract_title(soup: BeautifulSoup) -> str:
        """Return the first <h1> text, or the default title."""
        h1 = soup.find('h1')
        if h1:
            title = clean_text(h1.get_text())
            if title:
                return title
        return DEFAULT_TITLE

    @staticmethod
    def extract_reference(soup: BeautifulSoup) -> str:
        """Return the reference published in the page's schema.org sku, if any."""
        element = soup.select_one('[itemprop="sku"]')
        if element is None:
            return ""
        return clean_text(element.get('content') or element.get_text())

    @staticmethod
    def _safe(field: str, extractor: Callable, default):
        """Run one field extractor; unexpected markup yields the default."""
        try:
            return extractor()
        except (AttributeError, TypeError, ValueError, KeyError) as e:
            logger.warning("Could not extract %s: %s: %s", field, type(e).__name__, e)
            return default

