"""
Product Image Parser

Extracts the main product photo and the brand logo.

Both are ordered fallback chains: each stage is a pure function
(soup, reference) -> candidate URLs, evaluated left to right, and the
first accepted candidate wins. Stages whose pattern embeds the reference
are verified against the server before acceptance; a rejected candidate
falls through to the next stage. The generic carousel stages are
accepted unverified because they can't point at another product's image.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from bs4 import BeautifulSoup

from ...common.constants import BASE_URL
from ...common.text_utils import normalize_url, strip_query

logger = logging.getLogger(__name__)

IMAGE_SOURCE_ATTRS = ('src', 'data-src')
RASTER_IMAGE_PATTERN = re.compile(r'\.(jpe?g|png|gif)$', re.IGNORECASE)


@dataclass(frozen=True)
class ImageStage:
    """One step of an image fallback chain."""
    name: str
    candidates: Callable[[BeautifulSoup, str], List[str]]
    verify: bool = False


def _reference_pictures(suffix: str) -> Callable[[BeautifulSoup, str], List[str]]:
    """Build a stage matching image URLs with the reference and a picture suffix."""

    def candidates(soup: BeautifulSoup, reference: str) -> List[str]:
        if not reference:
            return []

        pattern = re.compile(re.escape(reference) + r'.*' + re.escape(suffix), re.IGNORECASE)
        found = []

        for img in soup.find_all('img'):
            for attr in IMAGE_SOURCE_ATTRS:
                value = img.get(attr)
                if value and pattern.search(value):
                    found.append(strip_query(value))
                    break

        for div in soup.find_all('div', attrs={'data-image': True}):
            value = div.get('data-image')
            if value and pattern.search(value):
                found.append(strip_query(value))

        return found

    return candidates


def _carousel_slides(soup: BeautifulSoup, reference: str) -> List[str]:
    found = []

    for img in soup.select('img.b-product-carousel__main-slide.swiper-slide'):
        for attr in IMAGE_SOURCE_ATTRS:
            value = img.get(attr)
            if value and RASTER_IMAGE_PATTERN.search(value):
                found.append(value)
                break

    for img in soup.select('div[class*="b-product-carousel__main-slide-image"] img'):
        value = img.get('src')
        if value and RASTER_IMAGE_PATTERN.search(value):
            found.append(value)

    for img in soup.select('img[class*="main-slide"]'):
        value = img.get('src')
        if value:
            found.append(value)

    return found


def _brand_image(soup: BeautifulSoup, reference: str) -> List[str]:
    found = []

    for img in soup.select('img[class*="b-product-carousel__main-brand-image"]'):
        found.extend(img.get(attr) for attr in IMAGE_SOURCE_ATTRS if img.get(attr))

    for img in soup.select('div[class*="b-product-carousel__main-brand"] img'):
        if img.get('src'):
            found.append(img.get('src'))

    for img in soup.select('img[class*="brand-image"]'):
        found.extend(img.get(attr) for attr in IMAGE_SOURCE_ATTRS if img.get(attr))

    return found


PRIMARY_IMAGE_STAGES = [
    ImageStage('reference picture', _reference_pictures('_picture.jpeg'), verify=True),
    ImageStage('reference picture 01', _reference_pictures('_picture_01.jpeg'), verify=True),
    ImageStage('carousel slide', _carousel_slides),
]

BRAND_IMAGE_STAGES = [
    ImageStage('brand logo', _brand_image),
]


class ImageParser:
    """
    Parses product imagery from a product page.

    Usage:
        parser = ImageParser(soup, "123456", image_checker=fetcher.image_exists)
        photo = parser.extract_primary_image()
        logo = parser.extract_brand_image()
    """

    def __init__(
        self,
        soup: BeautifulSoup,
        reference: str,
        base_url: str = BASE_URL,
        image_checker: Optional[Callable[[str], bool]] = None,
    ):
        """
        Initialize the image parser.

        Args:
            soup: BeautifulSoup object of the page
            reference: Reference number embedded in the product's image names
            base_url: Site base URL for root-relative image paths
            image_checker: Callable returning True if an image URL answers 200;
                None disables verification
        """
        self.soup = soup
        self.reference = reference
        self.base_url = base_url
        self.image_checker = image_checker

    def extract_primary_image(self) -> Optional[str]:
        """Return the main product photo URL, or None."""
        return self._run_chain(PRIMARY_IMAGE_STAGES)

    def extract_brand_image(self) -> Optional[str]:
        """Return the brand logo URL, or None."""
        return self._run_chain(BRAND_IMAGE_STAGES)

    def _run_chain(self, stages: List[ImageStage]) -> Optional[str]:
        rejected = set()
        for stage in stages:
            for candidate in stage.candidates(self.soup, self.reference):
                url = normalize_url(candidate, self.base_url)
                if not url or url in rejected:
                    continue
                if stage.verify and not self._verify(url):
                    rejected.add(url)
                    logger.debug("Rejected %s candidate %s", stage.name, url)
                    continue
                logger.debug("Image from %s stage: %s", stage.name, url)
                return url
        return None

    def _verify(self, url: str) -> bool:
        if self.image_checker is None:
            return True
        return self.image_checker(url)
