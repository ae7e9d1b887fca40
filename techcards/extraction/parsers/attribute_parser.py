"""
Technical Attribute Parser

Extracts label/value attribute pairs from a product page.

Tries, in order, and keeps the first non-empty result:
1. List items of the "product features" section ("Label: value")
2. The first specification container on the page (table rows or
   spec-name/spec-value blocks)

Labels and values are whitespace-normalized and HTML-escaped.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ...common.constants import DEFAULT_FEATURE_LABEL
from ...common.text_utils import clean_text, escape_text
from ...models import AttributeEntry
from .sections import top_level_items

logger = logging.getLogger(__name__)

SPECIFICATION_CONTAINERS = [
    'div[class*="product-specifications"]',
    'table[class*="data-table"]',
    'div[class*="specification"]',
]
SPECIFICATION_ITEM_CLASS = 'specification-item'


class AttributeParser:
    """
    Parses technical attributes from a product page.

    Usage:
        parser = AttributeParser(soup, features_section_elements(soup))
        attributes = parser.extract_attributes()
    """

    def __init__(
        self,
        soup: BeautifulSoup,
        section_elements: List[Tag],
        feature_label: str = DEFAULT_FEATURE_LABEL,
    ):
        """
        Initialize the attribute parser.

        Args:
            soup: BeautifulSoup object of the page
            section_elements: Tags of the product features section
            feature_label: Label used for list items without a "label:" prefix
        """
        self.soup = soup
        self.section_elements = section_elements
        self.feature_label = feature_label

    def extract_attributes(self) -> List[AttributeEntry]:
        """
        Extract attributes using the first strategy that finds any.

        Returns:
            Attributes in page order (may be empty)
        """
        attributes = self._from_feature_list()
        if attributes:
            return attributes

        logger.debug("No feature list items, trying specification blocks")
        return self._from_specification_block()

    # ── Feature list ─────────────────────────────────────────────────────────

    def _from_feature_list(self) -> List[AttributeEntry]:
        attributes = []
        for item in top_level_items(self.section_elements):
            entry = self._parse_feature_item(item)
            if entry:
                attributes.append(entry)
        return attributes

    def _parse_feature_item(self, item: Tag) -> Optional[AttributeEntry]:
        """Split "Label: value" on the first colon; unlabeled text gets the default label."""
        # get_text() skips <img> icons inside the item
        text = clean_text(item.get_text())
        if not text:
            return None

        if ':' in text:
            label, value = (clean_text(part) for part in text.split(':', 1))
            if label and value:
                return AttributeEntry(label=escape_text(label), value=escape_text(value))

        return AttributeEntry(label=escape_text(self.feature_label), value=escape_text(text))

    # ── Specification containers ─────────────────────────────────────────────

    def _from_specification_block(self) -> List[AttributeEntry]:
        for selector in SPECIFICATION_CONTAINERS:
            container = self.soup.select_one(selector)
            if container is None:
                continue

            rows = container.find_all('tr')
            if rows:
                return [entry for entry in map(self._parse_table_row, rows) if entry]

            items = self._specification_items(container)
            return [entry for entry in map(self._parse_specification_item, items) if entry]

        return []

    @staticmethod
    def _specification_items(container: Tag) -> List[Tag]:
        items = container.find_all('div', class_=lambda c: c and SPECIFICATION_ITEM_CLASS in c)
        if SPECIFICATION_ITEM_CLASS in ' '.join(container.get('class', [])):
            items.insert(0, container)
        return items

    @staticmethod
    def _parse_table_row(row: Tag) -> Optional[AttributeEntry]:
        """First two cells become label and value; single-column rows are discarded."""
        cells = row.find_all(['td', 'th'], recursive=False)
        if len(cells) < 2:
            return None

        label = clean_text(cells[0].get_text())
        value = clean_text(cells[1].get_text())
        if not label or not value or label == value:
            return None

        return AttributeEntry(label=escape_text(label), value=escape_text(value))

    @staticmethod
    def _parse_specification_item(item: Tag) -> Optional[AttributeEntry]:
        name = item.select_one('span[class*="spec-name"]')
        value = item.select_one('span[class*="spec-value"]')
        if name is None or value is None:
            return None

        label_text = clean_text(name.get_text())
        value_text = clean_text(value.get_text())
        if not label_text or not value_text:
            return None

        return AttributeEntry(label=escape_text(label_text), value=escape_text(value_text))
