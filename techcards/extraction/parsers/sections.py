"""
Page section helpers shared by the pictogram and attribute parsers.

The "product features" section has no wrapper element of its own: it is
everything after its heading up to the next heading or block element.
"""

from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ...common.text_utils import clean_text

FEATURE_HEADING_MARKERS = ('cechy produktu', 'product features')
HEADING_TAGS = ['h2', 'h3', 'h4']

# The section ends at the first of these after the heading, not at end of document
SECTION_BOUNDARY_TAGS = {'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'div', 'section'}


def find_features_heading(soup: BeautifulSoup) -> Optional[Tag]:
    """Return the first heading whose text names the product features section."""
    for heading in soup.find_all(HEADING_TAGS):
        text = clean_text(heading.get_text()).lower()
        if any(marker in text for marker in FEATURE_HEADING_MARKERS):
            return heading
    return None


def _is_inside(element: Tag, ancestor: Tag) -> bool:
    return any(parent is ancestor for parent in element.parents)


def features_section_elements(soup: BeautifulSoup) -> List[Tag]:
    """
    Collect the tags of the product features section in document order.

    Returns:
        Tags between the section heading and the next boundary tag
        (empty list if the page has no such heading)
    """
    heading = find_features_heading(soup)
    if heading is None:
        return []

    elements = []
    for element in heading.next_elements:
        if not isinstance(element, Tag):
            continue
        if _is_inside(element, heading):
            continue
        if element.name in SECTION_BOUNDARY_TAGS:
            break
        elements.append(element)

    return elements


def top_level_items(elements: List[Tag]) -> List[Tag]:
    """Return the <li> tags of a section, skipping items nested in other items."""
    items = [el for el in elements if el.name == 'li']
    return [
        item for item in items
        if not any(other is not item and _is_inside(item, other) for other in items)
    ]
