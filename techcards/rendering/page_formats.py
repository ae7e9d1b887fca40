"""
Page Format Profiles

Card layouts on an A4 sheet. Each profile fixes the page orientation,
the card size, how many cards share a page and the base font size.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class PageFormatProfile:
    """Layout of cards on one printed A4 page."""
    name: str
    orientation: str          # "portrait" or "landscape"
    card_width: str           # CSS length
    card_height: str          # CSS length
    items_per_page: int
    base_font_size: str       # CSS font size
    pad_last_page: bool = False  # fill a partial last page with blank cards

    @property
    def page_width(self) -> str:
        return "210mm" if self.orientation == "portrait" else "297mm"

    @property
    def page_height(self) -> str:
        return "297mm" if self.orientation == "portrait" else "210mm"


PAGE_FORMATS: Dict[str, PageFormatProfile] = {
    # One large card per page (A4 card)
    'compact': PageFormatProfile(
        name='compact',
        orientation='portrait',
        card_width='100%',
        card_height='calc(100% - 2mm)',
        items_per_page=1,
        base_font_size='18pt',
    ),
    # Two A5 cards side by side on a landscape page
    'standard': PageFormatProfile(
        name='standard',
        orientation='landscape',
        card_width='calc(50% - 1.0mm)',
        card_height='calc(100% - 1mm)',
        items_per_page=2,
        base_font_size='11pt',
        pad_last_page=True,
    ),
    # Four A6 cards in a 2x2 grid on a portrait page
    'dense': PageFormatProfile(
        name='dense',
        orientation='portrait',
        card_width='calc(50% - 1.0mm)',
        card_height='calc(50% - 1.0mm)',
        items_per_page=4,
        base_font_size='8pt',
        pad_last_page=True,
    ),
}

# Paper-size names used on the printed cards
FORMAT_ALIASES = {
    'a4': 'compact',
    'a5': 'standard',
    'a6': 'dense',
}

DEFAULT_PAGE_FORMAT = 'standard'


def get_page_format(name: str) -> PageFormatProfile:
    """
    Look up a page format by name or paper-size alias.

    Args:
        name: "compact", "standard", "dense" or "a4", "a5", "a6"

    Returns:
        PageFormatProfile

    Raises:
        ValueError: If the format is not supported
    """
    key = (name or "").lower().strip()
    key = FORMAT_ALIASES.get(key, key)

    if key in PAGE_FORMATS:
        return PAGE_FORMATS[key]

    supported = ', '.join(get_supported_formats())
    raise ValueError(f"Unsupported page format: {name}. Supported: {supported}")


def get_supported_formats() -> List[str]:
    """Return list of supported format names (aliases included)."""
    return list(PAGE_FORMATS.keys()) + list(FORMAT_ALIASES.keys())
