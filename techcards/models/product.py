"""
Product data models.

Pure data classes for representing extracted product information.
No business logic - only data structure definitions.
"""

import html
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class AttributeEntry:
    """One technical attribute row. Label and value are HTML-escaped."""
    label: str
    value: str

    @property
    def plain_label(self) -> str:
        """The label as shown to users: unescaped and trimmed."""
        return html.unescape(self.label).strip()


@dataclass
class ProductRecord:
    """
    Structured data extracted from one product page.

    Field Groups:
    - Core fields: title and reference (always present)
    - Images: main photo and brand logo (both optional), pictogram icons
    - Attributes: technical attributes in page order, duplicates allowed
    - Metadata: source URL and the moment the record was printed
    """

    # Core fields (required)
    title: str
    reference: str
    source_url: str = ""

    # Images
    primary_image: Optional[str] = None
    brand_image: Optional[str] = None
    pictograms: List[str] = field(default_factory=list)  # deduplicated, first-seen order

    # Attributes
    attributes: List[AttributeEntry] = field(default_factory=list)

    # Metadata
    print_timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.reference:
            raise ValueError("Product reference is required")

    def feature_labels(self) -> List[str]:
        """Return the plain (unescaped, trimmed) attribute labels in page order."""
        return [attr.plain_label for attr in self.attributes]


@dataclass
class ProductError:
    """Error record for a product whose page could not be fetched."""
    reference: str
    url: str
    message: str
