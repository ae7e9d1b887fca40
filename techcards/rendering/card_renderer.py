"""
Card Renderer

Renders product records as one self-contained, printable HTML document.

Cards are grouped into A4 page containers according to the page format;
an explicit page-break element separates consecutive pages. For fixed
inputs the output is byte-identical apart from the records' print
timestamps.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence
from urllib.parse import quote_plus

from ..common.config_loader import load_excluded_features
from ..common.constants import BARCODE_ENDPOINT
from ..common.text_utils import escape_text
from ..models import AttributeEntry, ProductRecord
from .feature_filter import filter_attributes
from .page_formats import DEFAULT_PAGE_FORMAT, PageFormatProfile, get_page_format

logger = logging.getLogger(__name__)

DOCUMENT_TITLE = "Technical Data Sheets"
SECTION_TITLE = "PRODUCT FEATURES"
REFERENCE_LABEL = "Ref. no.:"
NO_ATTRIBUTES_TEXT = "No attributes selected."
PRINTED_LABEL = "Printed:"

ROW_COLORS = ('#ffffff', '#f0f0f0')

PAGE_OPEN = '<div class="page">'
PAGE_BREAK = '<div class="page-break"></div>'
FILLER_CARD = '<div class="product-card filler-card"></div>'


def barcode_url(reference: str) -> str:
    """Build the Code128 barcode image URL for a reference."""
    return (
        f"{BARCODE_ENDPOINT}?data={quote_plus(reference)}"
        "&code=Code128&dpi=150&format=png&unit=px&height=50&width=300&hidehrt=TRUE"
    )


def _stylesheet(profile: PageFormatProfile) -> str:
    return f"""
        @page {{ size: A4 {profile.orientation}; margin: 0; }}
        body {{
            width: {profile.page_width}; height: {profile.page_height}; margin: 0; padding: 2mm;
            font-family: Arial, sans-serif;
            box-sizing: border-box;
        }}
        .page {{ width: 100%; height: 100%; display: flex; flex-wrap: wrap; gap: 2mm; align-content: flex-start; }}
        .product-card {{
            width: {profile.card_width};
            height: {profile.card_height};
            border: 1px solid #ddd;
            padding: 1em;
            box-sizing: border-box;
            position: relative;
            page-break-inside: avoid;
            background: white;
            font-size: {profile.base_font_size};
            display: flex;
            flex-direction: column;
        }}
        .filler-card {{ border-color: transparent; }}
        .card-header {{ height: 25%; display: flex; flex-direction: column; overflow: hidden; margin-bottom: 0.5em; }}
        .header-top-content {{ flex: 1; display: flex; justify-content: space-between; min-height: 0; margin-bottom: 0.3em; }}
        .header-title-box {{ width: 65%; padding-right: 0.5em; }}
        h1.product-title {{ font-size: 1.5em; margin: 0; line-height: 1.1; max-height: 100%; overflow: hidden; }}
        .header-image-box {{ width: 35%; height: 100%; display: flex; justify-content: flex-end; align-items: flex-start; }}
        .product-image {{ max-height: 100%; max-width: 100%; object-fit: contain; }}
        .ref-row {{ height: 2.5em; display: flex; align-items: center; font-size: 1em; flex-shrink: 0; }}
        .barcode {{ height: 0.8em; margin-left: 0.5em; }}
        .brand-box {{ flex: 1; text-align: right; }}
        .brand-picture {{ max-height: 2.5em; max-width: 6em; object-fit: contain; }}
        .card-body {{ flex: 1; display: flex; flex-direction: column; overflow: hidden; }}
        .top-border {{ background-color: #da7625; height: 2mm; margin-bottom: 0.5em; flex-shrink: 0; }}
        .middle-border {{ background-color: #da7625; height: 1mm; margin: 0.5em 0; flex-shrink: 0; }}
        .section-title {{ font-size: 1em; font-weight: bold; margin-bottom: 0.3em; display: block; flex-shrink: 0; }}
        .pictograms-container {{
            display: flex; flex-wrap: wrap; gap: 0.2em; padding: 0.2em;
            background: #f9f9f9; border: 1px solid #da7625;
            min-height: 3em; flex-shrink: 0; margin-bottom: 0.5em;
        }}
        .pictogram {{ width: 4.5em; height: 4.5em; object-fit: contain; background: white; padding: 0.1em; }}
        .scrollable-specs {{ flex: 1; overflow: hidden; }}
        .table_product_data {{ border-collapse: collapse; width: 100%; font-size: 0.85em; }}
        .table_product_data td {{ border: 1px solid #6c6c6c; padding: 0.2em; }}
        .title_data {{ width: 40%; font-weight: bold; background-color: #f0f0f0; }}
        .table-rule td {{ height: 1px; padding: 0; background-color: #6c6c6c; }}
        .no-attributes {{ color: #999; font-style: italic; font-size: 0.9em; }}
        .print-info {{ position: absolute; bottom: 2mm; right: 2mm; font-size: 0.6em; color: #666; }}
        .page-break {{ page-break-after: always; width: 100%; height: 0; margin: 0; }}
    """


class CardRenderer:
    """
    Renders technical data cards.

    Usage:
        renderer = CardRenderer()
        html = renderer.render(records, feature_selection=["Weight"], page_format="standard")
    """

    def __init__(self, excluded_features: Optional[List[str]] = None):
        """
        Initialize the renderer.

        Args:
            excluded_features: Terms hidden when no feature selection is given
                (default: config/excluded_features.yaml)
        """
        if excluded_features is None:
            excluded_features = load_excluded_features()
        self.excluded_features = list(excluded_features)

    def render(
        self,
        records: Sequence[ProductRecord],
        feature_selection: Optional[Iterable[str]] = None,
        page_format: str | PageFormatProfile = DEFAULT_PAGE_FORMAT,
    ) -> str:
        """
        Render records into one HTML document.

        Args:
            records: Product records in print order
            feature_selection: Attribute labels to show, or None for the exclusion list
            page_format: Format name/alias or a PageFormatProfile

        Returns:
            Complete HTML document

        Raises:
            ValueError: If the page format is not supported
        """
        profile = page_format if isinstance(page_format, PageFormatProfile) else get_page_format(page_format)
        selection = list(feature_selection) if feature_selection is not None else None

        parts = [
            '<!DOCTYPE html>',
            '<html>',
            '<head>',
            '<meta charset="UTF-8">',
            f'<title>{DOCUMENT_TITLE}</title>',
            f'<style>{_stylesheet(profile)}</style>',
            '</head>',
            '<body>',
        ]

        for page_index, page_records in enumerate(self.paginate(records, profile.items_per_page)):
            if page_index > 0:
                parts.append(PAGE_BREAK)

            parts.append(PAGE_OPEN)
            for record in page_records:
                attributes = filter_attributes(record.attributes, selection, self.excluded_features)
                parts.append(self.render_card(record, attributes))

            if profile.pad_last_page:
                parts.extend([FILLER_CARD] * (profile.items_per_page - len(page_records)))
            parts.append('</div>')

        parts.append('</body>')
        parts.append('</html>')

        logger.debug("Rendered %d cards in %s format", len(records), profile.name)
        return "\n".join(parts)

    @staticmethod
    def paginate(records: Sequence[ProductRecord], items_per_page: int) -> List[Sequence[ProductRecord]]:
        """Split records into pages of items_per_page (the last page may be shorter)."""
        if items_per_page < 1:
            raise ValueError("items_per_page must be at least 1")
        return [records[i:i + items_per_page] for i in range(0, len(records), items_per_page)]

    def render_card(self, record: ProductRecord, attributes: List[AttributeEntry]) -> str:
        """Render one product card with already-filtered attributes."""
        reference = escape_text(record.reference)

        parts = [
            '<div class="product-card">',
            '<div class="top-border"></div>',
            '<div class="card-header">',
            '<div class="header-top-content">',
            f'<div class="header-title-box"><h1 class="product-title">{escape_text(record.title)}</h1></div>',
            '<div class="header-image-box">',
        ]
        if record.primary_image:
            parts.append(f'<img class="product-image" src="{escape_text(record.primary_image)}" />')
        parts.append('</div>')
        parts.append('</div>')

        parts.append('<div class="ref-row">')
        parts.append(f'<strong>{REFERENCE_LABEL} {reference}</strong>')
        parts.append(f'<img class="barcode" src="{escape_text(barcode_url(record.reference))}" />')
        parts.append('<div class="brand-box">')
        if record.brand_image:
            parts.append(f'<img class="brand-picture" src="{escape_text(record.brand_image)}" />')
        parts.append('</div>')
        parts.append('</div>')
        parts.append('</div>')

        parts.append('<div class="middle-border"></div>')
        parts.append('<div class="card-body">')
        parts.append(f'<span class="section-title">{SECTION_TITLE}</span>')

        if record.pictograms:
            parts.append('<div class="pictograms-container">')
            for pictogram in record.pictograms:
                parts.append(f'<img class="pictogram" src="{escape_text(pictogram)}" />')
            parts.append('</div>')

        parts.append('<div class="scrollable-specs">')
        parts.append(self.render_attribute_table(attributes))
        parts.append('</div>')

        printed = record.print_timestamp.strftime("%d.%m.%Y %H:%M")
        parts.append(f'<div class="print-info">{PRINTED_LABEL} {printed}</div>')
        parts.append('</div>')
        parts.append('</div>')

        return "\n".join(parts)

    @staticmethod
    def render_attribute_table(attributes: List[AttributeEntry]) -> str:
        """Render the attribute table, or the placeholder when nothing is left."""
        if not attributes:
            return f'<p class="no-attributes">{NO_ATTRIBUTES_TEXT}</p>'

        rows = ['<table class="table_product_data">', '<tr class="table-rule"><td colspan="2"></td></tr>']
        for index, attr in enumerate(attributes):
            # Label and value were escaped at extraction time
            color = ROW_COLORS[index % 2]
            rows.append(
                f'<tr style="background-color: {color};">'
                f'<td class="title_data">{attr.label}</td><td>{attr.value}</td></tr>'
            )
        rows.append('<tr class="table-rule"><td colspan="2"></td></tr>')
        rows.append('</table>')
        return "\n".join(rows)
