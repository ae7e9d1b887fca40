"""Tests for techcards/extraction/parsers/attribute_parser.py"""

from bs4 import BeautifulSoup

from techcards.extraction.parsers.attribute_parser import AttributeParser
from techcards.extraction.parsers.sections import features_section_elements


def _parse(html, feature_label="Feature"):
    soup = BeautifulSoup(html, "lxml")
    attributes = AttributeParser(soup, features_section_elements(soup), feature_label).extract_attributes()
    return [(a.label, a.value) for a in attributes]


class TestFeatureList:
    def test_product_page(self, product_page_html):
        assert _parse(product_page_html) == [
            ("Moc", "750 W"),
            ("Waga", "2,1 kg"),
            ("Feature", "Uchwyt szybkozaciskowy"),
            ("Kod dostawcy", "DX-750"),
            ("Kolor", "niebieski"),
            ("Zasilanie", "sieciowe &amp; 230 V"),
        ]

    def test_splits_on_first_colon(self):
        html = "<h3>Cechy produktu</h3><ul><li>Czas: 12:30 h</li></ul>"
        assert _parse(html) == [("Czas", "12:30 h")]

    def test_custom_default_label(self):
        html = "<h3>Cechy produktu</h3><ul><li>Wodoodporny</li></ul>"
        assert _parse(html, feature_label="Cecha") == [("Cecha", "Wodoodporny")]

    def test_empty_value_uses_default_label(self):
        html = "<h3>Cechy produktu</h3><ul><li>Tylko etykieta:</li></ul>"
        assert _parse(html) == [("Feature", "Tylko etykieta:")]

    def test_skips_empty_items(self):
        html = "<h3>Cechy produktu</h3><ul><li>  </li><li>A: 1</li></ul>"
        assert _parse(html) == [("A", "1")]

    def test_escapes_markup(self):
        html = '<h3>Cechy produktu</h3><ul><li>Wymiar &lt;cm&gt;: 10 "x" 20</li></ul>'
        assert _parse(html) == [("Wymiar &lt;cm&gt;", "10 &quot;x&quot; 20")]

    def test_duplicates_kept_in_order(self):
        html = "<h3>Cechy produktu</h3><ul><li>A: 1</li><li>A: 2</li></ul>"
        assert _parse(html) == [("A", "1"), ("A", "2")]

    def test_h4_section_does_not_leak_into_next_section(self):
        html = (
            "<h4>Product features</h4><ul><li>A: 1</li></ul>"
            "<h4>Delivery</h4><ul><li>Shipping: 2 days</li></ul>"
        )
        assert _parse(html) == [("A", "1")]


class TestSpecificationFallback:
    def test_table_rows(self):
        html = """
        <table class="data-table">
            <tr><th>Moc</th><td>750 W</td></tr>
            <tr><td>Same</td><td>Same</td></tr>
            <tr><td colspan="2">Single</td></tr>
            <tr><td>Waga</td><td>2 kg</td><td>extra</td></tr>
        </table>
        """
        assert _parse(html) == [("Moc", "750 W"), ("Waga", "2 kg")]

    def test_product_page_without_feature_list(self, product_page_html):
        html = product_page_html.replace("Cechy produktu", "Opis")
        assert _parse(html) == [("Nie używane", "bo lista wyżej")]

    def test_specification_items(self):
        html = """
        <div class="specification">
            <div class="specification-item">
                <span class="spec-name">Napięcie</span><span class="spec-value">18 V</span>
            </div>
            <div class="specification-item"><span class="spec-name">Pusta</span></div>
        </div>
        """
        assert _parse(html) == [("Napięcie", "18 V")]

    def test_container_is_specification_item(self):
        html = """
        <div class="specification-item">
            <span class="spec-name">Napięcie</span><span class="spec-value">18 V</span>
        </div>
        """
        assert _parse(html) == [("Napięcie", "18 V")]

    def test_first_container_only(self):
        html = """
        <div class="product-specifications"><table><tr><td>A</td><td>1</td></tr></table></div>
        <table class="data-table"><tr><td>B</td><td>2</td></tr></table>
        """
        assert _parse(html) == [("A", "1")]

    def test_nothing_found(self):
        assert _parse("<p>Brak danych</p>") == []
