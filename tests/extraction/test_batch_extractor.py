"""Tests for techcards/extraction/batch_extractor.py"""

from unittest.mock import MagicMock

import pytest

from conftest import BASE_URL, INDEX_URL, SHARD_1_URL, SHARD_2_URL

from techcards.discovery import ProductLocator
from techcards.extraction.batch_extractor import (
    BatchExtractor,
    parse_reference_input,
    reference_from_url,
)
from techcards.extraction.page_parser import ProductPageParser
from techcards.models import ProductError, ProductRecord
from techcards.storage import SitemapCache

DRILL_URL = "https://site.test/narzedzia/wiertarka-udarowa-123456.html"
SAW_URL = "https://site.test/narzedzia/pila-234567.html"

DRILL_HTML = "<h1>Hammer Drill</h1><h3>Product features</h3><ul><li>Weight: 2kg</li></ul>"
SAW_HTML = "<h1>Saw</h1><h3>Product features</h3><ul><li>Blade: 190 mm</li><li>Weight: 3kg</li></ul>"


class TestParseReferenceInput:
    def test_mixed_separators(self):
        assert parse_reference_input("123, 456\n789\t101") == ["123", "456", "789", "101"]

    def test_deduplicates_in_order(self):
        assert parse_reference_input("2 1 2 3 1") == ["2", "1", "3"]

    def test_empty(self):
        assert parse_reference_input("") == []
        assert parse_reference_input(" ,\n ") == []
        assert parse_reference_input(None) == []

    def test_urls_kept_whole(self):
        assert parse_reference_input(f"{DRILL_URL}, 42") == [DRILL_URL, "42"]


class TestReferenceFromUrl:
    def test_last_digit_run(self):
        assert reference_from_url("https://site.test/wiertarka-18v-123456.html") == "123456"

    def test_no_digits(self):
        assert reference_from_url("https://site.test/about.html") == "https://site.test/about.html"


@pytest.fixture
def locator():
    mock = MagicMock()
    mock.locate.side_effect = {"123456": DRILL_URL, "234567": SAW_URL}.get
    return mock


@pytest.fixture
def fetcher(make_fetcher):
    return make_fetcher(pages={DRILL_URL: DRILL_HTML, SAW_URL: SAW_HTML})


@pytest.fixture
def extractor(locator, fetcher, print_time):
    return BatchExtractor(locator, fetcher, ProductPageParser(base_url=BASE_URL, clock=lambda: print_time))


class TestFetchRecord:
    def test_record(self, extractor):
        record = extractor.fetch_record(DRILL_URL, "123456")
        assert isinstance(record, ProductRecord)
        assert record.title == "Hammer Drill"

    def test_fetch_failure(self, extractor):
        error = extractor.fetch_record("https://site.test/gone-1.html", "1")
        assert isinstance(error, ProductError)
        assert error.message == "Could not fetch product page"
        assert error.url == "https://site.test/gone-1.html"


class TestProcess:
    def test_all_found(self, extractor):
        result = extractor.process(["123456", "234567"])
        assert result.success
        assert [r.title for r in result.records] == ["Hammer Drill", "Saw"]
        assert result.found_references == ["123456", "234567"]
        assert result.failures == []

    def test_available_features_sorted_unique(self, extractor):
        result = extractor.process(["123456", "234567"])
        assert result.available_features == ["Blade", "Weight"]

    def test_not_found_continues(self, extractor):
        result = extractor.process(["999999", "123456"])
        assert [r.reference for r in result.records] == ["123456"]
        assert len(result.failures) == 1
        assert result.failures[0].reference == "999999"
        assert result.failures[0].reason == "not found"

    def test_fetch_failure_recorded(self, extractor, fetcher):
        del fetcher.pages[SAW_URL]
        result = extractor.process(["123456", "234567"])
        assert len(result.records) == 1
        assert result.failures[0].reason == "Could not fetch product page"

    def test_url_token_skips_locator(self, extractor, locator):
        result = extractor.process([SAW_URL])
        assert result.found_references == ["234567"]
        locator.locate.assert_not_called()

    def test_nothing_found(self, extractor):
        result = extractor.process(["1", "2"])
        assert not result.success
        assert result.available_features == []
        assert len(result.failures) == 2

    def test_order_preserved(self, extractor):
        result = extractor.process(["234567", "123456"])
        assert result.found_references == ["234567", "123456"]


class TestEndToEnd:
    def test_hammer_drill_via_sitemap(self, memory_store, make_fetcher, clock, print_time):
        fetcher = make_fetcher(pages={
            INDEX_URL: f"<sitemapindex><sitemap><loc>{SHARD_1_URL}</loc></sitemap>"
                       f"<sitemap><loc>{SHARD_2_URL}</loc></sitemap></sitemapindex>",
            SHARD_1_URL: "<urlset><url><loc>https://site.test/other-111111.html</loc></url></urlset>",
            SHARD_2_URL: f"<urlset><url><loc>{DRILL_URL}</loc></url></urlset>",
            DRILL_URL: DRILL_HTML,
        })
        locator = ProductLocator(SitemapCache(memory_store, fetcher, index_url=INDEX_URL, clock=clock), fetcher)
        extractor = BatchExtractor(locator, fetcher, ProductPageParser(base_url=BASE_URL, clock=lambda: print_time))

        result = extractor.process(["123456"])

        [record] = result.records
        assert record.title == "Hammer Drill"
        assert record.reference == "123456"
        assert [(a.label, a.value) for a in record.attributes] == [("Weight", "2kg")]
