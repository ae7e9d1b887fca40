"""Shared test fixtures."""

from datetime import datetime
from pathlib import Path

import pytest

from techcards.models import AttributeEntry, ProductRecord
from techcards.storage import MemoryBlobStore

FIXTURES_DIR = Path(__file__).parent / "fixtures"

BASE_URL = "https://site.test"
INDEX_URL = "https://site.test/sitemap/products.xml"
SHARD_1_URL = "https://site.test/sitemap/products-1.xml"
SHARD_2_URL = "https://site.test/sitemap/products-2.xml"


class FakeFetcher:
    """Fetcher serving canned responses; unknown URLs fail like a network error."""

    def __init__(self, pages=None, images=None):
        self.pages = dict(pages or {})
        self.images = set(images or [])
        self.requested = []
        self.checked_images = []

    def fetch(self, url):
        self.requested.append(url)
        return self.pages.get(url)

    def image_exists(self, url):
        self.checked_images.append(url)
        return url in self.images


class FakeClock:
    """Controllable time source (seconds since epoch)."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def product_page_html():
    """Load the product page HTML fixture."""
    return (FIXTURES_DIR / "product_page.html").read_text(encoding="utf-8")


@pytest.fixture
def sitemap_index_xml():
    """Load the sitemap index fixture (two shards)."""
    return (FIXTURES_DIR / "sitemap_index.xml").read_text(encoding="utf-8")


@pytest.fixture
def sitemap_shard_xml():
    """Load a sitemap shard fixture with three product URLs."""
    return (FIXTURES_DIR / "sitemap_shard.xml").read_text(encoding="utf-8")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_store(clock):
    """In-memory blob store sharing the fake clock."""
    return MemoryBlobStore(clock=clock)


@pytest.fixture
def print_time():
    return datetime(2026, 10, 19, 14, 30)


@pytest.fixture
def make_record(print_time):
    """Factory for product records with fixed print timestamp."""

    def _make(reference="123456", title="Hammer Drill", attributes=None, **kwargs):
        if attributes is None:
            attributes = [("Weight", "2kg"), ("Power", "750 W")]
        return ProductRecord(
            title=title,
            reference=reference,
            attributes=[AttributeEntry(label=label, value=value) for label, value in attributes],
            print_timestamp=print_time,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_fetcher():
    """Return the FakeFetcher class for building canned fetchers."""
    return FakeFetcher
