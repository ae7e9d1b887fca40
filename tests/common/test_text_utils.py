"""Tests for techcards/common/text_utils.py"""

import pytest

from techcards.common.text_utils import (
    clean_text,
    escape_text,
    format_file_size,
    normalize_url,
    reference_from_url,
    sanitize_filename,
    strip_query,
)


class TestCleanText:
    def test_collapses_whitespace(self):
        assert clean_text("  Moc \n\t 750   W ") == "Moc 750 W"

    def test_empty_returns_empty(self):
        assert clean_text("") == ""

    def test_none_returns_empty(self):
        assert clean_text(None) == ""


class TestEscapeText:
    def test_escapes_markup(self):
        assert escape_text('<b>"A" & B</b>') == "&lt;b&gt;&quot;A&quot; &amp; B&lt;/b&gt;"

    def test_plain_text_unchanged(self):
        assert escape_text("2,1 kg") == "2,1 kg"


class TestNormalizeUrl:
    @pytest.mark.parametrize("url,expected", [
        ("https://cdn.test/a.png", "https://cdn.test/a.png"),
        ("http://cdn.test/a.png", "http://cdn.test/a.png"),
        ("//cdn.test/a.png", "https://cdn.test/a.png"),
        ("/media/a.png", "https://site.test/media/a.png"),
        ("  /media/a.png ", "https://site.test/media/a.png"),
    ])
    def test_forms(self, url, expected):
        assert normalize_url(url, "https://site.test") == expected

    def test_base_url_trailing_slash(self):
        assert normalize_url("/a.png", "https://site.test/") == "https://site.test/a.png"

    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_empty_returns_none(self, url):
        assert normalize_url(url) is None


class TestStripQuery:
    def test_removes_query(self):
        assert strip_query("https://cdn.test/1_picture.jpeg?w=800&h=800") == "https://cdn.test/1_picture.jpeg"

    def test_no_query_unchanged(self):
        assert strip_query("https://cdn.test/1.jpeg") == "https://cdn.test/1.jpeg"


class TestSanitizeFilename:
    def test_replaces_unsafe_characters(self):
        assert sanitize_filename("a b/c+d.e") == "a_b_c_d_e"

    def test_keeps_safe_characters(self):
        assert sanitize_filename("Ref_123-abc") == "Ref_123-abc"

    def test_caps_length(self):
        assert len(sanitize_filename("x" * 250)) == 100


class TestFormatFileSize:
    @pytest.mark.parametrize("size,expected", [
        (0, "0 B"),
        (512, "512 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (5 * 1024 * 1024, "5 MB"),
    ])
    def test_formats(self, size, expected):
        assert format_file_size(size) == expected


class TestReferenceFromUrl:
    def test_last_digit_run(self):
        assert reference_from_url("https://site.test/wiertarka-18v-123456.html") == "123456"

    def test_no_digits_returns_url(self):
        assert reference_from_url("https://site.test/about.html") == "https://site.test/about.html"

    @pytest.mark.parametrize("url", ["", None])
    def test_empty(self, url):
        assert reference_from_url(url) == ""
