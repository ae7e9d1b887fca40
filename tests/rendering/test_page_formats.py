"""Tests for techcards/rendering/page_formats.py"""

import pytest

from techcards.rendering.page_formats import (
    DEFAULT_PAGE_FORMAT,
    PAGE_FORMATS,
    get_page_format,
    get_supported_formats,
)


class TestPageFormats:
    @pytest.mark.parametrize("name,items,orientation,font", [
        ("compact", 1, "portrait", "18pt"),
        ("standard", 2, "landscape", "11pt"),
        ("dense", 4, "portrait", "8pt"),
    ])
    def test_profiles(self, name, items, orientation, font):
        profile = get_page_format(name)
        assert profile.items_per_page == items
        assert profile.orientation == orientation
        assert profile.base_font_size == font

    @pytest.mark.parametrize("alias,name", [("a4", "compact"), ("A5", "standard"), (" a6 ", "dense")])
    def test_aliases(self, alias, name):
        assert get_page_format(alias).name == name

    def test_default_is_standard(self):
        assert get_page_format(DEFAULT_PAGE_FORMAT) is PAGE_FORMATS["standard"]

    def test_page_size_follows_orientation(self):
        assert get_page_format("standard").page_width == "297mm"
        assert get_page_format("dense").page_width == "210mm"
        assert get_page_format("dense").page_height == "297mm"

    def test_only_multi_card_formats_pad(self):
        assert not get_page_format("compact").pad_last_page
        assert get_page_format("standard").pad_last_page
        assert get_page_format("dense").pad_last_page

    def test_unknown_format_raises(self):
        with pytest.raises(ValueError, match="Unsupported page format"):
            get_page_format("letter")

    def test_supported_formats(self):
        assert get_supported_formats() == ["compact", "standard", "dense", "a4", "a5", "a6"]
