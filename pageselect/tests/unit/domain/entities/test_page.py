"""Unit tests for the Page entity."""
import pytest

from pageselect.domain.entities.item import Item
from pageselect.domain.entities.page import Page
from pageselect.domain.exceptions import MalformedPageError


def items(*keys):
    return [Item(key=key, fields={"title": f"T{key}"}) for key in keys]


class TestPageInvariants:
    def test_create_keeps_order(self):
        page = Page.create(index=2, page_size=3, items=items(4, 5, 6), total_count=30)

        assert page.keys() == (4, 5, 6)
        assert page.key_set() == frozenset({4, 5, 6})
        assert page.is_full
        assert not page.is_empty
        assert len(page) == 3

    def test_duplicate_keys_rejected(self):
        with pytest.raises(MalformedPageError) as exc_info:
            Page.create(index=1, page_size=3, items=items(1, 1))

        assert exc_info.value.page_index == 1

    def test_more_items_than_page_size_rejected(self):
        with pytest.raises(MalformedPageError):
            Page.create(index=1, page_size=2, items=items(1, 2, 3))

    def test_zero_index_rejected(self):
        with pytest.raises(MalformedPageError):
            Page.create(index=0, page_size=10)

    def test_negative_total_rejected(self):
        with pytest.raises(MalformedPageError):
            Page.create(index=1, page_size=10, total_count=-1)

    def test_non_item_entries_rejected(self):
        with pytest.raises(MalformedPageError):
            Page(index=1, page_size=10, items=({"id": 1},))

    def test_short_and_empty_pages(self):
        short = Page.create(index=3, page_size=10, items=items(21, 22))
        empty = Page.create(index=4, page_size=10)

        assert not short.is_full
        assert empty.is_empty
        assert empty.keys() == ()


class TestPageLookup:
    def test_item_for_returns_matching_item(self):
        page = Page.create(index=1, page_size=3, items=items(1, 2, 3))

        assert page.item_for(2).get("title") == "T2"
        assert page.item_for(99) is None

    def test_items_stored_as_tuple(self):
        page = Page(index=1, page_size=3, items=items(1, 2))

        assert isinstance(page.items, tuple)
