"""Unit tests for the Item entity."""
import pytest

from pageselect.domain.entities.item import Item
from pageselect.domain.exceptions import FetchError, MalformedRecordError


class TestItemCreation:
    def test_from_record_uses_id_as_key(self):
        item = Item.from_record({"id": 27992, "title": "A Sunday on La Grande Jatte"})

        assert item.key == 27992
        assert item.get("title") == "A Sunday on La Grande Jatte"

    def test_from_record_with_custom_key_field(self):
        item = Item.from_record({"slug": "nighthawks", "title": "Nighthawks"}, key_field="slug")

        assert item.key == "nighthawks"

    def test_missing_key_is_malformed(self):
        with pytest.raises(MalformedRecordError):
            Item.from_record({"title": "No id"})

    def test_non_mapping_record_is_malformed(self):
        with pytest.raises(MalformedRecordError):
            Item.from_record(["id", 1])

    @pytest.mark.parametrize("key", [None, "", "   ", 1.5, True, ("a",)])
    def test_unusable_keys_rejected(self, key):
        with pytest.raises(MalformedRecordError):
            Item(key=key)

    def test_malformed_record_is_a_fetch_error(self):
        with pytest.raises(FetchError):
            Item.from_record({})


class TestItemBehaviour:
    def test_fields_are_read_only(self):
        item = Item(key=1, fields={"title": "Original"})

        with pytest.raises(TypeError):
            item.fields["title"] = "Changed"

    def test_fields_are_copied_from_source_mapping(self):
        raw = {"id": 1, "title": "Original"}
        item = Item.from_record(raw)
        raw["title"] = "Changed"

        assert item.get("title") == "Original"

    def test_equality_and_hash_use_key_only(self):
        first = Item(key=5, fields={"title": "Old title"})
        second = Item(key=5, fields={"title": "New title"})

        assert first == second
        assert len({first, second}) == 1

    def test_item_is_immutable(self):
        item = Item(key=1)

        with pytest.raises(Exception):
            item.key = 2

    def test_to_dict_includes_key(self):
        item = Item(key="abc", fields={"title": "T"})

        assert item.to_dict() == {"title": "T", "id": "abc"}
