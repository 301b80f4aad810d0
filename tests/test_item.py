"""
Unit tests for the item enricher serializer.
"""

from dnd5e_enrichers.models import ItemOptions
from dnd5e_enrichers.serializers import serialize_item


class TestSerializeItem:

    def test_empty(self) -> None:
        assert serialize_item() == "[[/item]]"
        assert serialize_item({}) == "[[/item]]"

    def test_activity_without_identifier(self) -> None:
        assert serialize_item({"activity": "Poison"}) == "[[/item]]"

    def test_legacy_string(self) -> None:
        assert serialize_item("Bite") == "[[/item Bite]]"

    def test_by_name(self) -> None:
        assert serialize_item({"itemName": "Bite"}) == "[[/item Bite]]"

    def test_by_name_with_activity(self) -> None:
        assert serialize_item({"item_name": "Bite", "activity": "Poison"}) == "[[/item Bite activity=Poison]]"

    def test_activity_with_space_is_quoted(self) -> None:
        assert serialize_item(
            ItemOptions(item_name="Tentacles", activity="Escape Tentacles")
        ) == '[[/item Tentacles activity="Escape Tentacles"]]'

    def test_activity_with_equals_is_quoted(self) -> None:
        assert serialize_item({"relative_id": "abc", "activity": "a=b"}) == '[[/item abc activity="a=b"]]'

    def test_uuid_wins(self) -> None:
        assert serialize_item(
            {"uuid": "Actor.A.Item.B", "relativeId": "X", "itemName": "Bite"}
        ) == "[[/item Actor.A.Item.B]]"

    def test_relative_id_wins_over_name(self) -> None:
        assert serialize_item({"relativeId": ".amUUCouL69OK1GZU", "itemName": "Bite"}) == "[[/item .amUUCouL69OK1GZU]]"

    def test_empty_uuid_falls_through(self) -> None:
        assert serialize_item({"uuid": "", "itemName": "Bite"}) == "[[/item Bite]]"
