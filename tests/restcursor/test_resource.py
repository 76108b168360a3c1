"""Tests for Resource: identity, attribute access and its role as a context."""

from __future__ import annotations

import pytest

from restcursor.context import Context, IdentifiedContext, scoping_params
from restcursor.resources import Item


@pytest.fixture
def item(account):
    items = account.collection("Items")
    return items.instantiate(
        {"Items": {"itemID": "12", "description": "Mug", "categoryID": "3", "extra": 1}}
    )[0]


class TestResource:
    def test_identity(self, item):
        assert item.id == "12"
        assert item.identity_field_name == "itemID"
        assert item.identity_value == "12"

    def test_id_is_read_only(self, item):
        with pytest.raises(AttributeError):
            item.id = "13"

    def test_mapping_access(self, item):
        assert item["description"] == "Mug"
        assert item.get("missing") is None
        assert "extra" in item
        assert len(item) == 4
        assert dict(item) == item.as_dict()

    def test_declared_field_attribute(self, item):
        assert item.description == "Mug"
        assert item.categoryID == "3"
        assert item.systemSku is None  # declared but absent

    def test_undeclared_attribute_raises(self, item):
        with pytest.raises(AttributeError, match="extra"):
            item.extra

    def test_attributes_are_a_copy(self, item):
        item.attributes["description"] = "changed"
        assert item["description"] == "Mug"

    def test_equality(self, item, account):
        again = account.collection("Items").instantiate({"Items": dict(item)})[0]
        assert again == item
        assert again is not item

    def test_repr_and_json(self, item):
        assert repr(item) == "<Item itemID='12'>"
        assert '"itemID": "12"' in item.to_json()

    def test_context_chain(self, item, account, store):
        assert item.context is account.collection("Items")
        assert item.base_path == account.base_path
        assert item.client is store


class TestContextProtocols:
    def test_resource_is_identified_context(self, item):
        assert isinstance(item, IdentifiedContext)
        assert isinstance(item, Context)

    def test_account_is_plain_context(self, account):
        assert isinstance(account, Context)
        assert not isinstance(account, IdentifiedContext)

    def test_scoping_params(self, item):
        assert scoping_params(item, {"itemID"}.__contains__) == {"itemID": "12"}
        assert scoping_params(item, frozenset().__contains__) == {}

    def test_scoping_params_without_identity(self, account):
        assert scoping_params(account, lambda name: True) == {}

    def test_nested_collection_memoised(self, item):
        assert item.collection("OrderLines") is item.collection("OrderLines")

    def test_instantiated_type(self, item):
        assert isinstance(item, Item)
