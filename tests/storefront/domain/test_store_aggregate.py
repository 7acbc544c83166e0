import json

import pytest
from protean.exceptions import ValidationError
from storefront.store.events import StoreCreated, StoreDetailsUpdated
from storefront.store.store import Store


def _create_store(**overrides):
    defaults = {
        "name": "Central",
        "address": "123 Main Ave",
        "phone": "+1 555 0100",
        "email": "central@example.com",
    }
    defaults.update(overrides)
    return Store.create(**defaults)


class TestStoreCreation:
    def test_create_sets_fields(self):
        store = _create_store(description="Flagship")

        assert store.name == "Central"
        assert store.address == "123 Main Ave"
        assert store.phone == "+1 555 0100"
        assert store.email == "central@example.com"
        assert store.description == "Flagship"

    def test_is_active_by_default(self):
        assert _create_store().is_active is True

    def test_search_name_is_normalized(self):
        store = _create_store(name="Tiéndà Norte!")
        assert store.search_name == "tienda norte"

    @pytest.mark.parametrize("field", ["address", "phone", "email"])
    def test_contact_fields_required(self, field):
        with pytest.raises(ValidationError) as exc:
            _create_store(**{field: None})
        assert field in exc.value.messages

    def test_create_raises_event(self):
        store = _create_store()
        event = store._events[0]
        assert isinstance(event, StoreCreated)
        assert event.store_id == store.id
        assert event.name == "Central"


class TestStoreUpdate:
    def test_only_supplied_fields_change(self):
        store = _create_store()
        store.update_details(phone="+1 555 0199")

        assert store.phone == "+1 555 0199"
        assert store.name == "Central"
        assert store.email == "central@example.com"

    def test_deactivate(self):
        store = _create_store()
        store.update_details(is_active=False)
        assert store.is_active is False

    def test_rename_refreshes_search_name(self):
        store = _create_store()
        store.update_details(name="Café Sur")
        assert store.search_name == "cafe sur"

    def test_unknown_field_rejected(self):
        store = _create_store()
        with pytest.raises(ValidationError) as exc:
            store.update_details(owner="someone")
        assert "owner" in exc.value.messages

    def test_update_raises_event(self):
        store = _create_store()
        store._events.clear()

        store.update_details(is_active=False)

        event = store._events[-1]
        assert isinstance(event, StoreDetailsUpdated)
        assert event.is_active is False
        assert json.loads(event.updated_fields) == ["is_active"]
