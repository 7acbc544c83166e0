"""Domain events for the Store aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Store")
class StoreCreated:
    """A store was added to the directory."""

    __version__ = 1

    store_id: Identifier(required=True)
    name: String(required=True)
    address: String(required=True)
    email: String(required=True)
    created_at: DateTime(required=True)


@storefront.event(part_of="Store")
class StoreDetailsUpdated:
    """Some of a store's details were changed."""

    __version__ = 1

    store_id: Identifier(required=True)
    name: String(required=True)
    is_active: Boolean(default=True)
    updated_fields: Text()  # JSON list of changed field names
    updated_at: DateTime(required=True)
