"""Store aggregate root — a physical shop listed in the store directory."""

import json
from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, String, Text

from storefront.domain import storefront
from storefront.shared.patch import supplied_changes
from storefront.shared.text import normalize_text

UPDATABLE_FIELDS = ("name", "description", "address", "phone", "email", "is_active")


@storefront.aggregate
class Store:
    """A shop that stocks products from the catalog.

    ``search_name`` holds the normalized form of ``name`` (lower-cased, no
    diacritics, no punctuation) and is refreshed on every write.
    """

    name: String(required=True, max_length=255)
    description: Text()
    address: String(required=True, max_length=255)
    phone: String(required=True, max_length=50)
    email: String(required=True, max_length=255)
    is_active: Boolean(default=True)
    search_name: String(max_length=255, default="")
    created_at: DateTime(default=lambda: datetime.now(UTC))
    updated_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, name, address, phone, email, description=None):
        from storefront.store.events import StoreCreated

        now = datetime.now(UTC)
        store = cls(
            name=name,
            description=description,
            address=address,
            phone=phone,
            email=email,
            is_active=True,
            search_name=normalize_text(name),
            created_at=now,
            updated_at=now,
        )
        store.raise_(
            StoreCreated(
                store_id=store.id,
                name=name,
                address=address,
                email=email,
                created_at=now,
            )
        )
        return store

    def update_details(self, **changes):
        """Apply a partial update; only the supplied fields change."""
        from storefront.store.events import StoreDetailsUpdated

        changes = supplied_changes(changes, UPDATABLE_FIELDS)
        for field_name, value in changes.items():
            setattr(self, field_name, value)

        self.search_name = normalize_text(self.name)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StoreDetailsUpdated(
                store_id=self.id,
                name=self.name,
                is_active=self.is_active,
                updated_fields=json.dumps(sorted(changes)),
                updated_at=self.updated_at,
            )
        )
