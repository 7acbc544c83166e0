"""StoreProduct aggregate — one store's stock and price for one product."""

import json
from datetime import UTC, datetime

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront
from storefront.shared.money import to_cents
from storefront.shared.patch import supplied_changes

UPDATABLE_FIELDS = ("stock", "store_price")


def listing_key(store_id, product_id):
    """Composite key of the (store, product) pair."""
    return f"{store_id}:{product_id}"


@storefront.aggregate
class StoreProduct:
    """Association between a Store and a Product.

    A store lists a product at most once: ``listing_key`` is the composite
    (store_id, product_id) key and is declared unique, so the storage layer
    rejects a second row for the same pair.
    """

    store_id: Identifier(required=True)
    product_id: Identifier(required=True)
    listing_key: String(required=True, unique=True, max_length=100)
    stock: Integer(min_value=0, default=0)
    store_price: Float(min_value=0.0)
    created_at: DateTime(default=lambda: datetime.now(UTC))
    updated_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, store_id, product_id, stock=0, store_price=None):
        from storefront.assortment.events import ProductListed

        now = datetime.now(UTC)
        store_product = cls(
            store_id=store_id,
            product_id=product_id,
            listing_key=listing_key(store_id, product_id),
            stock=stock or 0,
            store_price=to_cents(store_price),
            created_at=now,
            updated_at=now,
        )
        store_product.raise_(
            ProductListed(
                store_product_id=store_product.id,
                store_id=store_id,
                product_id=product_id,
                stock=store_product.stock,
                store_price=store_product.store_price,
                listed_at=now,
            )
        )
        return store_product

    def update_listing(self, **changes):
        """Apply a partial update of stock and/or store price."""
        from storefront.assortment.events import ListingUpdated

        changes = supplied_changes(changes, UPDATABLE_FIELDS)
        if changes.get("store_price") is not None:
            changes["store_price"] = to_cents(changes["store_price"])

        for field_name, value in changes.items():
            setattr(self, field_name, value)

        self.updated_at = datetime.now(UTC)

        self.raise_(
            ListingUpdated(
                store_product_id=self.id,
                store_id=self.store_id,
                product_id=self.product_id,
                stock=self.stock,
                store_price=self.store_price,
                updated_fields=json.dumps(sorted(changes)),
                updated_at=self.updated_at,
            )
        )
