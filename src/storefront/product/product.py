"""Product aggregate root — an item of the catalog, independent of any store."""

import json
from datetime import UTC, datetime

from protean.fields import DateTime, Float, String, Text

from storefront.domain import storefront
from storefront.shared.money import to_cents
from storefront.shared.patch import supplied_changes

UPDATABLE_FIELDS = ("name", "description", "original_price", "category")

# Unit separator; keeps a search term from matching across name and description.
_SEARCH_SEPARATOR = "\x1f"


def _search_text(name, description):
    return _SEARCH_SEPARATOR.join([name or "", description or ""]).lower()


@storefront.aggregate
class Product:
    """A sellable item with a catalog-wide reference price.

    ``search_text`` is a lower-cased shadow of name and description kept in
    step with every write, so substring search runs in the storage layer.
    """

    name: String(required=True, max_length=255)
    description: Text()
    original_price: Float(min_value=0.0, default=0.0)
    category: String(max_length=100)
    search_text: Text(default="")
    created_at: DateTime(default=lambda: datetime.now(UTC))
    updated_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, name, original_price, description=None, category=None):
        from storefront.product.events import ProductCreated

        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            original_price=to_cents(original_price),
            category=category,
            search_text=_search_text(name, description),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                original_price=product.original_price,
                category=category,
                created_at=now,
            )
        )
        return product

    def update_details(self, **changes):
        """Apply a partial update; only the supplied fields change."""
        from storefront.product.events import ProductDetailsUpdated

        changes = supplied_changes(changes, UPDATABLE_FIELDS)
        if "original_price" in changes:
            changes["original_price"] = to_cents(changes["original_price"])

        for field_name, value in changes.items():
            setattr(self, field_name, value)

        self.search_text = _search_text(self.name, self.description)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                original_price=self.original_price,
                category=self.category,
                updated_fields=json.dumps(sorted(changes)),
                updated_at=self.updated_at,
            )
        )
