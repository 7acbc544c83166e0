"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalog."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    original_price: Float(default=0.0)
    category: String()
    created_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    """Some of a product's details were changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    original_price: Float(default=0.0)
    category: String()
    updated_fields: Text()  # JSON list of changed field names
    updated_at: DateTime(required=True)
