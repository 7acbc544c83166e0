"""Domain events for the StoreProduct aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, Text

from storefront.domain import storefront


@storefront.event(part_of="StoreProduct")
class ProductListed:
    """A store started carrying a product."""

    __version__ = 1

    store_product_id: Identifier(required=True)
    store_id: Identifier(required=True)
    product_id: Identifier(required=True)
    stock: Integer(default=0)
    store_price: Float()
    listed_at: DateTime(required=True)


@storefront.event(part_of="StoreProduct")
class ListingUpdated:
    """A store changed the stock or price of a product it carries."""

    __version__ = 1

    store_product_id: Identifier(required=True)
    store_id: Identifier(required=True)
    product_id: Identifier(required=True)
    stock: Integer(default=0)
    store_price: Float()
    updated_fields: Text()  # JSON list of changed field names
    updated_at: DateTime(required=True)
