"""Store assortment management — commands and handler for StoreProduct."""

import json

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, Integer, Text
from protean.utils.globals import current_domain

from storefront.assortment.store_product import StoreProduct, listing_key
from storefront.domain import storefront
from storefront.product.product import Product
from storefront.querying.pagination import fetch_all
from storefront.shared.errors import ConflictError
from storefront.store.store import Store

logger = structlog.get_logger(__name__)

_DUPLICATE_LISTING = {"store_product": ["Product is already listed in this store"]}


@storefront.command(part_of="StoreProduct")
class AddProductToStore:
    """Start carrying a catalog product in a store."""

    store_id: Identifier(required=True)
    product_id: Identifier(required=True)
    stock: Integer(min_value=0, default=0)
    store_price: Float(min_value=0.0)


@storefront.command(part_of="StoreProduct")
class UpdateStoreProduct:
    """Patch the stock and/or price of a product carried by a store."""

    store_id: Identifier(required=True)
    store_product_id: Identifier(required=True)
    changes: Text(required=True)  # JSON object of the supplied fields


@storefront.command(part_of="StoreProduct")
class RemoveProductFromStore:
    """Stop carrying a product in a store."""

    store_id: Identifier(required=True)
    store_product_id: Identifier(required=True)


def find_store_product(store_id, store_product_id):
    """Resolve a StoreProduct that belongs to the given store.

    Raises ``ObjectNotFoundError`` when the store does not exist, or when no
    StoreProduct with that id is listed under it.
    """
    current_domain.repository_for(Store).get(store_id)

    matches = (
        current_domain.repository_for(StoreProduct)
        ._dao.query.filter(id=str(store_product_id), store_id=str(store_id))
        .all()
        .items
    )
    if not matches:
        raise ObjectNotFoundError(
            {"store_product": [f"StoreProduct {store_product_id} not found in store {store_id}"]}
        )
    return matches[0]


def listing_exists(key):
    """Whether a StoreProduct with this listing key is already stored."""
    return bool(current_domain.repository_for(StoreProduct)._dao.query.filter(listing_key=key).all().items)


def delete_store_products(**criteria):
    """Delete every StoreProduct matching ``criteria``; returns how many went."""
    repo = current_domain.repository_for(StoreProduct)
    doomed = fetch_all(repo._dao.query.filter(**criteria))
    for store_product in doomed:
        repo._dao.delete(store_product)
    return len(doomed)


@storefront.command_handler(part_of=StoreProduct)
class StoreAssortmentHandler:
    @handle(AddProductToStore)
    def add_product_to_store(self, command):
        current_domain.repository_for(Store).get(command.store_id)
        current_domain.repository_for(Product).get(command.product_id)

        repo = current_domain.repository_for(StoreProduct)
        key = listing_key(command.store_id, command.product_id)
        if listing_exists(key):
            raise ConflictError(_DUPLICATE_LISTING)

        store_product = StoreProduct.create(
            store_id=command.store_id,
            product_id=command.product_id,
            stock=command.stock or 0,
            store_price=command.store_price,
        )
        try:
            repo.add(store_product)
        except ValidationError as exc:
            # Lost a race against a concurrent insert of the same pair
            if "listing_key" in (exc.messages or {}):
                raise ConflictError(_DUPLICATE_LISTING) from exc
            raise

        logger.info(
            "Product listed in store",
            store_id=str(command.store_id),
            product_id=str(command.product_id),
            store_product_id=str(store_product.id),
            stock=store_product.stock,
        )
        return str(store_product.id)

    @handle(UpdateStoreProduct)
    def update_store_product(self, command):
        store_product = find_store_product(command.store_id, command.store_product_id)
        store_product.update_listing(**json.loads(command.changes))
        current_domain.repository_for(StoreProduct).add(store_product)

    @handle(RemoveProductFromStore)
    def remove_product_from_store(self, command):
        store_product = find_store_product(command.store_id, command.store_product_id)
        current_domain.repository_for(StoreProduct)._dao.delete(store_product)

        logger.info(
            "Product removed from store",
            store_id=str(command.store_id),
            store_product_id=str(command.store_product_id),
        )
