"""InventoryAssociation — what each store carries, in what quantity and at what price."""

import json

from protean.utils.globals import current_domain

from storefront.assortment.management import (
    AddProductToStore,
    RemoveProductFromStore,
    UpdateStoreProduct,
    find_store_product,
)
from storefront.assortment.store_product import StoreProduct
from storefront.product.product import Product
from storefront.querying.pagination import PageRequest, fetch_all, index_by_id, paginate, with_meta
from storefront.querying.views import product_view, store_product_view, store_view
from storefront.store.store import Store


class InventoryAssociation:
    """Operations on StoreProduct rows, always addressed through their store."""

    def add(self, store_id, product_id, stock=0, store_price=None) -> dict:
        """List a product in a store; returns the row joined with both sides.

        Raises ``ObjectNotFoundError`` for an unknown store or product and
        ``ConflictError`` when the store already carries the product.
        """
        store_product_id = current_domain.process(
            AddProductToStore(
                store_id=store_id,
                product_id=product_id,
                stock=stock,
                store_price=store_price,
            ),
            asynchronous=False,
        )
        store_product = current_domain.repository_for(StoreProduct).get(store_product_id)
        store = current_domain.repository_for(Store).get(store_product.store_id)
        product = current_domain.repository_for(Product).get(store_product.product_id)
        return store_product_view(store_product, store=store_view(store), product=product_view(product))

    def list_for_store(
        self,
        store_id,
        pagination: PageRequest | None = None,
        q: str | None = None,
        in_stock: bool | None = None,
    ) -> dict:
        """A page of a store's listings, each joined with its product.

        Ordered by the product's creation time, newest first. ``q`` filters on
        the product's name or description; ``in_stock`` keeps rows with
        positive stock only.
        """
        current_domain.repository_for(Store).get(store_id)

        criteria = {"store_id": str(store_id)}
        if in_stock:
            criteria["stock__gt"] = 0
        store_products = fetch_all(current_domain.repository_for(StoreProduct)._dao.query.filter(**criteria))
        product_criteria = {"search_text__contains": q.lower()} if q else {}
        products = index_by_id(Product, (sp.product_id for sp in store_products), **product_criteria)

        joined = [(sp, products.get(str(sp.product_id))) for sp in store_products]
        if q:
            joined = [(sp, product) for sp, product in joined if product is not None]

        joined.sort(
            key=lambda row: (row[1] is not None, row[1].created_at if row[1] is not None else None),
            reverse=True,
        )

        rows = [
            store_product_view(sp, product=product_view(product) if product is not None else None)
            for sp, product in joined
        ]
        return with_meta(paginate(rows, pagination))

    def update(self, store_id, store_product_id, **changes) -> dict:
        """Change only the supplied ``stock`` and/or ``store_price``."""
        current_domain.process(
            UpdateStoreProduct(
                store_id=store_id,
                store_product_id=store_product_id,
                changes=json.dumps(changes, default=float),
            ),
            asynchronous=False,
        )
        store_product = find_store_product(store_id, store_product_id)
        product = current_domain.repository_for(Product).get(store_product.product_id)
        return store_product_view(store_product, product=product_view(product))

    def remove(self, store_id, store_product_id) -> None:
        current_domain.process(
            RemoveProductFromStore(store_id=store_id, store_product_id=store_product_id),
            asynchronous=False,
        )
