"""CatalogStore — the product catalog's read and write operations."""

import json

from protean.utils.globals import current_domain

from storefront.assortment.store_product import StoreProduct
from storefront.product.management import CreateProduct, RemoveProduct, UpdateProduct
from storefront.product.product import Product
from storefront.querying.pagination import PageRequest, fetch_all, index_by_id, page_of
from storefront.querying.views import store_contact_view, store_product_view
from storefront.store.store import Store


class CatalogStore:
    """Products, independent of the stores that carry them."""

    def list(self, pagination: PageRequest | None = None, q: str | None = None) -> dict:
        """A page of products, newest first, optionally filtered by ``q``.

        ``q`` matches name or description as a case-insensitive substring.
        """
        queryset = current_domain.repository_for(Product)._dao.query
        if q:
            queryset = queryset.filter(search_text__contains=q.lower())
        return page_of(queryset.order_by("-created_at"), pagination)

    def get(self, product_id) -> Product:
        return current_domain.repository_for(Product).get(product_id)

    def create(self, name, original_price, description=None, category=None) -> Product:
        product_id = current_domain.process(
            CreateProduct(
                name=name,
                original_price=original_price,
                description=description,
                category=category,
            ),
            asynchronous=False,
        )
        return self.get(product_id)

    def update(self, product_id, **changes) -> Product:
        """Change only the fields passed as keyword arguments."""
        current_domain.process(
            UpdateProduct(product_id=product_id, changes=json.dumps(changes, default=float)),
            asynchronous=False,
        )
        return self.get(product_id)

    def remove(self, product_id) -> None:
        """Delete the product along with every store listing of it."""
        current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)

    def list_stores_for_product(self, product_id):
        """Every store listing of a product, most recently listed first."""
        product = self.get(product_id)

        store_products = fetch_all(
            current_domain.repository_for(StoreProduct)
            ._dao.query.filter(product_id=str(product.id))
            .order_by("-created_at")
        )
        stores = index_by_id(Store, (sp.store_id for sp in store_products))

        rows = []
        for store_product in store_products:
            store = stores.get(str(store_product.store_id))
            rows.append(
                store_product_view(
                    store_product,
                    store=store_contact_view(store) if store else None,
                )
            )
        return rows
