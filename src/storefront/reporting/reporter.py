"""AggregateReporter — read-only dashboard views across products, stores and listings."""

from collections import defaultdict

from protean.utils.globals import current_domain

from storefront.assortment.store_product import StoreProduct
from storefront.product.product import Product
from storefront.querying.pagination import (
    OUT_OF_STOCK_DEFAULT_LIMIT,
    OUT_OF_STOCK_MAX_LIMIT,
    TOP_STORES_DEFAULT_LIMIT,
    TOP_STORES_MAX_LIMIT,
    clamp_limit,
    count,
    fetch_all,
    index_by_id,
)
from storefront.store.store import Store

UNNAMED_PRODUCT = "unnamed product"
UNKNOWN_STORE = "unknown store"


class AggregateReporter:
    def out_of_stock(self, limit=OUT_OF_STOCK_DEFAULT_LIMIT) -> list[dict]:
        """Listings with no stock left, most recently updated first.

        ``limit`` is clamped to [1, 20]; anything non-positive or non-numeric
        falls back to 5.
        """
        size = clamp_limit(limit, OUT_OF_STOCK_MAX_LIMIT, OUT_OF_STOCK_DEFAULT_LIMIT)
        store_products = (
            current_domain.repository_for(StoreProduct)
            ._dao.query.filter(stock__lte=0)
            .order_by("-updated_at")
            .limit(size)
            .all()
            .items
        )
        products = index_by_id(Product, (sp.product_id for sp in store_products))
        stores = index_by_id(Store, (sp.store_id for sp in store_products))

        report = []
        for store_product in store_products:
            product = products.get(str(store_product.product_id))
            store = stores.get(str(store_product.store_id))
            report.append(
                {
                    "id": str(store_product.id),
                    "stock": store_product.stock,
                    "updated_at": store_product.updated_at,
                    "product": {
                        "id": str(store_product.product_id),
                        "name": product.name if product else UNNAMED_PRODUCT,
                        "category": product.category if product else None,
                    },
                    "store": {
                        "id": str(store_product.store_id),
                        "name": store.name if store else UNKNOWN_STORE,
                    },
                }
            )
        return report

    def summary(self) -> dict:
        return {
            "total_products": count(Product),
            "total_stores": count(Store),
            "inactive_stores": count(Store, is_active=False),
            "out_of_stock_products": count(StoreProduct, stock=0),
        }

    def top_stores(self, limit=TOP_STORES_DEFAULT_LIMIT) -> list[dict]:
        """The most recently created stores with their inventory totals.

        Totals for all selected stores come from a single listing query.
        """
        size = clamp_limit(limit, TOP_STORES_MAX_LIMIT, TOP_STORES_DEFAULT_LIMIT)
        stores = current_domain.repository_for(Store)._dao.query.order_by("-created_at").limit(size).all().items
        if not stores:
            return []

        store_ids = [str(store.id) for store in stores]
        totals = defaultdict(lambda: {"total_products": 0, "total_inventory": 0})
        for store_product in fetch_all(
            current_domain.repository_for(StoreProduct)._dao.query.filter(store_id__in=store_ids)
        ):
            entry = totals[str(store_product.store_id)]
            entry["total_products"] += 1
            entry["total_inventory"] += store_product.stock or 0

        return [
            {
                "id": str(store.id),
                "name": store.name,
                "is_active": store.is_active,
                "total_products": totals[str(store.id)]["total_products"],
                "total_inventory": totals[str(store.id)]["total_inventory"],
                "created_at": store.created_at,
            }
            for store in stores
        ]
