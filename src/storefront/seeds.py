"""Demo data for local development.

Creates a handful of stores and products, then spreads the products across
the stores with random stock levels and store-specific prices. Each step is
skipped when its records already exist.
"""

import math
import random

import structlog
from protean.utils.globals import current_domain

from storefront.assortment.inventory import InventoryAssociation
from storefront.assortment.store_product import StoreProduct
from storefront.product.catalog import CatalogStore
from storefront.product.product import Product
from storefront.querying.pagination import count, fetch_all
from storefront.shared.money import to_cents
from storefront.store.directory import StoreDirectory
from storefront.store.store import Store

logger = structlog.get_logger(__name__)

STORES = [
    {
        "name": "Central",
        "description": "Flagship store in the city center with the widest range.",
        "address": "123 Main Ave, Downtown",
        "phone": "+1 555 0100",
        "email": "central@storefront.example",
    },
    {
        "name": "Tienda Norte",
        "description": "Neighbourhood shop focused on local and handmade goods.",
        "address": "456 North St, Northside",
        "phone": "+1 555 0101",
        "email": "norte@storefront.example",
    },
    {
        "name": "Café & Compañía",
        "description": "Coffee shop corner with a small selection of home goods.",
        "address": "78 Harbour Rd, Old Town",
        "phone": "+1 555 0102",
        "email": "cafe@storefront.example",
    },
    {
        "name": "Campus Express",
        "description": None,
        "address": "1 University Way, Campus",
        "phone": "+1 555 0103",
        "email": "campus@storefront.example",
    },
]

PRODUCTS = [
    {"name": "Laptop", "description": "15-inch laptop, 16GB RAM, 512GB SSD.", "original_price": 1299.99, "category": "Electronics"},
    {"name": "Wireless Earbuds", "description": "Noise cancelling, water resistant.", "original_price": 249.99, "category": "Electronics"},
    {"name": "Mechanical Keyboard", "description": "Tenkeyless, hot-swappable switches.", "original_price": 149.99, "category": "Electronics"},
    {"name": "Ultrawide Monitor", "description": "34-inch curved display.", "original_price": 549.99, "category": "Electronics"},
    {"name": "Cotton T-Shirt", "description": "Plain crew-neck tee.", "original_price": 19.99, "category": "Clothing"},
    {"name": "Slim Fit Jeans", "description": "Stretch denim.", "original_price": 79.99, "category": "Clothing"},
    {"name": "Winter Coat", "description": "Insulated, hooded.", "original_price": 199.99, "category": "Clothing"},
    {"name": "LED Desk Lamp", "description": "Dimmable with USB charging port.", "original_price": 49.99, "category": "Home"},
    {"name": "Espresso Machine", "description": "15 bar pump, milk frother.", "original_price": 299.99, "category": "Home"},
    {"name": "Yoga Mat", "description": "Non-slip, 6mm.", "original_price": 29.99, "category": "Sports"},
    {"name": "Mountain Bike", "description": "Aluminium frame, 21 speeds.", "original_price": 599.99, "category": "Sports"},
    {"name": "E-Reader", "description": "Glare-free 6.8-inch screen.", "original_price": 139.99, "category": None},
]

# Share of extra random products each store carries beyond its own slice
_EXTRA_PRODUCT_SHARE = 0.2
_MAX_SEED_STOCK = 100
# Probability that a listing gets its own price
_STORE_PRICE_PROBABILITY = 0.7
# Store prices land between 20% below and 15% above the catalog price
_PRICE_VARIATION = (-0.20, 0.15)


def seed_stores() -> int:
    if count(Store):
        logger.info("Stores already present, skipping store seed")
        return 0

    directory = StoreDirectory()
    for store in STORES:
        directory.create(**store)
    logger.info("Seeded stores", count=len(STORES))
    return len(STORES)


def seed_products() -> int:
    if count(Product):
        logger.info("Products already present, skipping product seed")
        return 0

    catalog = CatalogStore()
    for product in PRODUCTS:
        catalog.create(**product)
    logger.info("Seeded products", count=len(PRODUCTS))
    return len(PRODUCTS)


def store_price_for(original_price, rng) -> float | None:
    """A store-specific price near ``original_price``, or None."""
    if rng.random() >= _STORE_PRICE_PROBABILITY:
        return None

    low, high = _PRICE_VARIATION
    variation = rng.uniform(low, high) * original_price
    return max(0.01, to_cents(original_price + variation))


def seed_store_products(rng: random.Random | None = None) -> int:
    """Spread products over stores.

    Store ``i`` carries the ``i``-th contiguous slice of the product list plus
    up to 20% of the remaining products picked at random.
    """
    rng = rng or random.Random()

    if count(StoreProduct):
        logger.info("Store products already present, skipping store product seed")
        return 0

    stores = fetch_all(current_domain.repository_for(Store)._dao.query.order_by("created_at"))
    products = fetch_all(current_domain.repository_for(Product)._dao.query.order_by("created_at"))
    if not stores or not products:
        logger.warning("Stores and products are required before seeding store products")
        return 0

    inventory = InventoryAssociation()
    per_store = math.ceil(len(products) / len(stores))
    extra = math.floor(len(products) * _EXTRA_PRODUCT_SHARE)

    created = 0
    for index, store in enumerate(stores):
        own = products[index * per_store : (index + 1) * per_store]
        others = [product for product in products if product not in own]
        picked = own + rng.sample(others, min(extra, len(others)))

        for product in picked:
            inventory.add(
                store_id=store.id,
                product_id=product.id,
                stock=rng.randint(0, _MAX_SEED_STOCK),
                store_price=store_price_for(product.original_price or 0.0, rng),
            )
            created += 1

        logger.info("Seeded store products", store=store.name, count=len(picked))

    return created


def seed_catalog(rng: random.Random | None = None) -> dict:
    return {
        "stores": seed_stores(),
        "products": seed_products(),
        "store_products": seed_store_products(rng),
    }
