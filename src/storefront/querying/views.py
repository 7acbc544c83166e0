"""Read shapes for joined and reported records."""


def product_view(product) -> dict:
    return {
        "id": str(product.id),
        "name": product.name,
        "description": product.description,
        "original_price": product.original_price,
        "category": product.category,
        "created_at": product.created_at,
        "updated_at": product.updated_at,
    }


def store_view(store) -> dict:
    return {
        "id": str(store.id),
        "name": store.name,
        "description": store.description,
        "address": store.address,
        "phone": store.phone,
        "email": store.email,
        "is_active": store.is_active,
        "created_at": store.created_at,
        "updated_at": store.updated_at,
    }


def store_contact_view(store) -> dict:
    return {
        "id": str(store.id),
        "name": store.name,
        "address": store.address,
        "email": store.email,
    }


def store_product_view(store_product, store=None, product=None) -> dict:
    """A StoreProduct row, optionally joined with its store and product."""
    view = {
        "id": str(store_product.id),
        "store_id": str(store_product.store_id),
        "product_id": str(store_product.product_id),
        "stock": store_product.stock,
        "store_price": store_product.store_price,
        "created_at": store_product.created_at,
        "updated_at": store_product.updated_at,
    }
    if store is not None:
        view["store"] = store
    if product is not None:
        view["product"] = product
    return view
