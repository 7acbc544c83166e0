"""StoreDirectory — the store directory's read and write operations."""

import json

from protean.utils.globals import current_domain

from storefront.querying.pagination import PageRequest, page_of
from storefront.shared.text import normalize_text
from storefront.store.management import CreateStore, RemoveStore, UpdateStore
from storefront.store.store import Store


class StoreDirectory:
    def list(self, pagination: PageRequest | None = None, q: str | None = None) -> dict:
        """A page of stores, newest first.

        ``q`` is matched against store names after normalizing both sides, so
        "tienda" finds "Tiéndà!".
        """
        queryset = current_domain.repository_for(Store)._dao.query
        if q:
            queryset = queryset.filter(search_name__contains=normalize_text(q))
        return page_of(queryset.order_by("-created_at"), pagination)

    def get(self, store_id) -> Store:
        return current_domain.repository_for(Store).get(store_id)

    def create(self, name, address, phone, email, description=None) -> Store:
        store_id = current_domain.process(
            CreateStore(
                name=name,
                address=address,
                phone=phone,
                email=email,
                description=description,
            ),
            asynchronous=False,
        )
        return self.get(store_id)

    def update(self, store_id, **changes) -> Store:
        """Change only the fields passed as keyword arguments."""
        current_domain.process(
            UpdateStore(store_id=store_id, changes=json.dumps(changes)),
            asynchronous=False,
        )
        return self.get(store_id)

    def remove(self, store_id) -> None:
        """Delete the store along with every product listing it holds."""
        current_domain.process(RemoveStore(store_id=store_id), asynchronous=False)
