"""Store management — commands and handler."""

import json

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.assortment.management import delete_store_products
from storefront.domain import storefront
from storefront.store.store import Store

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Store")
class CreateStore:
    name: String(required=True, max_length=255)
    description: Text()
    address: String(required=True, max_length=255)
    phone: String(required=True, max_length=50)
    email: String(required=True, max_length=255)


@storefront.command(part_of="Store")
class UpdateStore:
    store_id: Identifier(required=True)
    changes: Text(required=True)  # JSON object of the supplied fields


@storefront.command(part_of="Store")
class RemoveStore:
    store_id: Identifier(required=True)


@storefront.command_handler(part_of=Store)
class ManageStoreHandler:
    @handle(CreateStore)
    def create_store(self, command):
        store = Store.create(
            name=command.name,
            description=command.description,
            address=command.address,
            phone=command.phone,
            email=command.email,
        )
        current_domain.repository_for(Store).add(store)
        return str(store.id)

    @handle(UpdateStore)
    def update_store(self, command):
        repo = current_domain.repository_for(Store)
        store = repo.get(command.store_id)
        store.update_details(**json.loads(command.changes))
        repo.add(store)

    @handle(RemoveStore)
    def remove_store(self, command):
        repo = current_domain.repository_for(Store)
        store = repo.get(command.store_id)

        removed = delete_store_products(store_id=str(store.id))
        repo._dao.delete(store)

        logger.info(
            "Store removed from directory",
            store_id=str(store.id),
            store_products_removed=removed,
        )
