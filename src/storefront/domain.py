"""Storefront bounded context — Catalog, Store Directory and Store Inventory.

Products and stores are standard CQRS aggregates. The StoreProduct aggregate
joins them and carries per-store stock and pricing.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging

# Configure logging for the application
configure_logging(log_dir="logs", log_file_prefix="storefront")

# Domain Composition Root
storefront = Domain(name="storefront")
