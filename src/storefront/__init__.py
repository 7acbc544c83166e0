"""Storefront: product catalog, store directory and per-store inventory."""
