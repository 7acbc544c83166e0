"""Shared BDD fixtures and step definitions for the Storefront domain."""

import pytest
from pytest_bdd import given, parsers, then
from storefront.assortment.inventory import InventoryAssociation
from storefront.product.catalog import CatalogStore
from storefront.reporting.reporter import AggregateReporter
from storefront.store.directory import StoreDirectory


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def stores():
    """Stores created by the scenario, keyed by name."""
    return {}


@pytest.fixture()
def products():
    """Products created by the scenario, keyed by name."""
    return {}


@pytest.fixture()
def listings():
    """Listing rows created by the scenario, keyed by (store, product) name."""
    return {}


@pytest.fixture()
def error():
    """Container for captured errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a store named "{name}"'))
def a_store(stores, name):
    stores[name] = StoreDirectory().create(
        name=name,
        address=f"{name} Street 1",
        phone="+1 555 0100",
        email="store@example.com",
    )


@given(parsers.cfparse('a product named "{name}" priced at {price:f}'))
def a_priced_product(products, name, price):
    products[name] = CatalogStore().create(name=name, original_price=price)


@given(parsers.cfparse('a product named "{name}" described as "{description}"'))
def a_described_product(products, name, description):
    products[name] = CatalogStore().create(name=name, original_price=10.0, description=description)


@given(parsers.cfparse('"{product}" is added to "{store}" with stock {stock:d} at {price:f}'))
def product_listed(stores, products, listings, product, store, stock, price):
    listings[(store, product)] = InventoryAssociation().add(
        stores[store].id,
        products[product].id,
        stock=stock,
        store_price=price,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{store}" lists {count:d} product'))
@then(parsers.cfparse('"{store}" lists {count:d} products'))
def store_lists(stores, store, count):
    assert InventoryAssociation().list_for_store(stores[store].id)["meta"]["total"] == count


@then("the out of stock report is empty")
def out_of_stock_empty():
    assert AggregateReporter().out_of_stock() == []
