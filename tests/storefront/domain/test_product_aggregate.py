import json

import pytest
from protean.exceptions import ValidationError
from storefront.product.events import ProductCreated, ProductDetailsUpdated
from storefront.product.product import Product


def _create_product(**overrides):
    defaults = {
        "name": "Laptop",
        "original_price": 1299.99,
        "description": "15-inch, 16GB RAM",
        "category": "Electronics",
    }
    defaults.update(overrides)
    return Product.create(**defaults)


class TestProductCreation:
    def test_create_sets_fields(self):
        product = _create_product()

        assert product.id is not None
        assert product.name == "Laptop"
        assert product.original_price == 1299.99
        assert product.description == "15-inch, 16GB RAM"
        assert product.category == "Electronics"
        assert product.created_at is not None
        assert product.updated_at == product.created_at

    def test_optional_fields_default_to_none(self):
        product = Product.create(name="Mug", original_price=9.5)
        assert product.description is None
        assert product.category is None

    def test_price_is_rounded_to_cents(self):
        product = _create_product(original_price=10.456)
        assert product.original_price == 10.46

    def test_half_cent_rounds_up(self):
        product = _create_product(original_price=1.005)
        assert product.original_price == 1.01

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _create_product(original_price=-1)
        assert "original_price" in exc.value.messages

    def test_name_required(self):
        with pytest.raises(ValidationError) as exc:
            _create_product(name=None)
        assert "name" in exc.value.messages

    def test_create_raises_event(self):
        product = _create_product()

        assert len(product._events) == 1
        event = product._events[0]
        assert isinstance(event, ProductCreated)
        assert event.product_id == product.id
        assert event.name == "Laptop"
        assert event.original_price == 1299.99


class TestProductUpdate:
    def test_only_supplied_fields_change(self):
        product = _create_product()
        product.update_details(original_price=1199.99)

        assert product.original_price == 1199.99
        assert product.name == "Laptop"
        assert product.description == "15-inch, 16GB RAM"
        assert product.category == "Electronics"

    def test_explicit_none_clears_optional_field(self):
        product = _create_product()
        product.update_details(category=None)
        assert product.category is None

    def test_unknown_field_rejected(self):
        product = _create_product()
        with pytest.raises(ValidationError) as exc:
            product.update_details(sku="LP-1")
        assert "sku" in exc.value.messages

    def test_update_bumps_updated_at(self):
        product = _create_product()
        before = product.updated_at
        product.update_details(name="Laptop Pro")
        assert product.updated_at >= before

    def test_update_raises_event_with_changed_fields(self):
        product = _create_product()
        product._events.clear()

        product.update_details(name="Laptop Pro", category="Computers")

        event = product._events[-1]
        assert isinstance(event, ProductDetailsUpdated)
        assert event.name == "Laptop Pro"
        assert json.loads(event.updated_fields) == ["category", "name"]


class TestProductSearchText:
    def test_lowercases_name_and_description(self):
        product = _create_product()
        assert "laptop" in product.search_text
        assert "16gb" in product.search_text

    def test_missing_description(self):
        product = Product.create(name="Mug", original_price=9.5)
        assert product.search_text.startswith("mug")

    def test_term_does_not_span_name_and_description(self):
        product = _create_product(name="Desk", description="Lamp")
        assert "desklamp" not in product.search_text

    def test_follows_updates(self):
        product = _create_product()
        product.update_details(description="Ultrabook")
        assert "ultrabook" in product.search_text
        assert "16gb" not in product.search_text
