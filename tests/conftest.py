"""
Pytest configuration and fixtures.
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.catalog.domain.entities import CatalogItem
from apps.catalog.domain.value_objects import Money


@pytest.fixture(autouse=True)
def reset_container():
    """Each test gets fresh store and lookup instances."""
    from apps.cart.infrastructure import container
    container.reset()
    yield
    container.reset()


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username='testuser',
        email='test@example.com',
        password='testpass123',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Create an authenticated API client."""
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def make_product(db):
    """Factory for catalog products stored in the database."""
    from apps.catalog.infrastructure.models import ProductModel

    def _make_product(name='Widget', price='10.00', discount_price=None, is_active=True):
        return ProductModel.objects.create(
            name=name,
            price=Decimal(price),
            discount_price=Decimal(discount_price) if discount_price is not None else None,
            is_active=is_active,
        )

    return _make_product


@pytest.fixture
def catalog():
    """In-memory catalog for use case tests."""
    from apps.catalog.infrastructure.repositories import InMemoryCatalogLookup
    return InMemoryCatalogLookup()


@pytest.fixture
def cart_repository():
    """In-memory cart store for use case tests."""
    from apps.cart.infrastructure.repositories import InMemoryCartRepository
    return InMemoryCartRepository()


@pytest.fixture
def stock_item(catalog):
    """Factory registering a product in the in-memory catalog."""

    def _stock_item(name='Widget', price='10.00', discount_price=None):
        item = CatalogItem(
            item_id=uuid4(),
            name=name,
            price=Money(amount=Decimal(price)),
            discount_price=Money(amount=Decimal(discount_price)) if discount_price else None,
        )
        catalog.put(item)
        return item

    return _stock_item
