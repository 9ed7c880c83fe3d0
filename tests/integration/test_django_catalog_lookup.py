"""
Django ORM catalog lookup.
"""
from decimal import Decimal
from unittest import mock
from uuid import uuid4

import pytest
from django.db import OperationalError

from apps.catalog.domain.exceptions import CatalogItemNotFoundError
from apps.catalog.infrastructure.models import ProductModel
from apps.catalog.infrastructure.repositories import DjangoCatalogLookup
from shared.domain.exceptions import DependencyError

pytestmark = pytest.mark.django_db


@pytest.fixture
def lookup():
    return DjangoCatalogLookup()


def test_get_returns_sellable_price(lookup, make_product):
    product = make_product(price='20.00', discount_price='17.50')

    item = lookup.get(product.id)

    assert item.item_id == product.id
    assert item.sellable_price.amount == Decimal('17.50')
    assert item.price.amount == Decimal('20.00')


def test_get_unknown_or_inactive_is_none(lookup, make_product):
    inactive = make_product(is_active=False)

    assert lookup.get(uuid4()) is None
    assert lookup.get(inactive.id) is None


def test_require_raises_not_found(lookup):
    with pytest.raises(CatalogItemNotFoundError):
        lookup.require(uuid4())


def test_get_many_skips_missing_ids(lookup, make_product):
    first = make_product(name='First')
    second = make_product(name='Second')
    missing = uuid4()

    found = lookup.get_many([first.id, second.id, missing])

    assert set(found) == {first.id, second.id}
    assert lookup.get_many([]) == {}


def test_database_failure_becomes_dependency_error(lookup):
    with mock.patch.object(ProductModel.objects, 'get', side_effect=OperationalError('down')):
        with pytest.raises(DependencyError):
            lookup.get(uuid4())
