"""
Cart HTTP API.
"""
from decimal import Decimal
from unittest import mock
from uuid import uuid4

import pytest
from django.db import OperationalError
from rest_framework import status

from apps.cart.domain.entities import MAX_LINE_QUANTITY
from apps.catalog.infrastructure.models import ProductModel

pytestmark = pytest.mark.django_db

CART_URL = '/api/v1/cart/'
ADD_URL = '/api/v1/cart/add/'
UPDATE_URL = '/api/v1/cart/update/'
DELETE_URL = '/api/v1/cart/delete/'


def add(client, item_id, quantity):
    return client.post(ADD_URL, {'item_id': str(item_id), 'quantity': quantity}, format='json')


def update(client, item_id, quantity):
    return client.put(UPDATE_URL, {'item_id': str(item_id), 'quantity': quantity}, format='json')


def remove(client, item_id):
    return client.delete(DELETE_URL, {'item_id': str(item_id)}, format='json')


def lines(response):
    return [(item['item_id'], item['quantity']) for item in response.data['cart']['items']]


class TestCartLifecycle:

    def test_add_merge_update_and_empty(self, authenticated_client, make_product):
        p1 = make_product(price='10.00')
        p1_id = str(p1.id)

        response = add(authenticated_client, p1.id, 2)
        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['message'] == "Product added to cart successfully."
        assert lines(response) == [(p1_id, 2)]

        response = add(authenticated_client, p1.id, 3)
        assert lines(response) == [(p1_id, 5)]

        response = update(authenticated_client, p1.id, 1)
        assert response.status_code == status.HTTP_200_OK
        assert lines(response) == [(p1_id, 1)]

        response = update(authenticated_client, p1.id, 0)
        assert response.status_code == status.HTTP_200_OK
        assert lines(response) == []

        response = authenticated_client.get(CART_URL)
        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['cart']['items'] == []
        assert response.data['cart']['is_empty'] is True
        assert response.data['total_amount'] == Decimal('0')

    def test_delete_removes_line(self, authenticated_client, make_product):
        product = make_product()
        add(authenticated_client, product.id, 4)

        response = remove(authenticated_client, product.id)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == "Product removed from cart successfully."
        assert lines(response) == []

    def test_cart_belongs_to_the_authenticated_user(
        self, authenticated_client, make_product, django_user_model
    ):
        product = make_product()
        add(authenticated_client, product.id, 2)

        other = django_user_model.objects.create_user(username='other', password='pass12345')
        from rest_framework.test import APIClient
        other_client = APIClient()
        other_client.force_authenticate(user=other)

        response = other_client.get(CART_URL)

        assert response.data['cart']['is_empty'] is True


class TestCartSnapshot:

    def test_no_cart_is_empty_success(self, authenticated_client):
        response = authenticated_client.get(CART_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == "Your cart is empty."
        assert response.data['cart']['items'] == []
        assert response.data['total_amount'] == Decimal('0')
        assert response.data['has_unavailable_items'] is False

    def test_total_reflects_live_prices(self, authenticated_client, make_product):
        cheap = make_product(name='Cheap', price='2.50')
        discounted = make_product(name='Discounted', price='20.00', discount_price='15.00')
        add(authenticated_client, cheap.id, 4)
        add(authenticated_client, discounted.id, 1)

        response = authenticated_client.get(CART_URL)

        assert response.data['total_amount'] == Decimal('25.00')
        items = {item['name']: item for item in response.data['cart']['items']}
        assert items['Discounted']['unit_price'] == Decimal('15.00')
        assert items['Cheap']['subtotal'] == Decimal('10.00')
        assert response.data['cart']['item_count'] == 2
        assert response.data['cart']['unit_count'] == 5
        assert response.data['currency'] == 'USD'

        ProductModel.objects.filter(id=cheap.id).update(price=Decimal('3.00'))

        response = authenticated_client.get(CART_URL)
        assert response.data['total_amount'] == Decimal('27.00')

    def test_deactivated_product_is_flagged(self, authenticated_client, make_product):
        kept = make_product(price='5.00')
        retired = make_product(price='50.00')
        add(authenticated_client, kept.id, 1)
        add(authenticated_client, retired.id, 1)

        ProductModel.objects.filter(id=retired.id).update(is_active=False)
        response = authenticated_client.get(CART_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_amount'] == Decimal('5.00')
        assert response.data['has_unavailable_items'] is True
        flagged = [i for i in response.data['cart']['items'] if not i['is_available']]
        assert [i['item_id'] for i in flagged] == [str(retired.id)]
        assert flagged[0]['unit_price'] is None

    def test_rendered_json_uses_numbers(self, authenticated_client, make_product):
        product = make_product(price='10.00')
        add(authenticated_client, product.id, 3)

        body = authenticated_client.get(CART_URL).json()

        assert body['total_amount'] == 30.0


class TestCartErrors:

    @pytest.mark.parametrize('quantity', [0, -1])
    def test_add_rejects_non_positive_quantity(self, authenticated_client, make_product, quantity):
        product = make_product()

        response = add(authenticated_client, product.id, quantity)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert 'quantity' in response.data['details']
        assert authenticated_client.get(CART_URL).data['cart']['is_empty'] is True

    def test_update_rejects_negative_quantity(self, authenticated_client, make_product):
        product = make_product()
        add(authenticated_client, product.id, 1)

        response = update(authenticated_client, product.id, -1)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.parametrize('body', [
        {},
        {'quantity': 1},
        {'item_id': 'not-a-uuid', 'quantity': 1},
        {'item_id': str(uuid4()), 'quantity': 'many'},
    ])
    def test_add_rejects_malformed_body(self, authenticated_client, body):
        response = authenticated_client.post(ADD_URL, body, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False

    def test_unknown_item_is_404_for_every_mutation(self, authenticated_client, make_product):
        product = make_product()
        add(authenticated_client, product.id, 2)
        unknown = uuid4()

        for response in (
            add(authenticated_client, unknown, 1),
            update(authenticated_client, unknown, 1),
            remove(authenticated_client, unknown),
        ):
            assert response.status_code == status.HTTP_404_NOT_FOUND
            assert response.data['code'] == 'PRODUCT_NOT_FOUND'

        assert lines(authenticated_client.get(CART_URL)) == [(str(product.id), 2)]

    def test_update_without_cart(self, authenticated_client, make_product):
        product = make_product()

        response = update(authenticated_client, product.id, 1)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'CART_NOT_FOUND'

    def test_delete_item_not_in_cart(self, authenticated_client, make_product):
        in_cart, elsewhere = make_product(), make_product()
        add(authenticated_client, in_cart.id, 1)

        response = remove(authenticated_client, elsewhere.id)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'CART_ITEM_NOT_FOUND'

    @pytest.mark.parametrize('method, url', [
        ('get', CART_URL),
        ('post', ADD_URL),
        ('put', UPDATE_URL),
        ('delete', DELETE_URL),
    ])
    def test_requires_authentication(self, api_client, method, url):
        response = getattr(api_client, method)(url, {}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['success'] is False

    def test_unreachable_catalog_is_503(self, authenticated_client):
        with mock.patch.object(
            ProductModel.objects, 'get', side_effect=OperationalError('catalog down')
        ):
            response = add(authenticated_client, uuid4(), 1)

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data['code'] == 'DEPENDENCY_UNAVAILABLE'


class TestQuantityLimit:

    @pytest.mark.parametrize('quantity', [MAX_LINE_QUANTITY + 1, 10 ** 12, 2 ** 63])
    def test_add_above_the_limit_is_400(self, authenticated_client, make_product, quantity):
        product = make_product()

        response = add(authenticated_client, product.id, quantity)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'quantity' in response.data['details']
        assert authenticated_client.get(CART_URL).data['cart']['is_empty'] is True

    def test_update_above_the_limit_is_400(self, authenticated_client, make_product):
        product = make_product()
        add(authenticated_client, product.id, 1)

        response = update(authenticated_client, product.id, MAX_LINE_QUANTITY + 1)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert lines(authenticated_client.get(CART_URL)) == [(str(product.id), 1)]

    def test_merge_past_the_limit_is_400_and_cart_stays_readable(
        self, authenticated_client, make_product
    ):
        product = make_product()
        add(authenticated_client, product.id, MAX_LINE_QUANTITY)

        response = add(authenticated_client, product.id, 1)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['code'] == 'VALIDATION_ERROR'
        assert response.data['field'] == 'quantity'
        snapshot = authenticated_client.get(CART_URL)
        assert snapshot.status_code == status.HTTP_200_OK
        assert lines(snapshot) == [(str(product.id), MAX_LINE_QUANTITY)]

    def test_full_lines_at_the_highest_price_render(self, authenticated_client, make_product):
        price = Decimal('9999999999.99')
        for name in ('First', 'Second'):
            product = make_product(name=name, price=str(price))
            add(authenticated_client, product.id, MAX_LINE_QUANTITY)

        response = authenticated_client.get(CART_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['cart']['items'][0]['subtotal'] == price * MAX_LINE_QUANTITY
        assert response.data['total_amount'] == price * MAX_LINE_QUANTITY * 2
