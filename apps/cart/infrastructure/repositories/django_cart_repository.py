"""
Django ORM implementation of CartRepository.
"""
import logging
from contextlib import contextmanager
from typing import Optional
from uuid import UUID

from django.db import DatabaseError, transaction
from django.db.models import F
from django.utils import timezone

from shared.domain.exceptions import DependencyError
from ...domain.entities.cart import Cart
from ...domain.entities.cart_line_item import CartLineItem, MAX_LINE_QUANTITY
from ...domain.exceptions import (
    CartNotFoundError,
    CartItemNotFoundError,
    InvalidQuantityError,
)
from ...domain.repositories.cart_repository import CartRepository
from ..models.cart_model import CartModel, CartItemModel

logger = logging.getLogger(__name__)


class DjangoCartRepository(CartRepository):
    """
    Django ORM based cart repository implementation.

    Every mutation runs in one transaction that first locks the owner's cart
    row (``SELECT ... FOR UPDATE``), so concurrent requests for the same owner
    are serialized by the database even across service instances. Quantity
    merges use an ``F()`` expression so the increment happens in SQL.
    """

    def find_by_owner(self, owner_id: str) -> Optional[Cart]:
        """Find the cart of an owner."""
        with self._store_errors():
            try:
                model = CartModel.objects.prefetch_related('items').get(owner_id=owner_id)
            except CartModel.DoesNotExist:
                return None
            return self._to_entity(model)

    def save(self, cart: Cart) -> Cart:
        """Save a whole cart, syncing its line rows."""
        with self._store_errors(), transaction.atomic():
            CartModel.objects.get_or_create(
                owner_id=cart.owner_id,
                defaults={'id': cart.id},
            )
            model = self._lock_cart(cart.owner_id)

            item_ids = [item.item_id for item in cart.items]
            CartItemModel.objects.filter(cart=model).exclude(item_id__in=item_ids).delete()
            for item in cart.items:
                CartItemModel.objects.update_or_create(
                    cart=model,
                    item_id=item.item_id,
                    defaults={'quantity': item.quantity},
                )
            self._touch(model)
            return self._load(model)

    def add_line_item(self, owner_id: str, item_id: UUID, quantity: int) -> Cart:
        """Find or create the cart, then merge quantity into the item's line."""
        if not 1 <= quantity <= MAX_LINE_QUANTITY:
            raise InvalidQuantityError(quantity, minimum=1, maximum=MAX_LINE_QUANTITY)

        with self._store_errors(), transaction.atomic():
            # Unique owner_id makes concurrent creation converge on one row
            CartModel.objects.get_or_create(owner_id=owner_id)
            model = self._lock_cart(owner_id)

            lines = CartItemModel.objects.filter(cart=model, item_id=item_id)
            # The merged quantity must stay within the line limit
            updated = lines.filter(quantity__lte=MAX_LINE_QUANTITY - quantity).update(
                quantity=F('quantity') + quantity,
                updated_at=timezone.now(),
            )
            if not updated:
                if lines.exists():
                    raise InvalidQuantityError(quantity, minimum=1, maximum=MAX_LINE_QUANTITY)
                CartItemModel.objects.create(cart=model, item_id=item_id, quantity=quantity)

            self._touch(model)
            return self._load(model)

    def set_line_item_quantity(self, owner_id: str, item_id: UUID, quantity: int) -> Cart:
        """Set a line's absolute quantity; zero deletes the line."""
        if not 0 <= quantity <= MAX_LINE_QUANTITY:
            raise InvalidQuantityError(quantity, minimum=0, maximum=MAX_LINE_QUANTITY)

        with self._store_errors(), transaction.atomic():
            model = self._lock_cart(owner_id)
            lines = CartItemModel.objects.filter(cart=model, item_id=item_id)

            if quantity == 0:
                changed, _ = lines.delete()
            else:
                changed = lines.update(quantity=quantity, updated_at=timezone.now())
            if not changed:
                raise CartItemNotFoundError(str(item_id))

            self._touch(model)
            return self._load(model)

    def remove_line_item(self, owner_id: str, item_id: UUID) -> Cart:
        """Delete a line from the owner's cart."""
        with self._store_errors(), transaction.atomic():
            model = self._lock_cart(owner_id)
            deleted, _ = CartItemModel.objects.filter(cart=model, item_id=item_id).delete()
            if not deleted:
                raise CartItemNotFoundError(str(item_id))

            self._touch(model)
            return self._load(model)

    def _lock_cart(self, owner_id: str) -> CartModel:
        """Lock the owner's cart row for the rest of the transaction."""
        try:
            return CartModel.objects.select_for_update().get(owner_id=owner_id)
        except CartModel.DoesNotExist:
            raise CartNotFoundError(owner_id)

    def _touch(self, model: CartModel) -> None:
        model.updated_at = timezone.now()
        CartModel.objects.filter(pk=model.pk).update(updated_at=model.updated_at)

    def _load(self, model: CartModel) -> Cart:
        return self._to_entity(model, items=list(model.items.all()))

    @contextmanager
    def _store_errors(self):
        try:
            yield
        except DatabaseError as e:
            logger.error(f"Cart store operation failed: {e}")
            raise DependencyError("cart store") from e

    def _to_entity(self, model: CartModel, items=None) -> Cart:
        """Convert Django model to domain entity."""
        if items is None:
            items = model.items.all()
        return Cart(
            id=model.id,
            owner_id=model.owner_id,
            items=[
                CartLineItem(item_id=item.item_id, quantity=item.quantity)
                for item in items
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
