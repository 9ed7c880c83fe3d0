"""
In-memory implementation of CartRepository.
"""
import copy
import threading
from typing import Callable, Dict, Optional
from uuid import UUID

from ...domain.entities.cart import Cart
from ...domain.exceptions import CartNotFoundError
from ...domain.repositories.cart_repository import CartRepository


class InMemoryCartRepository(CartRepository):
    """
    Process-local cart store.

    A single lock guards each read-modify-write. Mutations are applied to a
    copy that replaces the stored cart only when the mutation succeeds, and
    callers always receive copies.
    """

    def __init__(self) -> None:
        self._carts: Dict[str, Cart] = {}
        self._lock = threading.Lock()

    def find_by_owner(self, owner_id: str) -> Optional[Cart]:
        with self._lock:
            cart = self._carts.get(owner_id)
            return copy.deepcopy(cart) if cart is not None else None

    def save(self, cart: Cart) -> Cart:
        with self._lock:
            stored = copy.deepcopy(cart)
            existing = self._carts.get(cart.owner_id)
            if existing is not None:
                # One cart per owner: keep the identity of the stored one
                stored.id = existing.id
                stored.created_at = existing.created_at
            self._carts[cart.owner_id] = stored
            return copy.deepcopy(stored)

    def add_line_item(self, owner_id: str, item_id: UUID, quantity: int) -> Cart:
        return self._mutate(
            owner_id,
            lambda cart: cart.add_item(item_id, quantity),
            create=True,
        )

    def set_line_item_quantity(self, owner_id: str, item_id: UUID, quantity: int) -> Cart:
        return self._mutate(owner_id, lambda cart: cart.set_item_quantity(item_id, quantity))

    def remove_line_item(self, owner_id: str, item_id: UUID) -> Cart:
        return self._mutate(owner_id, lambda cart: cart.remove_item(item_id))

    def _mutate(self, owner_id: str, change: Callable[[Cart], object], create: bool = False) -> Cart:
        with self._lock:
            current = self._carts.get(owner_id)
            if current is None:
                if not create:
                    raise CartNotFoundError(owner_id)
                working = Cart.create(owner_id)
            else:
                working = copy.deepcopy(current)
            change(working)
            self._carts[owner_id] = working
            return copy.deepcopy(working)
