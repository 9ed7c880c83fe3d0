"""
Cart repository interface.
"""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from ..entities.cart import Cart


class CartRepository(ABC):
    """
    Abstract repository for the Cart aggregate.

    Besides whole-aggregate ``save``, the repository exposes one atomic
    primitive per cart mutation. Each primitive performs its read-modify-write
    as a single unit against the store, so concurrent mutations of the same
    owner's cart are serialized by the store rather than by the caller.
    """

    @abstractmethod
    def find_by_owner(self, owner_id: str) -> Optional[Cart]:
        """Find the cart of an owner."""
        pass

    @abstractmethod
    def save(self, cart: Cart) -> Cart:
        """Persist a whole cart, replacing its stored lines."""
        pass

    @abstractmethod
    def add_line_item(self, owner_id: str, item_id: UUID, quantity: int) -> Cart:
        """Find or create the owner's cart and merge quantity into the item's line.

        Raises InvalidQuantityError when quantity is not positive.
        """
        pass

    @abstractmethod
    def set_line_item_quantity(self, owner_id: str, item_id: UUID, quantity: int) -> Cart:
        """Set a line's absolute quantity; zero removes the line.

        Raises CartNotFoundError or CartItemNotFoundError.
        """
        pass

    @abstractmethod
    def remove_line_item(self, owner_id: str, item_id: UUID) -> Cart:
        """Remove a line from the owner's cart.

        Raises CartNotFoundError or CartItemNotFoundError.
        """
        pass
