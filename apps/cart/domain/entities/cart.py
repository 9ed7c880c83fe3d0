"""
Cart entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from shared.domain import AggregateRoot
from ..exceptions import CartItemNotFoundError, InvalidQuantityError
from .cart_line_item import CartLineItem, MAX_LINE_QUANTITY


@dataclass
class Cart(AggregateRoot):
    """
    The single cart of one owner.

    Lines are unique by item id: adding an item already present grows its
    quantity, and a quantity of zero removes the line. No line may hold more
    than ``MAX_LINE_QUANTITY`` units.
    """
    owner_id: str = ""
    items: List[CartLineItem] = field(default_factory=list)

    @classmethod
    def create(cls, owner_id: str) -> 'Cart':
        """Create an empty cart for an owner."""
        return cls(owner_id=owner_id)

    def add_item(self, item_id: UUID, quantity: int) -> CartLineItem:
        """Add quantity of an item, merging into an existing line."""
        if not 1 <= quantity <= MAX_LINE_QUANTITY:
            raise InvalidQuantityError(quantity, minimum=1, maximum=MAX_LINE_QUANTITY)
        existing = self.find_item(item_id)
        if existing:
            if existing.quantity + quantity > MAX_LINE_QUANTITY:
                raise InvalidQuantityError(quantity, minimum=1, maximum=MAX_LINE_QUANTITY)
            existing.quantity += quantity
        else:
            existing = CartLineItem(item_id=item_id, quantity=quantity)
            self.items.append(existing)
        self.touch()
        return existing

    def set_item_quantity(self, item_id: UUID, quantity: int) -> None:
        """Set the absolute quantity of a line; zero removes it."""
        if not 0 <= quantity <= MAX_LINE_QUANTITY:
            raise InvalidQuantityError(quantity, minimum=0, maximum=MAX_LINE_QUANTITY)
        item = self.find_item(item_id)
        if item is None:
            raise CartItemNotFoundError(str(item_id))
        if quantity == 0:
            self.remove_item(item_id)
            return
        item.quantity = quantity
        self.touch()

    def remove_item(self, item_id: UUID) -> None:
        """Remove a line from the cart."""
        if self.find_item(item_id) is None:
            raise CartItemNotFoundError(str(item_id))
        self.items = [item for item in self.items if item.item_id != item_id]
        self.touch()

    def find_item(self, item_id: UUID) -> Optional[CartLineItem]:
        """Find a line by item id."""
        for item in self.items:
            if item.item_id == item_id:
                return item
        return None

    @property
    def item_count(self) -> int:
        """Number of distinct lines."""
        return len(self.items)

    @property
    def unit_count(self) -> int:
        """Total units across all lines."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0
