"""
Cart line item.
"""
from dataclasses import dataclass
from uuid import UUID

from ..exceptions import InvalidQuantityError

# Largest quantity a single line may hold, merged adds included
MAX_LINE_QUANTITY = 999


@dataclass
class CartLineItem:
    """One (item, quantity) pair; a stored line holds 1..MAX_LINE_QUANTITY units."""
    item_id: UUID
    quantity: int

    def __post_init__(self):
        if not 1 <= self.quantity <= MAX_LINE_QUANTITY:
            raise InvalidQuantityError(self.quantity, minimum=1, maximum=MAX_LINE_QUANTITY)
