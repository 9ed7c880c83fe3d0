"""
Catalog item as seen by the cart.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import ValueObject
from ..value_objects.money import Money


@dataclass(frozen=True)
class CatalogItem(ValueObject):
    """Current sellable attributes of a catalog product."""
    item_id: UUID
    name: str
    price: Money
    discount_price: Optional[Money] = None
    is_active: bool = True

    @property
    def sellable_price(self) -> Money:
        """Price a cart line is charged at: the discount price when one is set."""
        if self.discount_price is not None:
            return self.discount_price
        return self.price
