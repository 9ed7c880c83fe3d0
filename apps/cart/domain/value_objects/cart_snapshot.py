"""
Cart snapshot: a cart priced against the live catalog.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Optional, Tuple
from uuid import UUID

from apps.catalog.domain.entities import CatalogItem
from apps.catalog.domain.value_objects import Money
from shared.domain import ValueObject
from ..entities.cart import Cart


@dataclass(frozen=True)
class SnapshotLine(ValueObject):
    """A cart line with its current catalog price.

    A line whose product has left the catalog is kept with
    ``is_available=False`` and no price.
    """
    item_id: UUID
    quantity: int
    name: Optional[str] = None
    unit_price: Optional[Money] = None

    @property
    def is_available(self) -> bool:
        return self.unit_price is not None

    @property
    def subtotal(self) -> Optional[Money]:
        if self.unit_price is None:
            return None
        return self.unit_price.multiply(self.quantity)


@dataclass(frozen=True)
class CartSnapshot(ValueObject):
    """Read-time view of a cart; never persisted."""
    owner_id: str
    lines: Tuple[SnapshotLine, ...] = ()

    @classmethod
    def empty(cls, owner_id: str) -> 'CartSnapshot':
        return cls(owner_id=owner_id)

    @classmethod
    def reconcile(cls, cart: Cart, catalog_items: Mapping[UUID, CatalogItem]) -> 'CartSnapshot':
        """Price every line of the cart from the resolved catalog items."""
        lines = []
        for item in cart.items:
            catalog_item = catalog_items.get(item.item_id)
            if catalog_item is None:
                lines.append(SnapshotLine(item_id=item.item_id, quantity=item.quantity))
                continue
            lines.append(
                SnapshotLine(
                    item_id=item.item_id,
                    quantity=item.quantity,
                    name=catalog_item.name,
                    unit_price=catalog_item.sellable_price,
                )
            )
        return cls(owner_id=cart.owner_id, lines=tuple(lines))

    @property
    def total(self) -> Money:
        """Sum of price x quantity over available lines."""
        subtotals = [line.subtotal for line in self.lines if line.is_available]
        if not subtotals:
            return Money.zero()
        total = Money.zero(subtotals[0].currency)
        for subtotal in subtotals:
            total = total.add(subtotal)
        return total

    @property
    def total_amount(self) -> Decimal:
        return self.total.amount

    @property
    def currency(self) -> str:
        return self.total.currency

    @property
    def item_count(self) -> int:
        """Number of distinct lines, available or not."""
        return len(self.lines)

    @property
    def unit_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def unavailable_lines(self) -> Tuple[SnapshotLine, ...]:
        return tuple(line for line in self.lines if not line.is_available)

    @property
    def has_unavailable_items(self) -> bool:
        return len(self.unavailable_lines) > 0

    @property
    def is_empty(self) -> bool:
        return len(self.lines) == 0
