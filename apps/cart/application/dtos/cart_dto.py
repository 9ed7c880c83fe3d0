"""
Cart DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ...domain.entities.cart import Cart
from ...domain.value_objects.cart_snapshot import CartSnapshot


@dataclass
class AddToCartDTO:
    """DTO for adding an item to a cart."""
    owner_id: str
    item_id: UUID
    quantity: int


@dataclass
class UpdateCartItemDTO:
    """DTO for setting the absolute quantity of a cart line."""
    owner_id: str
    item_id: UUID
    quantity: int


@dataclass
class RemoveFromCartDTO:
    """DTO for removing a cart line."""
    owner_id: str
    item_id: UUID


@dataclass
class GetCartDTO:
    """DTO for reading a cart snapshot."""
    owner_id: str


@dataclass
class CartLineItemDTO:
    item_id: UUID
    quantity: int


@dataclass
class CartDTO:
    """DTO for cart output after a mutation."""
    id: UUID
    owner_id: str
    items: List[CartLineItemDTO]
    item_count: int
    unit_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, cart: Cart) -> 'CartDTO':
        """Create DTO from entity."""
        return cls(
            id=cart.id,
            owner_id=cart.owner_id,
            items=[
                CartLineItemDTO(item_id=item.item_id, quantity=item.quantity)
                for item in cart.items
            ],
            item_count=cart.item_count,
            unit_count=cart.unit_count,
            created_at=cart.created_at,
            updated_at=cart.updated_at,
        )


@dataclass
class SnapshotLineDTO:
    item_id: UUID
    quantity: int
    name: Optional[str]
    unit_price: Optional[Decimal]
    subtotal: Optional[Decimal]
    is_available: bool


@dataclass
class CartSnapshotDTO:
    """DTO for a priced cart."""
    owner_id: str
    total_amount: Decimal
    currency: str
    item_count: int
    unit_count: int
    has_unavailable_items: bool
    is_empty: bool
    items: List[SnapshotLineDTO] = field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: CartSnapshot) -> 'CartSnapshotDTO':
        """Create DTO from a snapshot value object."""
        return cls(
            owner_id=snapshot.owner_id,
            total_amount=snapshot.total_amount,
            currency=snapshot.currency,
            item_count=snapshot.item_count,
            unit_count=snapshot.unit_count,
            has_unavailable_items=snapshot.has_unavailable_items,
            is_empty=snapshot.is_empty,
            items=[
                SnapshotLineDTO(
                    item_id=line.item_id,
                    quantity=line.quantity,
                    name=line.name,
                    unit_price=line.unit_price.amount if line.is_available else None,
                    subtotal=line.subtotal.amount if line.is_available else None,
                    is_available=line.is_available,
                )
                for line in snapshot.lines
            ],
        )
