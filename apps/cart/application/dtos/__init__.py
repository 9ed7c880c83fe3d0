# DTOs
from .cart_dto import (
    AddToCartDTO,
    UpdateCartItemDTO,
    RemoveFromCartDTO,
    GetCartDTO,
    CartDTO,
    CartLineItemDTO,
    CartSnapshotDTO,
    SnapshotLineDTO,
)

__all__ = [
    'AddToCartDTO',
    'UpdateCartItemDTO',
    'RemoveFromCartDTO',
    'GetCartDTO',
    'CartDTO',
    'CartLineItemDTO',
    'CartSnapshotDTO',
    'SnapshotLineDTO',
]
