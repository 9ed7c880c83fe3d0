# Serializers
from .cart_serializer import (
    CartItemAddSerializer,
    CartItemUpdateSerializer,
    CartItemRemoveSerializer,
    CartSerializer,
    CartLineItemSerializer,
    CartSnapshotSerializer,
    SnapshotLineSerializer,
    CartMutationResponseSerializer,
    CartSnapshotResponseSerializer,
)

__all__ = [
    'CartItemAddSerializer',
    'CartItemUpdateSerializer',
    'CartItemRemoveSerializer',
    'CartSerializer',
    'CartLineItemSerializer',
    'CartSnapshotSerializer',
    'SnapshotLineSerializer',
    'CartMutationResponseSerializer',
    'CartSnapshotResponseSerializer',
]
