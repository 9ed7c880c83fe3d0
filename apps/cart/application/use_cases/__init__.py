# Use cases
from .add_to_cart import AddToCartUseCase
from .update_cart_item import UpdateCartItemUseCase
from .remove_from_cart import RemoveFromCartUseCase
from .get_cart_snapshot import GetCartSnapshotUseCase

__all__ = [
    'AddToCartUseCase',
    'UpdateCartItemUseCase',
    'RemoveFromCartUseCase',
    'GetCartSnapshotUseCase',
]
