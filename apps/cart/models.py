# Django model discovery
from .infrastructure.models import CartModel, CartItemModel

__all__ = ['CartModel', 'CartItemModel']
