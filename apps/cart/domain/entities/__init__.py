# Domain entities
from .cart import Cart
from .cart_line_item import CartLineItem, MAX_LINE_QUANTITY

__all__ = ['Cart', 'CartLineItem', 'MAX_LINE_QUANTITY']
