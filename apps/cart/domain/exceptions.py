"""
Cart domain exceptions.
"""
from typing import Optional

from shared.domain.exceptions import NotFoundError, ValidationError


class InvalidQuantityError(ValidationError):
    """Raised when a requested quantity is out of range for the operation."""

    def __init__(self, quantity: int, minimum: int, maximum: Optional[int] = None):
        if maximum is not None:
            message = f"Quantity must be between {minimum} and {maximum}."
        elif minimum > 0:
            message = "Quantity must be a positive integer."
        else:
            message = "Quantity must be a non-negative integer."
        super().__init__(message=message, field="quantity")
        self.quantity = quantity
        self.minimum = minimum
        self.maximum = maximum


class CartNotFoundError(NotFoundError):
    """Raised when the owner has no cart yet."""

    def __init__(self, owner_id: str):
        super().__init__(
            entity_name="Cart",
            entity_id=owner_id,
            code="CART_NOT_FOUND",
        )
        self.owner_id = owner_id


class CartItemNotFoundError(NotFoundError):
    """Raised when an item is not a line of the owner's cart."""

    def __init__(self, item_id: str):
        super().__init__(
            entity_name="Cart item",
            entity_id=item_id,
            code="CART_ITEM_NOT_FOUND",
        )
        self.item_id = item_id
