"""
Money value object.
"""
from dataclasses import dataclass
from decimal import Decimal

from shared.domain import ValueObject

DEFAULT_CURRENCY = "USD"


@dataclass(frozen=True)
class Money(ValueObject):
    """Money value object; the storefront prices in a single currency."""
    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> 'Money':
        return cls(amount=Decimal('0'), currency=currency)

    def add(self, other: 'Money') -> 'Money':
        """Add two money values."""
        if self.currency != other.currency:
            raise ValueError("Cannot add different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int) -> 'Money':
        """Multiply money by a quantity."""
        return Money(amount=self.amount * factor, currency=self.currency)
