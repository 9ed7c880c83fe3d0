# Cart repository implementations
from .django_cart_repository import DjangoCartRepository
from .in_memory_cart_repository import InMemoryCartRepository

__all__ = ['DjangoCartRepository', 'InMemoryCartRepository']
