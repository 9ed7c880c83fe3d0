# Django model discovery
from .infrastructure.models import ProductModel

__all__ = ['ProductModel']
