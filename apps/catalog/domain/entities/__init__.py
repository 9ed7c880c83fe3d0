# Domain entities
from .catalog_item import CatalogItem

__all__ = ['CatalogItem']
