# Repository interfaces
from .catalog_lookup import CatalogLookup

__all__ = ['CatalogLookup']
