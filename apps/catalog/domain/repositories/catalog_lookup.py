"""
Catalog lookup interface.
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional
from uuid import UUID

from ..entities.catalog_item import CatalogItem
from ..exceptions import CatalogItemNotFoundError


class CatalogLookup(ABC):
    """Resolves item identifiers to their current catalog attributes."""

    @abstractmethod
    def get(self, item_id: UUID) -> Optional[CatalogItem]:
        """Return the sellable item, or None if it does not exist or is inactive."""
        pass

    def get_many(self, item_ids: Iterable[UUID]) -> Dict[UUID, CatalogItem]:
        """Resolve several items; unresolvable ids are absent from the result."""
        found = {}
        for item_id in item_ids:
            item = self.get(item_id)
            if item is not None:
                found[item_id] = item
        return found

    def require(self, item_id: UUID) -> CatalogItem:
        """Resolve an item or raise CatalogItemNotFoundError."""
        item = self.get(item_id)
        if item is None:
            raise CatalogItemNotFoundError(str(item_id))
        return item
