"""
In-memory implementation of CatalogLookup.
"""
from typing import Dict, Optional
from uuid import UUID

from ...domain.entities.catalog_item import CatalogItem
from ...domain.repositories.catalog_lookup import CatalogLookup


class InMemoryCatalogLookup(CatalogLookup):
    """Dictionary-backed catalog for local runs and tests."""

    def __init__(self) -> None:
        self._items: Dict[UUID, CatalogItem] = {}

    def put(self, item: CatalogItem) -> None:
        self._items[item.item_id] = item

    def discard(self, item_id: UUID) -> None:
        self._items.pop(item_id, None)

    def get(self, item_id: UUID) -> Optional[CatalogItem]:
        item = self._items.get(item_id)
        if item is None or not item.is_active:
            return None
        return item
