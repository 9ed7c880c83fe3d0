"""
Django ORM implementation of CatalogLookup.
"""
import logging
from decimal import Decimal
from typing import Dict, Iterable, Optional
from uuid import UUID

from django.db import DatabaseError

from shared.domain.exceptions import DependencyError
from ...domain.entities.catalog_item import CatalogItem
from ...domain.repositories.catalog_lookup import CatalogLookup
from ...domain.value_objects.money import Money
from ..models.product_model import ProductModel

logger = logging.getLogger(__name__)


class DjangoCatalogLookup(CatalogLookup):
    """Reads current product pricing straight from the products table."""

    def get(self, item_id: UUID) -> Optional[CatalogItem]:
        try:
            model = ProductModel.objects.get(id=item_id, is_active=True)
        except ProductModel.DoesNotExist:
            return None
        except DatabaseError as e:
            logger.error(f"Catalog lookup failed for {item_id}: {e}")
            raise DependencyError("catalog") from e
        return self._to_entity(model)

    def get_many(self, item_ids: Iterable[UUID]) -> Dict[UUID, CatalogItem]:
        ids = list(item_ids)
        if not ids:
            return {}
        try:
            models = list(ProductModel.objects.filter(id__in=ids, is_active=True))
        except DatabaseError as e:
            logger.error(f"Catalog batch lookup failed: {e}")
            raise DependencyError("catalog") from e
        return {model.id: self._to_entity(model) for model in models}

    def _to_entity(self, model: ProductModel) -> CatalogItem:
        """Convert Django model to catalog item."""
        discount = None
        if model.discount_price is not None:
            discount = Money(amount=Decimal(str(model.discount_price)), currency=model.currency)
        return CatalogItem(
            item_id=model.id,
            name=model.name,
            price=Money(amount=Decimal(str(model.price)), currency=model.currency),
            discount_price=discount,
            is_active=model.is_active,
        )
