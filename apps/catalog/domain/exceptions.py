"""
Catalog domain exceptions.
"""
from shared.domain.exceptions import NotFoundError


class CatalogItemNotFoundError(NotFoundError):
    """Raised when an item id does not resolve to a sellable catalog product."""

    def __init__(self, item_id: str):
        super().__init__(
            entity_name="Product",
            entity_id=item_id,
            code="PRODUCT_NOT_FOUND",
        )
        self.item_id = item_id
