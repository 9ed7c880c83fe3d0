"""
Get cart snapshot use case.
"""
import logging
from dataclasses import dataclass

from apps.catalog.domain.repositories import CatalogLookup
from shared.application import UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.cart_snapshot import CartSnapshot
from ..dtos.cart_dto import GetCartDTO, CartSnapshotDTO

logger = logging.getLogger(__name__)

EMPTY_CART_MESSAGE = "Your cart is empty."


@dataclass
class GetCartSnapshotUseCase(UseCase[GetCartDTO, CartSnapshotDTO]):
    """
    Use case for pricing the owner's cart against the live catalog.

    A missing cart is the normal empty state, not an error. Lines whose
    product is no longer in the catalog are reported as unavailable and
    left out of the total.
    """

    cart_repository: CartRepository
    catalog_lookup: CatalogLookup

    def execute(self, input_dto: GetCartDTO) -> UseCaseResult[CartSnapshotDTO]:
        cart = self.cart_repository.find_by_owner(input_dto.owner_id)

        if cart is None or cart.is_empty:
            snapshot = CartSnapshot.empty(input_dto.owner_id)
            return UseCaseResult.ok(
                CartSnapshotDTO.from_snapshot(snapshot),
                message=EMPTY_CART_MESSAGE,
            )

        # Prices are resolved fresh on every read
        catalog_items = self.catalog_lookup.get_many(item.item_id for item in cart.items)
        snapshot = CartSnapshot.reconcile(cart, catalog_items)

        if snapshot.has_unavailable_items:
            missing = ", ".join(str(line.item_id) for line in snapshot.unavailable_lines)
            logger.warning(
                f"Cart of {input_dto.owner_id} references unavailable products: {missing}"
            )

        return UseCaseResult.ok(CartSnapshotDTO.from_snapshot(snapshot))
