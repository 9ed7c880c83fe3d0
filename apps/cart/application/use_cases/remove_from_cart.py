"""
Remove from cart use case.
"""
import logging
from dataclasses import dataclass

from apps.catalog.domain.repositories import CatalogLookup
from shared.application import UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import RemoveFromCartDTO, CartDTO

logger = logging.getLogger(__name__)


@dataclass
class RemoveFromCartUseCase(UseCase[RemoveFromCartDTO, CartDTO]):
    """Use case for removing a line from the owner's cart."""

    cart_repository: CartRepository
    catalog_lookup: CatalogLookup

    def execute(self, input_dto: RemoveFromCartDTO) -> UseCaseResult[CartDTO]:
        # Malformed or retired ids are rejected before touching the cart
        self.catalog_lookup.require(input_dto.item_id)

        cart = self.cart_repository.remove_line_item(
            owner_id=input_dto.owner_id,
            item_id=input_dto.item_id,
        )

        logger.info(f"Removed {input_dto.item_id} from cart of {input_dto.owner_id}")
        return UseCaseResult.ok(
            CartDTO.from_entity(cart),
            message="Product removed from cart successfully.",
        )
