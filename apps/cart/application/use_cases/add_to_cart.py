"""
Add to cart use case.
"""
import logging
from dataclasses import dataclass

from apps.catalog.domain.repositories import CatalogLookup
from shared.application import UseCase, UseCaseResult
from ...domain.entities.cart_line_item import MAX_LINE_QUANTITY
from ...domain.exceptions import InvalidQuantityError
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import AddToCartDTO, CartDTO

logger = logging.getLogger(__name__)


@dataclass
class AddToCartUseCase(UseCase[AddToCartDTO, CartDTO]):
    """Use case for adding an item to the owner's cart."""

    cart_repository: CartRepository
    catalog_lookup: CatalogLookup

    def execute(self, input_dto: AddToCartDTO) -> UseCaseResult[CartDTO]:
        if not 1 <= input_dto.quantity <= MAX_LINE_QUANTITY:
            raise InvalidQuantityError(input_dto.quantity, minimum=1, maximum=MAX_LINE_QUANTITY)

        # The item must be sellable right now
        self.catalog_lookup.require(input_dto.item_id)

        # Find-or-create and merge in one store operation
        cart = self.cart_repository.add_line_item(
            owner_id=input_dto.owner_id,
            item_id=input_dto.item_id,
            quantity=input_dto.quantity,
        )

        logger.info(
            f"Added {input_dto.quantity} x {input_dto.item_id} to cart of {input_dto.owner_id}"
        )
        return UseCaseResult.ok(
            CartDTO.from_entity(cart),
            message="Product added to cart successfully.",
        )
