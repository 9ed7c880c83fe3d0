"""
Update cart item quantity use case.
"""
import logging
from dataclasses import dataclass

from apps.catalog.domain.repositories import CatalogLookup
from shared.application import UseCase, UseCaseResult
from ...domain.entities.cart_line_item import MAX_LINE_QUANTITY
from ...domain.exceptions import InvalidQuantityError
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import UpdateCartItemDTO, CartDTO

logger = logging.getLogger(__name__)


@dataclass
class UpdateCartItemUseCase(UseCase[UpdateCartItemDTO, CartDTO]):
    """Use case for setting the absolute quantity of a cart line."""

    cart_repository: CartRepository
    catalog_lookup: CatalogLookup

    def execute(self, input_dto: UpdateCartItemDTO) -> UseCaseResult[CartDTO]:
        if not 0 <= input_dto.quantity <= MAX_LINE_QUANTITY:
            raise InvalidQuantityError(input_dto.quantity, minimum=0, maximum=MAX_LINE_QUANTITY)

        self.catalog_lookup.require(input_dto.item_id)

        # Zero removes the line
        cart = self.cart_repository.set_line_item_quantity(
            owner_id=input_dto.owner_id,
            item_id=input_dto.item_id,
            quantity=input_dto.quantity,
        )

        logger.info(
            f"Set {input_dto.item_id} to {input_dto.quantity} in cart of {input_dto.owner_id}"
        )
        return UseCaseResult.ok(
            CartDTO.from_entity(cart),
            message="Cart updated successfully.",
        )
