"""
Cart response presenter.
"""
from shared.application import UseCaseResult
from ..serializers.cart_serializer import (
    CartMutationResponseSerializer,
    CartSnapshotResponseSerializer,
)


class CartPresenter:
    """Shapes use case results into the cart response envelopes."""

    def present_cart(self, result: UseCaseResult) -> dict:
        return CartMutationResponseSerializer(
            {
                'success': result.success,
                'message': result.message,
                'cart': result.data,
            }
        ).data

    def present_snapshot(self, result: UseCaseResult) -> dict:
        snapshot = result.data
        return CartSnapshotResponseSerializer(
            {
                'success': result.success,
                'message': result.message,
                'cart': snapshot,
                'total_amount': snapshot.total_amount,
                'currency': snapshot.currency,
                'has_unavailable_items': snapshot.has_unavailable_items,
            }
        ).data
