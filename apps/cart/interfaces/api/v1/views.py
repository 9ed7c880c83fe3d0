"""
Cart API v1 views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.dtos.cart_dto import (
    AddToCartDTO,
    UpdateCartItemDTO,
    RemoveFromCartDTO,
    GetCartDTO,
)
from ....application.use_cases import (
    AddToCartUseCase,
    UpdateCartItemUseCase,
    RemoveFromCartUseCase,
    GetCartSnapshotUseCase,
)
from ....infrastructure.container import get_cart_repository, get_catalog_lookup
from ...identity import RequestIdentityResolver
from ...presenters import CartPresenter
from ...serializers.cart_serializer import (
    CartItemAddSerializer,
    CartItemUpdateSerializer,
    CartItemRemoveSerializer,
    CartMutationResponseSerializer,
    CartSnapshotResponseSerializer,
)

identity_resolver = RequestIdentityResolver()
presenter = CartPresenter()


def build_use_case(use_case_class):
    """Wire a cart use case to the configured store and catalog."""
    return use_case_class(
        cart_repository=get_cart_repository(),
        catalog_lookup=get_catalog_lookup(),
    )


@extend_schema(tags=['Cart'])
class CartView(APIView):
    """Cart snapshot endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: CartSnapshotResponseSerializer},
        summary="Get current user's cart with live prices",
    )
    def get(self, request):
        owner_id = identity_resolver.resolve(request)

        use_case = build_use_case(GetCartSnapshotUseCase)
        result = use_case.execute(GetCartDTO(owner_id=owner_id))

        return Response(presenter.present_snapshot(result), status=status.HTTP_200_OK)


@extend_schema(tags=['Cart'])
class CartAddView(APIView):
    """Add item endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=CartItemAddSerializer,
        responses={200: CartMutationResponseSerializer},
        summary="Add item to cart",
    )
    def post(self, request):
        owner_id = identity_resolver.resolve(request)
        serializer = CartItemAddSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = build_use_case(AddToCartUseCase)
        input_dto = AddToCartDTO(owner_id=owner_id, **serializer.validated_data)
        result = use_case.execute(input_dto)

        return Response(presenter.present_cart(result), status=status.HTTP_200_OK)


@extend_schema(tags=['Cart'])
class CartUpdateView(APIView):
    """Update item quantity endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=CartItemUpdateSerializer,
        responses={200: CartMutationResponseSerializer},
        summary="Set cart item quantity (0 removes the item)",
    )
    def put(self, request):
        owner_id = identity_resolver.resolve(request)
        serializer = CartItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = build_use_case(UpdateCartItemUseCase)
        input_dto = UpdateCartItemDTO(owner_id=owner_id, **serializer.validated_data)
        result = use_case.execute(input_dto)

        return Response(presenter.present_cart(result), status=status.HTTP_200_OK)


@extend_schema(tags=['Cart'])
class CartDeleteView(APIView):
    """Remove item endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=CartItemRemoveSerializer,
        responses={200: CartMutationResponseSerializer},
        summary="Remove item from cart",
    )
    def delete(self, request):
        owner_id = identity_resolver.resolve(request)
        serializer = CartItemRemoveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = build_use_case(RemoveFromCartUseCase)
        input_dto = RemoveFromCartDTO(owner_id=owner_id, **serializer.validated_data)
        result = use_case.execute(input_dto)

        return Response(presenter.present_cart(result), status=status.HTTP_200_OK)
