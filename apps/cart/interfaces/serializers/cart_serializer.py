"""
Cart serializers.
"""
from rest_framework import serializers

from ...domain.entities.cart_line_item import MAX_LINE_QUANTITY

ITEM_COUNT_HELP = "Number of distinct lines in the cart."
UNIT_COUNT_HELP = "Total units across all lines."


class CartItemAddSerializer(serializers.Serializer):
    """Serializer for adding an item to the cart."""
    item_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_LINE_QUANTITY)


class CartItemUpdateSerializer(serializers.Serializer):
    """Serializer for setting a cart line's quantity; 0 removes the line."""
    item_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=0, max_value=MAX_LINE_QUANTITY)


class CartItemRemoveSerializer(serializers.Serializer):
    """Serializer for removing a cart line."""
    item_id = serializers.UUIDField()


class CartLineItemSerializer(serializers.Serializer):
    item_id = serializers.UUIDField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    id = serializers.UUIDField(read_only=True)
    owner_id = serializers.CharField(read_only=True)
    items = CartLineItemSerializer(many=True, read_only=True)
    item_count = serializers.IntegerField(read_only=True, help_text=ITEM_COUNT_HELP)
    unit_count = serializers.IntegerField(read_only=True, help_text=UNIT_COUNT_HELP)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class SnapshotLineSerializer(serializers.Serializer):
    """Serializer for a priced cart line."""
    item_id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True, allow_null=True)
    quantity = serializers.IntegerField(read_only=True)
    unit_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, read_only=True, allow_null=True
    )
    # A 12 digit catalog price times MAX_LINE_QUANTITY
    subtotal = serializers.DecimalField(
        max_digits=15, decimal_places=2, read_only=True, allow_null=True
    )
    is_available = serializers.BooleanField(read_only=True)


class CartSnapshotSerializer(serializers.Serializer):
    """Serializer for the priced cart body."""
    owner_id = serializers.CharField(read_only=True)
    items = SnapshotLineSerializer(many=True, read_only=True)
    item_count = serializers.IntegerField(read_only=True, help_text=ITEM_COUNT_HELP)
    unit_count = serializers.IntegerField(read_only=True, help_text=UNIT_COUNT_HELP)
    is_empty = serializers.BooleanField(read_only=True)


class CartMutationResponseSerializer(serializers.Serializer):
    """Envelope returned by add / update / delete."""
    success = serializers.BooleanField(read_only=True)
    message = serializers.CharField(read_only=True)
    cart = CartSerializer(read_only=True)


class CartSnapshotResponseSerializer(serializers.Serializer):
    """Envelope returned by cart retrieval."""
    success = serializers.BooleanField(read_only=True)
    message = serializers.CharField(read_only=True)
    cart = CartSnapshotSerializer(read_only=True)
    # Unbounded line count, so only the decimal context limits the total
    total_amount = serializers.DecimalField(max_digits=None, decimal_places=2, read_only=True)
    currency = serializers.CharField(read_only=True)
    has_unavailable_items = serializers.BooleanField(read_only=True)
