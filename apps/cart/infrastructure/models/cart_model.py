"""
Cart Django ORM models.
"""
import uuid

from django.db import models


class CartModel(models.Model):
    """Cart model; exactly one row per owner."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner_id = models.CharField(max_length=64, unique=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = 'cart'
        db_table = 'carts'

    def __str__(self):
        return f"Cart for owner {self.owner_id}"


class CartItemModel(models.Model):
    """Cart line item model."""

    cart = models.ForeignKey(CartModel, on_delete=models.CASCADE, related_name='items')
    item_id = models.UUIDField()
    quantity = models.PositiveIntegerField(default=1)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = 'cart'
        db_table = 'cart_items'
        unique_together = ['cart', 'item_id']
        ordering = ['id']

    def __str__(self):
        return f"{self.item_id} x {self.quantity}"
