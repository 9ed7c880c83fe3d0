"""
Cart admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.cart_model import CartModel, CartItemModel


class CartItemInline(admin.TabularInline):
    """Inline for cart line items."""
    model = CartItemModel
    extra = 0
    readonly_fields = ('created_at', 'updated_at')


@admin.register(CartModel)
class CartAdmin(admin.ModelAdmin):
    """Admin configuration for Cart model."""
    list_display = ('id', 'owner_id', 'created_at', 'updated_at')
    search_fields = ('owner_id',)
    ordering = ('-updated_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')
    inlines = [CartItemInline]
