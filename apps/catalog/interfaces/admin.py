"""
Catalog admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.product_model import ProductModel


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = ('name', 'price', 'discount_price', 'currency', 'is_active', 'updated_at')
    list_filter = ('is_active',)
    search_fields = ('name',)
    ordering = ('-created_at',)
    readonly_fields = ('id', 'created_at', 'updated_at')
