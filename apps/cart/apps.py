"""
Cart app configuration.
One cart per owner, merged line items, live catalog pricing.
"""
from django.apps import AppConfig


class CartConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.cart'
    label = 'cart'
    verbose_name = 'Cart'

    def ready(self):
        from .interfaces import admin  # noqa: F401
