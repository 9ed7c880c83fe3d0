"""
Catalog app configuration.
Read-only price and existence lookups for cart line items.
"""
from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.catalog'
    label = 'catalog'
    verbose_name = 'Catalog'

    def ready(self):
        from .interfaces import admin  # noqa: F401
