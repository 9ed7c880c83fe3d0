"""
Builds the cart store and catalog lookup selected in settings.
"""
from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.catalog.domain.repositories import CatalogLookup
from apps.catalog.infrastructure.repositories import DjangoCatalogLookup, InMemoryCatalogLookup
from ..domain.repositories.cart_repository import CartRepository
from .repositories import DjangoCartRepository, InMemoryCartRepository

CART_STORES = {
    'django': DjangoCartRepository,
    'memory': InMemoryCartRepository,
}

CATALOG_LOOKUPS = {
    'django': DjangoCatalogLookup,
    'memory': InMemoryCatalogLookup,
}


@lru_cache(maxsize=None)
def _build(registry_name: str, backend: str):
    registry = CART_STORES if registry_name == 'cart' else CATALOG_LOOKUPS
    try:
        return registry[backend]()
    except KeyError:
        raise ImproperlyConfigured(
            f"Unknown {registry_name} backend '{backend}'; expected one of {sorted(registry)}"
        )


def get_cart_repository() -> CartRepository:
    """Cart store for the configured CART_STORE_BACKEND.

    In-memory stores are process singletons so state survives across requests.
    """
    return _build('cart', getattr(settings, 'CART_STORE_BACKEND', 'django'))


def get_catalog_lookup() -> CatalogLookup:
    """Catalog lookup for the configured CATALOG_LOOKUP_BACKEND."""
    return _build('catalog', getattr(settings, 'CATALOG_LOOKUP_BACKEND', 'django'))


def reset() -> None:
    """Drop cached instances (settings changes in tests)."""
    _build.cache_clear()
