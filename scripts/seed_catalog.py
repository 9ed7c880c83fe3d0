#!/usr/bin/env python
"""Load catalog products from a CSV file (name,price,discount_price) for local runs."""
import os
import sys
import csv
import django

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.local')
django.setup()

import logging
from decimal import Decimal, InvalidOperation

from django.db import transaction

from apps.catalog.infrastructure.models import ProductModel

logger = logging.getLogger(__name__)


def parse_price(value):
    """Parse a price cell; blank means no price."""
    value = (value or '').strip()
    if not value:
        return None
    try:
        return Decimal(value)
    except InvalidOperation:
        raise ValueError(f"Invalid price: '{value}'")


def seed_products(rows):
    """Create or update products by name; returns (created, updated)."""
    created = updated = 0
    with transaction.atomic():
        for row in rows:
            name = (row.get('name') or '').strip()
            price = parse_price(row.get('price'))
            if not name or price is None:
                logger.warning(f"Skipping incomplete row: {row}")
                continue
            _, was_created = ProductModel.objects.update_or_create(
                name=name,
                defaults={
                    'price': price,
                    'discount_price': parse_price(row.get('discount_price')),
                    'is_active': True,
                },
            )
            if was_created:
                created += 1
            else:
                updated += 1
    return created, updated


def main():
    if len(sys.argv) != 2:
        print("Usage: seed_catalog.py <products.csv>")
        sys.exit(1)

    with open(sys.argv[1], newline='', encoding='utf-8') as f:
        created, updated = seed_products(csv.DictReader(f))

    print(f"Catalog seeded: {created} created, {updated} updated")
    for product in ProductModel.objects.order_by('name'):
        print(f"  {product.id}  {product.name}  {product.discount_price or product.price}")


if __name__ == '__main__':
    main()
