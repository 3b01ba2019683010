"""Seed a running storefront API with a small demo catalogue.

Products are created through the public POST /api/products endpoint, so the
same validation rules apply as for any other client. Running it twice creates
the catalogue twice; there is no update endpoint to make it idempotent.

Usage:
    python scripts/seed_products.py

STOREFRONT_URL overrides the API base URL (default http://localhost:8000).
"""
import asyncio
import os
import sys

from storefront.client import ProductServiceClient, ProductServiceError

STOREFRONT_URL = os.environ.get("STOREFRONT_URL", "http://localhost:8000")

DEMO_PRODUCTS = [
    {"name": "Wireless Headphones", "price": 79.99, "category": "Electronics",
     "description": "Over-ear headphones with 30 hours of battery life."},
    {"name": "USB-C Charger 65W", "price": 34.50, "category": "Electronics",
     "description": "Compact GaN charger for laptops and phones."},
    {"name": "Cotton T-Shirt", "price": 15.00, "category": "Clothing",
     "description": "Plain crew-neck tee, 100% organic cotton."},
    {"name": "Rain Jacket", "price": 89.00, "category": "Clothing",
     "description": "Lightweight waterproof shell with packable hood."},
    {"name": "Ceramic Mug", "price": 9.99, "category": "Home",
     "description": "350 ml stoneware mug, dishwasher safe."},
    {"name": "Desk Lamp", "price": 42.00, "category": "Home",
     "image": "/images/desk-lamp.jpg",
     "description": "LED lamp with adjustable arm and warm light mode."},
    {"name": "Gift Card", "price": 25.00, "category": "Other"},
]


async def seed(base_url: str) -> int:
    created = 0
    async with ProductServiceClient(base_url=base_url) as client:
        for product in DEMO_PRODUCTS:
            try:
                result = await client.create_product(product)
            except ProductServiceError as e:
                print(f"Could not create {product['name']!r}: {e.message}")
                if e.status_code is None:
                    # API unreachable; no point trying the rest
                    break
                continue
            created += 1
            print(f"Created {result['data']['name']} -> id {result['data']['id']}")

        try:
            listing = await client.get_products()
            print(f"API now lists {listing['count']} products")
        except ProductServiceError as e:
            print(f"Could not list products: {e.message}")
    return created


def main():
    print("Seeding products at", STOREFRONT_URL)
    created = asyncio.run(seed(STOREFRONT_URL))
    if created == 0:
        sys.exit(1)
    print(f"Seed complete, {created} products created")


if __name__ == "__main__":
    main()
