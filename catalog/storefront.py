# ============================================
# catalog/storefront.py — Storefront View State
# ============================================

from __future__ import annotations

import logging

from .cart import Cart, format_price
from .client import CatalogClient
from .errors import CatalogError
from .notifications import Notifier, Severity

logger = logging.getLogger(__name__)

# Shown when the API cannot be reached, so the grid is never blank.
DEMO_PRODUCTS = [
    {"_id": "1", "id": "1", "name": "Demo Product 1", "description": "This is a demo product", "price": 19.99,
     "imageUrl": "https://via.placeholder.com/300/2E7D32/FFFFFF?text=Product+1", "category": "Electronics", "stock": 10},
    {"_id": "2", "id": "2", "name": "Demo Product 2", "description": "This is a demo product", "price": 29.99,
     "imageUrl": "https://via.placeholder.com/300/4CAF50/FFFFFF?text=Product+2", "category": "Clothing", "stock": 5},
    {"_id": "3", "id": "3", "name": "Demo Product 3", "description": "This is a demo product", "price": 39.99,
     "imageUrl": "https://via.placeholder.com/300/1B5E20/FFFFFF?text=Product+3", "category": "Home & Kitchen", "stock": 15},
    {"_id": "4", "id": "4", "name": "Demo Product 4", "description": "This is a demo product", "price": 49.99,
     "imageUrl": "https://via.placeholder.com/300/388E3C/FFFFFF?text=Product+4", "category": "Accessories", "stock": 8},
]


class Storefront:

    def __init__(self, client: CatalogClient):
        self.client = client
        self.products: list = []
        self.loading = False
        self.error = None
        self.cart = Cart()
        self.notifier = Notifier()

    async def load(self) -> None:
        self.loading = True
        try:
            self.products = await self.client.get_products()
        except CatalogError as exc:
            logger.error("Error fetching products: %s", exc.message)
            self.error = "Failed to load products. Please try again later."
            self.notifier.show("Failed to load products. Using demo data instead.", Severity.ERROR)
            self.products = [dict(p) for p in DEMO_PRODUCTS]
        finally:
            self.loading = False

    def add_to_cart(self, product: dict) -> bool:
        """Add one unit of ``product``; out-of-stock products are refused."""
        if not product.get("stock"):
            return False
        self.cart.add(product)
        self.notifier.show(f"{product['name']} added to cart!")
        return True

    @property
    def cart_count(self) -> int:
        return self.cart.count

    def show_cart(self) -> None:
        if self.cart.is_empty():
            self.notifier.show("Your cart is empty", Severity.INFO)
        else:
            self.notifier.show(f"Cart total: {format_price(self.cart.total)}", Severity.INFO)
