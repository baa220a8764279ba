# ============================================
# catalog/cart.py — Client-side Shopping Cart (never persisted)
# ============================================

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional


def product_key(product: Mapping[str, Any]) -> Optional[str]:
    """Identity of a product as the API returns it (``id`` or ``_id``)."""
    key = product.get("id", product.get("_id"))
    return None if key is None else str(key)


@dataclass
class CartLine:
    product: dict
    quantity: int = 1

    @property
    def product_id(self) -> Optional[str]:
        return product_key(self.product)

    @property
    def subtotal(self) -> Decimal:
        return Decimal(str(self.product["price"])) * self.quantity


class Cart:
    """At most one line per product; re-adding bumps the quantity."""

    def __init__(self) -> None:
        self.lines: list[CartLine] = []

    def _find(self, product: Mapping[str, Any]) -> Optional[CartLine]:
        for line in self.lines:
            if _same_product(line.product, product):
                return line
        return None

    def add(self, product: Mapping[str, Any]) -> CartLine:
        line = self._find(product)
        if line is not None:
            line.quantity += 1
            return line
        line = CartLine(product=dict(product))
        self.lines.append(line)
        return line

    def clear(self) -> None:
        self.lines = []

    @property
    def count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def total(self) -> Decimal:
        return sum((line.subtotal for line in self.lines), Decimal("0"))

    def is_empty(self) -> bool:
        return not self.lines


def _same_product(a: Mapping[str, Any], b: Mapping[str, Any]) -> bool:
    # Either identifier variant may be present; match on whichever both carry.
    for field in ("id", "_id"):
        if a.get(field) is not None and b.get(field) is not None and str(a[field]) == str(b[field]):
            return True
    return False


def format_price(amount) -> str:
    return f"${Decimal(str(amount)).quantize(Decimal('0.01'))}"
