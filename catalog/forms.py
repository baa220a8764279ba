# ============================================
# catalog/forms.py — Product Form Draft & Validation
# ============================================
# The draft holds raw text exactly as typed, the way form inputs do, and
# only converts to numbers in to_payload(). Validation is a gate in
# front of the network, not an authority: the service runs its own check.

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from .models import CATEGORIES

FORM_FIELDS = ("name", "price", "description", "category", "stock", "imageUrl")


def _as_text(value: Any) -> str:
    # Falsy values (0 included) prefill as blank.
    if not value:
        return ""
    return str(value)


def _parse_number(text: str) -> Optional[Decimal]:
    try:
        number = Decimal(text.strip())
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


@dataclass
class ProductForm:
    name: str = ""
    price: str = ""
    description: str = ""
    category: str = ""
    stock: str = ""
    imageUrl: str = ""
    product_id: Optional[str] = None
    errors: dict = field(default_factory=dict)

    @classmethod
    def from_product(cls, product: Optional[Mapping[str, Any]] = None) -> "ProductForm":
        """Blank draft for create, or a draft prefilled from ``product`` for edit."""
        if not product:
            return cls()
        product_id = product.get("id", product.get("_id"))
        return cls(
            product_id=None if product_id is None else str(product_id),
            **{name: _as_text(product.get(name)) for name in FORM_FIELDS},
        )

    @property
    def is_edit(self) -> bool:
        return self.product_id is not None

    def set_field(self, name: str, value: str) -> None:
        if name not in FORM_FIELDS:
            raise KeyError(name)
        setattr(self, name, value)
        self.errors.pop(name, None)

    def validate(self) -> bool:
        errors = {}

        if not self.name.strip():
            errors["name"] = "Name is required"

        if not self.price.strip():
            errors["price"] = "Price is required"
        else:
            price = _parse_number(self.price)
            if price is None or price < 0:
                errors["price"] = "Price must be a non-negative number"

        if not self.description.strip():
            errors["description"] = "Description is required"

        if not self.category:
            errors["category"] = "Category is required"
        elif self.category not in CATEGORIES:
            errors["category"] = "Category must be one of the listed categories"

        if self.stock.strip():
            stock = _parse_number(self.stock)
            if stock is None or stock < 0 or stock != stock.to_integral_value():
                errors["stock"] = "Stock must be a non-negative whole number"

        if not self.imageUrl.strip():
            errors["imageUrl"] = "Image URL is required"

        self.errors = errors
        return not errors

    def to_payload(self) -> dict:
        """Submission body for the API: price as a number, blank stock as 0."""
        return {
            "name": self.name,
            "price": float(self.price),
            "description": self.description,
            "category": self.category,
            "stock": int(Decimal(self.stock.strip())) if self.stock.strip() else 0,
            "imageUrl": self.imageUrl,
        }
