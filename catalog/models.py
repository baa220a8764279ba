# ============================================
# catalog/models.py — Pydantic Models
# ============================================
# Pydantic models serve two purposes here:
#   1. Enforcing the Product invariants once the required-field gate in
#      the service has passed (ranges, category set, non-empty text)
#   2. Response serialisation with the camelCase keys the storefront
#      and the persisted documents use (imageUrl, createdAt, updatedAt)

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    HOME_KITCHEN = "Home & Kitchen"
    BOOKS = "Books"
    TOYS = "Toys"
    SPORTS = "Sports"
    BEAUTY = "Beauty"
    HEALTH = "Health"
    AUTOMOTIVE = "Automotive"
    ACCESSORIES = "Accessories"
    FITNESS = "Fitness"
    SPORTSWEAR = "Sportswear"


CATEGORIES = [c.value for c in Category]

# Every field a full-record update must resend.
EDITABLE_FIELDS = ("name", "price", "description", "category", "stock", "imageUrl")


class _CamelModel(BaseModel):
    # inf/NaN parse from valid JSON (1e999, NaN) but cannot be rendered back.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)


# ── Request Models ─────────────────────────────────────────────
class ProductFields(_CamelModel):
    """The editable field set of a product, as written to the store."""

    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, description="Price must be non-negative")
    description: str = Field(..., min_length=1)
    category: Category
    stock: int = Field(0, ge=0, description="Stock quantity (>= 0)")
    image_url: str = Field(..., min_length=1)

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# ── Response Models ────────────────────────────────────────────
class Product(ProductFields):
    id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    def to_response(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
