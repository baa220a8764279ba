# ============================================
# catalog/service.py — Product Service
# ============================================
# The service is stateless; every call maps to one store operation (plus
# an existence check for update and delete). It never retries and never
# merges an update with the stored record.

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError
from .models import EDITABLE_FIELDS, Product, ProductFields
from .store import ProductStore

logger = logging.getLogger(__name__)

# Checked for truthiness, so a price of 0 is reported as missing.
REQUIRED_FIELDS = ("name", "price", "description", "category", "imageUrl")

MISSING_FIELDS_MESSAGE = "Please provide all required fields"


class Authorizer(Protocol):
    async def authorize(self, action: str, product_id: str | None = None) -> None:
        """Raise a CatalogError to refuse ``action``."""


class AllowAll:
    """Authorization hook that performs no capability check."""

    async def authorize(self, action: str, product_id: str | None = None) -> None:
        return None


def _invalid_fields_message(exc: PydanticValidationError) -> str:
    fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
    if not fields:
        return "Invalid product data"
    return f"Invalid value for: {', '.join(fields)}"


def _build_fields(data: Mapping[str, Any]) -> ProductFields:
    try:
        return ProductFields.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(_invalid_fields_message(exc)) from exc


class ProductService:

    def __init__(self, store: ProductStore, authorizer: Authorizer | None = None):
        self.store = store
        self.authorizer = authorizer or AllowAll()

    async def list(self) -> list[Product]:
        return await self.store.find_all()

    async def get(self, product_id: str) -> Product:
        return await self.store.find_by_id(product_id)

    async def create(self, data: Mapping[str, Any]) -> Product:
        await self.authorizer.authorize("create")
        if any(not data.get(field) for field in REQUIRED_FIELDS):
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        fields = _build_fields({
            "name": data["name"],
            "price": data["price"],
            "description": data["description"],
            "category": data["category"],
            "stock": data.get("stock") or 0,
            "imageUrl": data["imageUrl"],
        })
        return await self.store.insert(fields)

    async def update(self, product_id: str, data: Mapping[str, Any]) -> Product:
        await self.authorizer.authorize("update", product_id)
        await self.store.find_by_id(product_id)

        missing = [field for field in EDITABLE_FIELDS if data.get(field) is None]
        if missing:
            raise ValidationError(f"Full product required, missing: {', '.join(missing)}")

        fields = _build_fields({field: data[field] for field in EDITABLE_FIELDS})
        return await self.store.update(product_id, fields)

    async def delete(self, product_id: str) -> dict:
        await self.authorizer.authorize("delete", product_id)
        await self.store.find_by_id(product_id)
        await self.store.delete(product_id)
        return {"message": "Product deleted successfully"}
