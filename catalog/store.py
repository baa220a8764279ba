# ============================================
# catalog/store.py — Product Store (MongoDB)
# ============================================
# ProductStore is the interface the service depends on;
# MongoProductStore implements it on a Motor collection. Every operation
# touches a single document, so each is atomic at the store layer and
# concurrent writers resolve last-write-wins.

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from .errors import NotFoundError, StorageError
from .models import Product, ProductFields

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductStore(ABC):

    @abstractmethod
    async def find_all(self) -> list[Product]:
        """Return every product in the collection."""

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Product:
        """Return a product by id; raise NotFoundError if absent."""

    @abstractmethod
    async def insert(self, fields: ProductFields) -> Product:
        """Persist a new product, assigning id and timestamps."""

    @abstractmethod
    async def update(self, product_id: str, fields: ProductFields) -> Product:
        """Overwrite every editable field; raise NotFoundError if absent."""

    @abstractmethod
    async def delete(self, product_id: str) -> None:
        """Remove a product; raise NotFoundError if absent."""

    @abstractmethod
    async def insert_many(self, items: list[ProductFields]) -> list[Product]:
        """Bulk insert used by the seeder."""

    @abstractmethod
    async def delete_all(self) -> int:
        """Remove every product; return how many were removed."""


def _object_id(product_id: str) -> ObjectId:
    # An id that cannot be an ObjectId cannot name a stored product.
    try:
        return ObjectId(product_id)
    except (InvalidId, TypeError) as exc:
        raise NotFoundError(PRODUCT_NOT_FOUND) from exc


def serialise_product(doc: dict) -> Product:
    """Convert a MongoDB document (ObjectId ``_id``) to a Product."""
    doc = dict(doc)
    doc["id"] = str(doc.pop("_id"))
    doc.pop("__v", None)
    return Product.model_validate(doc)


class MongoProductStore(ProductStore):
    """ProductStore backed by a Motor collection."""

    def __init__(self, collection):
        self.collection = collection

    async def find_all(self) -> list[Product]:
        try:
            return [serialise_product(doc) async for doc in self.collection.find()]
        except PyMongoError as exc:
            raise StorageError("Error fetching products", detail=str(exc)) from exc

    async def find_by_id(self, product_id: str) -> Product:
        oid = _object_id(product_id)
        try:
            doc = await self.collection.find_one({"_id": oid})
        except PyMongoError as exc:
            raise StorageError("Error fetching product", detail=str(exc)) from exc
        if doc is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return serialise_product(doc)

    async def insert(self, fields: ProductFields) -> Product:
        now = utcnow()
        doc = fields.to_document()
        doc["createdAt"] = now
        doc["updatedAt"] = now
        try:
            result = await self.collection.insert_one(doc)
        except PyMongoError as exc:
            raise StorageError("Error creating product", detail=str(exc)) from exc
        logger.info("Created product %s", result.inserted_id)
        return serialise_product(doc)

    async def update(self, product_id: str, fields: ProductFields) -> Product:
        oid = _object_id(product_id)
        updates = fields.to_document()
        updates["updatedAt"] = utcnow()
        try:
            doc = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": updates},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            raise StorageError("Error updating product", detail=str(exc)) from exc
        if doc is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        logger.info("Updated product %s", product_id)
        return serialise_product(doc)

    async def delete(self, product_id: str) -> None:
        oid = _object_id(product_id)
        try:
            result = await self.collection.delete_one({"_id": oid})
        except PyMongoError as exc:
            raise StorageError("Error deleting product", detail=str(exc)) from exc
        if result.deleted_count == 0:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        logger.info("Deleted product %s", product_id)

    async def insert_many(self, items: list[ProductFields]) -> list[Product]:
        now = utcnow()
        docs = []
        for fields in items:
            doc = fields.to_document()
            doc["createdAt"] = now
            doc["updatedAt"] = now
            docs.append(doc)
        if not docs:
            return []
        try:
            await self.collection.insert_many(docs)
        except PyMongoError as exc:
            raise StorageError("Error importing products", detail=str(exc)) from exc
        return [serialise_product(doc) for doc in docs]

    async def delete_all(self) -> int:
        try:
            result = await self.collection.delete_many({})
        except PyMongoError as exc:
            raise StorageError("Error deleting products", detail=str(exc)) from exc
        return result.deleted_count
