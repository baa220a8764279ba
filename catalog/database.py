# ============================================
# catalog/database.py — Async MongoDB Connection
# ============================================
# Motor is PyMongo wrapped with asyncio support. One client is shared by
# every request of an app instance (connection pooling built in); it is
# owned by the Database object rather than a module global so that the
# connection string comes from the Settings passed to create_app().

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from .config import Settings
from .errors import StorageError
from .store import MongoProductStore

logger = logging.getLogger(__name__)

PRODUCTS_COLLECTION = "products"


class Database:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: Optional[AsyncIOMotorClient] = None

    def get_database(self):
        """Return the catalog database handle."""
        if self.client is None:
            raise StorageError("Database is not connected")
        return self.client[self.settings.MONGO_DB]

    def product_store(self) -> MongoProductStore:
        return MongoProductStore(self.get_database()[PRODUCTS_COLLECTION])

    async def connect(self) -> None:
        """Open the Motor client and ping the server; StorageError if unreachable."""
        self.client = AsyncIOMotorClient(self.settings.MONGO_URI, tz_aware=True)
        try:
            await self.client.admin.command("ping")
        except PyMongoError as exc:
            self.client.close()
            self.client = None
            raise StorageError("Could not connect to MongoDB", detail=str(exc)) from exc
        logger.info("Connected to MongoDB: %s/%s", self.settings.MONGO_URI, self.settings.MONGO_DB)

    async def ping(self) -> None:
        await self.get_database().command("ping")

    async def close(self) -> None:
        """Release the connection pool."""
        if self.client:
            self.client.close()
            self.client = None
            logger.info("MongoDB connection closed")
