# app/infra/repo/mongo_repo.py
from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pydantic import BaseModel

from app.config import (
    CONNECT_TIMEOUT_S,
    CUSTOMERS_COLL,
    DB_NAME,
    LOOKUP_TIMEOUT_S,
    MONGO_URI,
    PRODUCTS_COLL,
)
from app.domain.errors import StartupFailure
from app.domain.models import Customer, Product
from app.domain.ports import StoragePort
from app.domain.results import Found, LookupResult, NotFound, StorageError

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class MongoStorageGateway(StoragePort):
    """
    Async gateway to the `products` and `customers` collections.

    The client and both collection handles are resolved once in the
    constructor and never reassigned, so a single instance can be shared by
    every request handler. Motor owns connection pooling.

    Pass `client` to substitute a fake (tests) or a preconfigured client.
    """

    def __init__(
        self,
        client: Optional[Any] = None,
        db_name: str = DB_NAME,
        products_coll: str = PRODUCTS_COLL,
        customers_coll: str = CUSTOMERS_COLL,
    ) -> None:
        if client is None:
            try:
                client = AsyncIOMotorClient(
                    MONGO_URI,
                    tz_aware=True,
                    serverSelectionTimeoutMS=int(CONNECT_TIMEOUT_S * 1000),
                )
            except Exception as e:
                # bad URI or options; raised before any network I/O
                log.error("Invalid MongoDB configuration: %r", e)
                raise StartupFailure(f"MongoDB misconfigured: {e!r}") from e
        self.client = client
        self.db = self.client[db_name]
        self.products: AsyncIOMotorCollection = self.db[products_coll]
        self.customers: AsyncIOMotorCollection = self.db[customers_coll]
        self.db_name = db_name

    # ──────────────────────────────────────────────────────────────
    #  Lifecycle
    # ──────────────────────────────────────────────────────────────
    async def connect(self, timeout: float = CONNECT_TIMEOUT_S) -> None:
        """Ping the server; the service is useless without storage, so any failure is fatal."""
        try:
            await asyncio.wait_for(self.client.admin.command("ping"), timeout)
        except Exception as e:
            log.error("MongoDB ping failed (db=%s): %r", self.db_name, e)
            raise StartupFailure(f"MongoDB unreachable: {e!r}") from e
        log.info("Connected to MongoDB (db=%s)", self.db_name)

    async def close(self) -> None:
        try:
            self.client.close()
        except Exception:
            log.exception("Error disconnecting from MongoDB")
            return
        log.info("Disconnected from MongoDB")

    # ──────────────────────────────────────────────────────────────
    #  Exact lookups by business identifier
    # ──────────────────────────────────────────────────────────────
    async def find_product_by_business_id(
        self, product_id: str, timeout: float = LOOKUP_TIMEOUT_S
    ) -> LookupResult[Product]:
        return await self._find_one(self.products, "productId", product_id, Product, timeout)

    async def find_customer_by_business_id(
        self, customer_id: str, timeout: float = LOOKUP_TIMEOUT_S
    ) -> LookupResult[Customer]:
        return await self._find_one(self.customers, "customerId", customer_id, Customer, timeout)

    async def _find_one(
        self,
        coll: AsyncIOMotorCollection,
        field: str,
        value: str,
        model: Type[M],
        timeout: float,
    ) -> LookupResult[M]:
        # wait_for cancels the pending query on expiry; no retry
        try:
            doc = await asyncio.wait_for(coll.find_one({field: value}), timeout)
        except Exception as e:
            # timeout, server selection, network, auth ...
            return StorageError(e)

        if doc is None:
            return NotFound()

        try:
            return Found(model.model_validate(doc))
        except Exception as e:
            # malformed stored document
            return StorageError(e)
