# tests/fakes.py
import asyncio

from app.domain.ports import StoragePort
from app.domain.results import Found, NotFound, StorageError


# ── in-memory gateway (route tests) ──────────────────────────────
class FakeGateway(StoragePort):
    def __init__(self, products=(), customers=(), fail: bool = False):
        self.products = {p.product_id: p for p in products}
        self.customers = {c.customer_id: c for c in customers}
        self.fail = fail
        self.connected = False
        self.closed = False
        self.timeouts = []

    async def connect(self, timeout: float) -> None:
        self.timeouts.append(timeout)
        self.connected = True

    async def _lookup(self, table, key):
        if self.fail:
            return StorageError(ConnectionError("mongo-internal:27017 refused connection"))
        if key not in table:
            return NotFound()
        return Found(table[key])

    async def find_product_by_business_id(self, product_id, timeout):
        self.timeouts.append(timeout)
        return await self._lookup(self.products, product_id)

    async def find_customer_by_business_id(self, customer_id, timeout):
        self.timeouts.append(timeout)
        return await self._lookup(self.customers, customer_id)

    async def close(self) -> None:
        self.closed = True


# ── fake motor objects (gateway tests) ───────────────────────────
class FakeCollection:
    def __init__(self, docs=(), error: Exception | None = None, delay: float = 0.0):
        self.docs = list(docs)
        self.error = error
        self.delay = delay
        self.queries = []

    async def find_one(self, flt):
        self.queries.append(flt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        for d in self.docs:
            if all(d.get(k) == v for k, v in flt.items()):
                return dict(d)
        return None


class FakeAdmin:
    def __init__(self, error: Exception | None = None, delay: float = 0.0):
        self.error = error
        self.delay = delay

    async def command(self, name):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return {"ok": 1.0}


class FakeClient:
    def __init__(self, collections: dict, admin: FakeAdmin | None = None, close_error=None):
        self.dbs = {}
        self.collections = collections
        self.admin = admin or FakeAdmin()
        self.close_error = close_error
        self.closed = False

    def __getitem__(self, name):
        if name not in self.dbs:
            db = {}
            for coll_name in ("products", "customers"):
                db[coll_name] = self.collections.get(coll_name, FakeCollection())
            self.dbs[name] = db
        return self.dbs[name]

    def close(self):
        if self.close_error:
            raise self.close_error
        self.closed = True


