# app/domain/ports.py
from __future__ import annotations
from abc import ABC, abstractmethod

from app.domain.models import Customer, Product
from app.domain.results import LookupResult


class StoragePort(ABC):
    """Read-only contract used by the router. Built once at startup, then injected."""

    @abstractmethod
    async def connect(self, timeout: float) -> None: ...

    @abstractmethod
    async def find_product_by_business_id(
        self, product_id: str, timeout: float
    ) -> LookupResult[Product]: ...

    @abstractmethod
    async def find_customer_by_business_id(
        self, customer_id: str, timeout: float
    ) -> LookupResult[Customer]: ...

    @abstractmethod
    async def close(self) -> None: ...
