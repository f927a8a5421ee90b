# tests/conftest.py
from datetime import datetime, timezone

import pytest

from app.domain.models import Customer, Product

TS = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def widget() -> Product:
    return Product(
        product_id="P100",
        name="Widget",
        description="A widget",
        category="tools",
        price=9.99,
        stock=5,
        active=True,
        created_at=TS,
        updated_at=TS,
    )


@pytest.fixture
def ana() -> Customer:
    return Customer(
        customer_id="customer-1",
        name="Ana Torres",
        email="ana@example.com",
        phone="+57 300 000 0000",
        active=True,
        created_at=TS,
        updated_at=TS,
    )
