# app/domain/models.py
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

# value of an unset timestamp, serialized as "0001-01-01T00:00:00Z"
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    name: str = ""
    description: str = ""
    category: str = ""
    price: float = 0.0
    stock: int = 0
    active: bool = False
    created_at: datetime = Field(ZERO_TIME, alias="createdAt")
    updated_at: datetime = Field(ZERO_TIME, alias="updatedAt")


class Customer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(alias="customerId")
    name: str = ""
    email: str = ""
    phone: str = ""
    active: bool = False
    created_at: datetime = Field(ZERO_TIME, alias="createdAt")
    updated_at: datetime = Field(ZERO_TIME, alias="updatedAt")
