# app/presentation/routers.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.config import LOOKUP_TIMEOUT_S
from app.container import get_gateway
from app.domain.models import Customer, Product
from app.domain.ports import StoragePort
from app.domain.results import Found, LookupResult, NotFound, StorageError
from app.presentation.schemas import ErrorResponse

# ──────────────────────────────────────────────────────────────────────
# Logging
# ──────────────────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)


def _product_summary(p: Product) -> str:
    return f"Product found: {p.product_id} - {p.name} (${p.price:.2f})"


def _customer_summary(c: Customer) -> str:
    return f"Customer found: {c.customer_id} - {c.name} (active: {c.active})"


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def to_response(result: LookupResult, resource: str, ident: str, summary) -> JSONResponse:
    """
    Map a gateway outcome to status + JSON body.

    `resource` is the capitalized noun ("Product", "Customer"); the 500 body
    uses its lower-case form. The storage cause is logged, never returned.
    """
    if isinstance(result, Found):
        logger.info(summary(result.entity))
        return JSONResponse(
            status_code=200,
            content=result.entity.model_dump(mode="json", by_alias=True),
        )
    if isinstance(result, NotFound):
        logger.info("%s not found: %s", resource, ident)
        return _error(
            404,
            f"{resource} not found",
            f"{resource} with ID '{ident}' does not exist",
        )
    if isinstance(result, StorageError):
        logger.error("Error fetching %s %s: %r", resource.lower(), ident, result.cause)
        return _error(
            500,
            "Database error",
            f"An error occurred while fetching the {resource.lower()}",
        )
    raise TypeError(f"unexpected lookup result: {result!r}")


_ERROR_RESPONSES = {
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

router = APIRouter(prefix="/api", responses=_ERROR_RESPONSES)

# ── PRODUCTS ─────────────────────────────────────────────────────
@router.get("/products/{product_id}", response_model=Product, tags=["products"])
async def get_product(product_id: str, gateway: StoragePort = Depends(get_gateway)):
    logger.info("GET /api/products/%s", product_id)
    result = await gateway.find_product_by_business_id(product_id, LOOKUP_TIMEOUT_S)
    return to_response(result, "Product", product_id, _product_summary)

# ── CUSTOMERS ────────────────────────────────────────────────────
@router.get("/customers/{customer_id}", response_model=Customer, tags=["customers"])
async def get_customer(customer_id: str, gateway: StoragePort = Depends(get_gateway)):
    logger.info("GET /api/customers/%s", customer_id)
    result = await gateway.find_customer_by_business_id(customer_id, LOOKUP_TIMEOUT_S)
    return to_response(result, "Customer", customer_id, _customer_summary)
