# app/presentation/schemas.py
from __future__ import annotations
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Short error title, e.g. 'Product not found'")
    message: str = Field(..., description="Human readable explanation")
