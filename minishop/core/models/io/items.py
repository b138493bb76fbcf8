"""
Item I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemCreateRequest(BaseModel):
    """Schema for stocking a new item under a caller-chosen identifier."""

    id: str = Field(min_length=1, max_length=64, description="Item identifier (e.g. an SKU)")
    name: str = Field(min_length=1, max_length=200)
    price: int = Field(default=0, ge=0)
    stock_quantity: int = Field(default=0, ge=0)


class ItemUpdateRequest(BaseModel):
    """Partial item update; omitted fields keep their value."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    price: Optional[int] = Field(default=None, ge=0)
    stock_quantity: Optional[int] = Field(default=None, ge=0)


class ItemRead(BaseModel):
    """Schema for reading an item from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    price: int
    stock_quantity: int
    created_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None
