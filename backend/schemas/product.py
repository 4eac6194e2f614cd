# backend/schemas/product.py
from pydantic import Field
from typing import Optional

from schemas.common import ApiModel, UtcDatetime


# Schema for creating a new product
class ProductCreate(ApiModel):
    name: str = Field(min_length=1)
    sku: str = Field(min_length=1)
    category: str = Field(min_length=1)
    current_stock: int = Field(default=0, ge=0)


# Schema for partial product updates
class ProductUpdate(ApiModel):
    """Schema for PUT requests - all fields optional, only given ones are applied."""
    name: Optional[str] = Field(None, min_length=1)
    sku: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    current_stock: Optional[int] = Field(None, ge=0)


# Full product representation
class ProductOut(ApiModel):
    id: int
    name: str
    sku: str
    category: str
    current_stock: int
    created_at: UtcDatetime
