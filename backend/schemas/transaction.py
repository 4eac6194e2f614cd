# backend/schemas/transaction.py
from pydantic import Field
from typing import Optional, Literal

from schemas.common import ApiModel, UtcDatetime

# Allowed types for stock movements
TransactionType = Literal["IN", "OUT"]

# Schema for recording a stock movement
class TransactionCreate(ApiModel):
    product_id: int
    type: TransactionType
    quantity: int = Field(gt=0)
    notes: Optional[str] = None

# Schema for returning a stored transaction
class TransactionOut(ApiModel):
    id: int
    product_id: int
    type: TransactionType
    quantity: int
    notes: Optional[str] = None
    timestamp: UtcDatetime

# Transaction joined with the product it refers to (resolved at read time)
class TransactionWithProductOut(TransactionOut):
    product_name: str
    product_sku: str
