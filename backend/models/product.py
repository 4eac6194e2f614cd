# backend/models/product.py
from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from database import Base
from utils.time_utils import utcnow

# Model Product
# A single catalog item tracked in the warehouse.
# current_stock is only ever changed by a product update or by the ledger.
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    sku = Column(String, unique=True, nullable=False, index=True)
    category = Column(String, nullable=False)

    current_stock = Column(Integer, CheckConstraint("current_stock >= 0"), nullable=False, default=0)

    created_at = Column(DateTime, nullable=False, default=utcnow)
