# backend/models/transaction.py
from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from database import Base
from utils.time_utils import utcnow

class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    # Plain reference: deleting a product keeps its history
    product_id = Column(Integer, nullable=False, index=True)

    # Movement classification (IN or OUT)
    type = Column(String(3), nullable=False)
    quantity = Column(Integer, CheckConstraint("quantity > 0"), nullable=False)

    notes = Column(String, nullable=True)

    timestamp = Column(DateTime, nullable=False, default=utcnow, index=True)
