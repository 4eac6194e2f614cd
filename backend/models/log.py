from sqlalchemy import Column, Integer, String, DateTime, JSON
from database import Base
from utils.time_utils import utcnow

# Represents audit log rows tracking user actions and ledger events
class Log(Base):
    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, index=True)

    # Event timestamp and core action details
    ts = Column(DateTime, nullable=False, default=utcnow, index=True)
    user_id = Column(Integer, nullable=True)
    action = Column(String(50), index=True)
    resource = Column(String(50), index=True)
    status = Column(String(20), index=True)

    # JSON container for flexible context data
    meta = Column(JSON, nullable=True)
