# backend/models/users.py
from sqlalchemy import Column, Integer, String
from database import Base

# Represents a user account able to log into the tracker.
# Passwords are stored as given; login is a plain equality check.
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
