from sqlalchemy import Column, DateTime, Integer, String

from app.core.database import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    # Stored as-is, there is no login flow in this service
    password = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
