from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String

from app.core.database import Base, utcnow


class Schema(Base):
    __tablename__ = "schemas"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    name = Column(String, nullable=False)
    database = Column(String, nullable=False)
    schema_data = Column(JSON, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
