from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String

from app.core.database import Base, utcnow


class SharedQuery(Base):
    __tablename__ = "shared_queries"

    id = Column(Integer, primary_key=True, index=True)
    query_id = Column(Integer, ForeignKey("sql_queries.id"), nullable=False)
    share_token = Column(String, unique=True, index=True, nullable=False)
    is_public = Column(Boolean, nullable=False, default=False)
    expires_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
