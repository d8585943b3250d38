from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String

from app.core.database import Base, utcnow


class SqlQuery(Base):
    __tablename__ = "sql_queries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    natural_language_query = Column(String, nullable=False)
    generated_sql = Column(String, nullable=False)
    query_type = Column(String, nullable=False)  # generate, transform, explain
    database = Column(String, nullable=False)
    complexity = Column(String, nullable=True)  # simple, medium, complex
    execution_time = Column(Float, nullable=True)  # milliseconds, as estimated by the model
    is_favorite = Column(Boolean, nullable=False, default=False)
    # "metadata" is reserved on declarative classes
    query_metadata = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(DateTime, default=utcnow, nullable=False)
