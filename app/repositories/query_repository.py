from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.models.sql_query import SqlQuery


def get_query(db: Session, query_id: int):
    return db.get(SqlQuery, query_id)


def get_queries_by_user(db: Session, user_id: int):
    return (
        db.query(SqlQuery)
        .filter(SqlQuery.user_id == user_id)
        .order_by(SqlQuery.created_at.desc(), SqlQuery.id.desc())
        .all()
    )


def get_favorite_queries(db: Session, user_id: int):
    return (
        db.query(SqlQuery)
        .filter(SqlQuery.user_id == user_id, SqlQuery.is_favorite.is_(True))
        .order_by(SqlQuery.created_at.desc(), SqlQuery.id.desc())
        .all()
    )


def create_query(
    db: Session,
    user_id: int,
    natural_language_query: str,
    generated_sql: str,
    query_type: str,
    database: str,
    complexity: Optional[str] = None,
    execution_time: Optional[float] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> SqlQuery:
    db_query = SqlQuery(
        user_id=user_id,
        natural_language_query=natural_language_query,
        generated_sql=generated_sql,
        query_type=query_type,
        database=database,
        complexity=complexity,
        execution_time=execution_time,
        is_favorite=False,
        query_metadata=metadata or {},
    )
    db.add(db_query)
    db.commit()
    db.refresh(db_query)
    return db_query


def update_query(db: Session, query_id: int, **updates) -> Optional[SqlQuery]:
    db_query = get_query(db, query_id)
    if db_query is None:
        return None
    for field, value in updates.items():
        setattr(db_query, field, value)
    db.commit()
    db.refresh(db_query)
    return db_query


def delete_query(db: Session, query_id: int) -> bool:
    deleted = db.query(SqlQuery).filter(SqlQuery.id == query_id).delete()
    db.commit()
    return deleted > 0
