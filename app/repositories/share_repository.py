from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from app.models.shared_query import SharedQuery


def get_shared_query(db: Session, share_token: str):
    return db.query(SharedQuery).filter(SharedQuery.share_token == share_token).first()


def create_shared_query(
    db: Session,
    query_id: int,
    share_token: str,
    is_public: bool = False,
    expires_at: Optional[datetime] = None,
) -> SharedQuery:
    db_shared = SharedQuery(
        query_id=query_id,
        share_token=share_token,
        is_public=is_public,
        expires_at=expires_at
    )
    db.add(db_shared)
    db.commit()
    db.refresh(db_shared)
    return db_shared


def delete_shares_for_query(db: Session, query_id: int) -> int:
    deleted = db.query(SharedQuery).filter(SharedQuery.query_id == query_id).delete()
    db.commit()
    return deleted
