from typing import Any, Dict

from sqlalchemy.orm import Session

from app.models.schema import Schema


def get_schema(db: Session, schema_id: int):
    return db.get(Schema, schema_id)


def get_schemas_by_user(db: Session, user_id: int):
    return (
        db.query(Schema)
        .filter(Schema.user_id == user_id)
        .order_by(Schema.created_at.desc(), Schema.id.desc())
        .all()
    )


def create_schema(db: Session, user_id: int, name: str, database: str, schema_data: Dict[str, Any]) -> Schema:
    db_schema = Schema(
        user_id=user_id,
        name=name,
        database=database,
        schema_data=schema_data
    )
    db.add(db_schema)
    db.commit()
    db.refresh(db_schema)
    return db_schema


def delete_schema(db: Session, schema_id: int) -> bool:
    deleted = db.query(Schema).filter(Schema.id == schema_id).delete()
    db.commit()
    return deleted > 0
