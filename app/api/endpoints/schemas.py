import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.dependencies import get_current_user
from app.models.schema import Schema
from app.models.user import User
from app.repositories import schema_repository
from app.schemas.db_schema import (
    DatabaseSchema,
    DdlResponse,
    Dialect,
    SchemaAnalysisResponse,
    SchemaCreate,
    SchemaResponse,
)
from app.schemas.query import SuccessResponse
from app.services.schema_analyzer import analyze_schema, generate_ddl, validate_schema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schemas", tags=["schemas"])


def get_owned_schema(db: Session, schema_id: int, user: User) -> Schema:
    schema = schema_repository.get_schema(db, schema_id)
    if not schema or schema.user_id != user.id:
        raise HTTPException(status_code=404, detail="Schema not found")
    return schema


def parse_schema_data(schema: Schema) -> DatabaseSchema:
    try:
        return DatabaseSchema.model_validate(schema.schema_data)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid schema data: {e}")


@router.get("", response_model=List[SchemaResponse])
def list_schemas(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return schema_repository.get_schemas_by_user(db, current_user.id)


@router.post("", response_model=SchemaResponse)
def create_schema(
    schema: SchemaCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if not schema.name or not schema.database or not schema.schema_data:
        raise HTTPException(status_code=400, detail="Name, database, and schema data are required")

    created = schema_repository.create_schema(
        db,
        user_id=current_user.id,
        name=schema.name,
        database=schema.database,
        schema_data=schema.schema_data,
    )
    logger.info("Saved schema '%s' (%s)", created.name, created.database)
    return created


@router.delete("/{schema_id}", response_model=SuccessResponse)
def delete_schema(
    schema_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    get_owned_schema(db, schema_id, current_user)
    schema_repository.delete_schema(db, schema_id)
    return SuccessResponse(success=True)


@router.get("/{schema_id}/analysis", response_model=SchemaAnalysisResponse)
def get_schema_analysis(
    schema_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    parsed = parse_schema_data(get_owned_schema(db, schema_id, current_user))
    return SchemaAnalysisResponse(
        analysis=analyze_schema(parsed),
        validation=validate_schema(parsed),
    )


@router.get("/{schema_id}/ddl", response_model=DdlResponse)
def get_schema_ddl(
    schema_id: int,
    dialect: Dialect = Query("mysql"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    parsed = parse_schema_data(get_owned_schema(db, schema_id, current_user))
    return DdlResponse(dialect=dialect, ddl=generate_ddl(parsed, dialect))
