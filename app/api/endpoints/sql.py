import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.endpoints.schemas import get_owned_schema, parse_schema_data
from app.core.database import get_db
from app.dependencies import get_current_user, get_sql_assistant
from app.models.user import User
from app.repositories import query_repository
from app.schemas.sql import (
    ExplainSqlRequest,
    FormatSqlRequest,
    FormatSqlResponse,
    GenerateSqlRequest,
    GenerateSqlResponse,
    SqlExplanationResult,
    SqlValidationResponse,
    TransformSqlRequest,
)
from app.services.schema_analyzer import schema_to_prompt_text
from app.services.sql_assistant import SqlAssistant
from app.utils import sql_parser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sql", tags=["sql"])


def _schema_text(db: Session, schema_id: Optional[int], user: User) -> Optional[str]:
    if schema_id is None:
        return None
    schema = get_owned_schema(db, schema_id, user)
    parsed = parse_schema_data(schema)
    return schema_to_prompt_text(schema.name, schema.database, parsed)


@router.post("/generate", response_model=GenerateSqlResponse)
def generate_sql(
    request: GenerateSqlRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    assistant: SqlAssistant = Depends(get_sql_assistant),
):
    if not request.natural_language_query.strip():
        raise HTTPException(status_code=400, detail="Natural language query is required")

    schema_text = _schema_text(db, request.schema_id, current_user)

    try:
        result = assistant.generate_sql(request, schema_text=schema_text)

        saved_query = query_repository.create_query(
            db,
            user_id=current_user.id,
            natural_language_query=request.natural_language_query,
            generated_sql=result.sql,
            query_type="generate",
            database=request.database or "MySQL",
            complexity=result.complexity,
            execution_time=result.estimated_execution_time,
            metadata={
                "explanation": result.explanation,
                "suggestions": result.suggestions,
                "usedTables": result.used_tables,
                "subject": request.subject,
                "analysisType": request.analysis_type,
                "options": request.options.model_dump(by_alias=True) if request.options else None,
            },
        )
    except Exception as e:
        logger.exception("SQL generation error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to generate SQL"
        )

    return GenerateSqlResponse(**result.model_dump(), query_id=saved_query.id)


@router.post("/transform", response_model=GenerateSqlResponse)
def transform_sql(
    request: TransformSqlRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    assistant: SqlAssistant = Depends(get_sql_assistant),
):
    if not request.original_sql.strip():
        raise HTTPException(status_code=400, detail="Original SQL is required")

    try:
        result = assistant.transform_sql(request)

        saved_query = query_repository.create_query(
            db,
            user_id=current_user.id,
            natural_language_query=f"Transform to {request.target_database}",
            generated_sql=result.sql,
            query_type="transform",
            database=request.target_database,
            complexity=result.complexity,
            execution_time=result.estimated_execution_time,
            metadata={
                "originalSql": request.original_sql,
                "explanation": result.explanation,
                "suggestions": result.suggestions,
                "usedTables": result.used_tables,
                "optimizationLevel": request.optimization_level,
            },
        )
    except Exception as e:
        logger.exception("SQL transformation error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to transform SQL"
        )

    return GenerateSqlResponse(**result.model_dump(), query_id=saved_query.id)


@router.post("/explain", response_model=SqlExplanationResult)
def explain_sql(
    request: ExplainSqlRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    assistant: SqlAssistant = Depends(get_sql_assistant),
):
    if not request.sql.strip():
        raise HTTPException(status_code=400, detail="SQL query is required")

    try:
        result = assistant.explain_sql(request)

        query_repository.create_query(
            db,
            user_id=current_user.id,
            natural_language_query="Explain SQL query",
            generated_sql=request.sql,
            query_type="explain",
            database="General",
            complexity=result.complexity,
            metadata={
                "explanation": result.explanation,
                "breakdown": result.breakdown,
                "performance": result.performance.model_dump(),
            },
        )
    except Exception as e:
        logger.exception("SQL explanation error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Failed to explain SQL"
        )

    return result


@router.post("/format", response_model=FormatSqlResponse)
def format_sql(request: FormatSqlRequest):
    if not request.sql.strip():
        raise HTTPException(status_code=400, detail="SQL query is required")

    formatted = sql_parser.format_sql(request.sql)
    validation = sql_parser.validate_sql(request.sql)

    return FormatSqlResponse(
        formatted=formatted,
        highlighted=sql_parser.highlight_sql(formatted),
        tables=sql_parser.extract_tables(request.sql),
        validation=SqlValidationResponse(is_valid=validation.is_valid, errors=validation.errors),
    )
