from typing import Any, List, Literal, Optional, Union

from app.schemas.base import CamelModel

Complexity = Literal["simple", "medium", "complex"]
OptimizationLevel = Literal["standard", "performance", "readability"]


class GenerateOptions(CamelModel):
    limit: Optional[int] = None
    sort_order: Optional[Literal["auto", "asc", "desc"]] = None
    optimization_level: Optional[OptimizationLevel] = None


class GenerateSqlRequest(CamelModel):
    # Blank values are rejected by the endpoint with a 400
    natural_language_query: str = ""
    database: str = "MySQL"
    subject: Optional[str] = None
    analysis_type: Optional[str] = None
    options: Optional[GenerateOptions] = None
    schema_id: Optional[int] = None


class TransformSqlRequest(CamelModel):
    original_sql: str = ""
    target_database: str
    optimization_level: Optional[OptimizationLevel] = None


class ExplainSqlRequest(CamelModel):
    sql: str = ""


class FormatSqlRequest(CamelModel):
    sql: str = ""


class SqlGenerationResult(CamelModel):
    sql: str = ""
    explanation: str = ""
    complexity: Complexity = "medium"
    # Model output passes through unchanged apart from the complexity label
    estimated_execution_time: Union[int, float] = 1000
    suggestions: List[Any] = []
    used_tables: List[Any] = []


class GenerateSqlResponse(SqlGenerationResult):
    query_id: int


class PerformanceRating(CamelModel):
    rating: Any = 5
    suggestions: List[Any] = []


class SqlExplanationResult(CamelModel):
    explanation: str = ""
    breakdown: List[Any] = []  # usually {section, description} objects
    complexity: Complexity = "medium"
    performance: PerformanceRating = PerformanceRating()


class SqlValidationResponse(CamelModel):
    is_valid: bool
    errors: List[str]


class FormatSqlResponse(CamelModel):
    formatted: str
    highlighted: str
    tables: List[str]
    validation: SqlValidationResponse
