from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from app.schemas.base import CamelModel

ReferentialAction = Literal["CASCADE", "SET NULL", "RESTRICT", "NO ACTION"]
Dialect = Literal["mysql", "postgresql", "sqlite"]


# --- Stored schema records ---
class SchemaCreate(CamelModel):
    # Missing or empty values are rejected by the endpoint with a 400
    name: Optional[str] = None
    database: Optional[str] = None
    schema_data: Optional[Dict[str, Any]] = None


class SchemaResponse(CamelModel):
    id: int
    user_id: int
    name: str
    database: str
    schema_data: Dict[str, Any]
    created_at: datetime


# --- Shape of schemaData ---
class ColumnDefinition(CamelModel):
    type: str
    nullable: bool = False
    default: Any = None
    auto_increment: bool = False
    unique: bool = False
    comment: Optional[str] = None


class ForeignKeyDefinition(CamelModel):
    columns: List[str]
    referenced_table: str
    referenced_columns: List[str]
    on_delete: Optional[ReferentialAction] = None
    on_update: Optional[ReferentialAction] = None


class IndexDefinition(CamelModel):
    table: str
    columns: List[str]
    unique: bool = False
    type: Optional[Literal["BTREE", "HASH", "GIN", "GIST"]] = None


class ViewDefinition(CamelModel):
    query: str
    columns: Optional[List[str]] = None


class ConstraintDefinition(CamelModel):
    type: Literal["CHECK", "UNIQUE", "EXCLUDE"]
    expression: str
    name: Optional[str] = None


class TableDefinition(CamelModel):
    columns: Dict[str, ColumnDefinition] = {}
    primary_key: Optional[List[str]] = None
    foreign_keys: Optional[List[ForeignKeyDefinition]] = None
    indexes: Optional[List[str]] = None
    constraints: Optional[List[ConstraintDefinition]] = None


class DatabaseSchema(CamelModel):
    tables: Dict[str, TableDefinition] = {}
    indexes: Optional[Dict[str, IndexDefinition]] = None
    views: Optional[Dict[str, ViewDefinition]] = None


# --- Analysis output ---
class Relationship(CamelModel):
    from_table: str = Field(alias="from")
    to: str
    type: Literal["one-to-one", "one-to-many", "many-to-many"] = "one-to-many"


class SchemaAnalysis(CamelModel):
    table_count: int
    column_count: int
    index_count: int
    relationships: List[Relationship]
    suggestions: List[str]


class SchemaValidation(CamelModel):
    is_valid: bool
    errors: List[str]
    warnings: List[str]


class SchemaAnalysisResponse(CamelModel):
    analysis: SchemaAnalysis
    validation: SchemaValidation


class DdlResponse(CamelModel):
    dialect: Dialect
    ddl: str
