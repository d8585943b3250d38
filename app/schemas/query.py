from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import AliasChoices, Field

from app.schemas.base import CamelModel

# One hundred years; larger offsets overflow datetime
MAX_SHARE_SECONDS = 100 * 365 * 24 * 60 * 60


class SqlQueryResponse(CamelModel):
    id: int
    user_id: int
    natural_language_query: str
    generated_sql: str
    query_type: str
    database: str
    complexity: Optional[str] = None
    execution_time: Optional[Union[int, float]] = None
    is_favorite: bool = False
    # ORM attribute is query_metadata, wire name is metadata
    query_metadata: Dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("query_metadata", "metadata"),
        serialization_alias="metadata",
    )
    created_at: datetime


class FavoriteUpdate(CamelModel):
    is_favorite: bool


class ShareCreate(CamelModel):
    is_public: bool = False
    expires_in: Optional[int] = Field(default=None, ge=0, le=MAX_SHARE_SECONDS)  # seconds


class ShareResponse(CamelModel):
    share_token: str
    share_url: str
    expires_at: Optional[datetime] = None


class SharedQueryResponse(CamelModel):
    query: SqlQueryResponse
    shared_at: datetime
    is_public: bool


class SuccessResponse(CamelModel):
    success: bool = True
