import logging
import secrets
from datetime import timedelta
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from app.core.database import get_db, utcnow
from app.dependencies import get_current_user
from app.models.user import User
from app.repositories import query_repository, share_repository
from app.schemas.query import (
    FavoriteUpdate,
    ShareCreate,
    SharedQueryResponse,
    ShareResponse,
    SqlQueryResponse,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["queries"])

SHARE_TOKEN_BYTES = 9  # 12 URL-safe characters


@router.get("/queries", response_model=List[SqlQueryResponse])
def list_queries(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return query_repository.get_queries_by_user(db, current_user.id)


@router.get("/queries/favorites", response_model=List[SqlQueryResponse])
def list_favorites(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return query_repository.get_favorite_queries(db, current_user.id)


@router.patch("/queries/{query_id}/favorite", response_model=SqlQueryResponse)
def update_favorite(
    query_id: int,
    update: FavoriteUpdate,
    db: Session = Depends(get_db)
):
    updated = query_repository.update_query(db, query_id, is_favorite=update.is_favorite)
    if not updated:
        raise HTTPException(status_code=404, detail="Query not found")
    return updated


@router.delete("/queries/{query_id}", response_model=SuccessResponse)
def delete_query(query_id: int, db: Session = Depends(get_db)):
    if not query_repository.delete_query(db, query_id):
        raise HTTPException(status_code=404, detail="Query not found")
    share_repository.delete_shares_for_query(db, query_id)
    return SuccessResponse(success=True)


@router.post("/queries/{query_id}/share", response_model=ShareResponse, response_model_exclude_none=True)
def share_query(
    query_id: int,
    request: Request,
    share: ShareCreate = ShareCreate(),
    db: Session = Depends(get_db)
):
    query = query_repository.get_query(db, query_id)
    if not query:
        raise HTTPException(status_code=404, detail="Query not found")

    share_token = secrets.token_urlsafe(SHARE_TOKEN_BYTES)
    expires_at = None
    if share.expires_in is not None:
        expires_at = utcnow() + timedelta(seconds=share.expires_in)

    shared = share_repository.create_shared_query(
        db,
        query_id=query_id,
        share_token=share_token,
        is_public=share.is_public,
        expires_at=expires_at,
    )
    logger.info("Created share link for query %s (expires at %s)", query_id, expires_at)

    return ShareResponse(
        share_token=share_token,
        share_url=f"{request.base_url}shared/{share_token}",
        expires_at=shared.expires_at,
    )


@router.get("/shared/{token}", response_model=SharedQueryResponse)
def get_shared_query(token: str, db: Session = Depends(get_db)):
    shared = share_repository.get_shared_query(db, token)
    if not shared:
        raise HTTPException(status_code=404, detail="Shared query not found")

    # The expiry instant itself already counts as expired
    if shared.expires_at is not None and shared.expires_at <= utcnow():
        raise HTTPException(status_code=410, detail="Shared query has expired")

    query = query_repository.get_query(db, shared.query_id)
    if not query:
        raise HTTPException(status_code=404, detail="Original query not found")

    return SharedQueryResponse(
        query=SqlQueryResponse.model_validate(query),
        shared_at=shared.created_at,
        is_public=shared.is_public,
    )
