from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.database import get_db
from app.models.user import User
from app.repositories.user_repository import get_user_by_username
from app.services.sql_assistant import SqlAssistant
from app.utils.openai import get_openai_client


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    # No authentication: every request acts as the seeded default user
    user = get_user_by_username(db, settings.DEFAULT_USERNAME)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def get_sql_assistant(settings: Settings = Depends(get_settings)) -> SqlAssistant:
    try:
        client = get_openai_client(settings.OPENAI_API_KEY)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
    return SqlAssistant(client, model=settings.OPENAI_MODEL_NAME)
